[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkshort"
version = "0.1.0"
description = "A small URL shortener web service with click analytics and JSON-file storage"
requires-python = ">=3.10"
keywords = ["url", "shortener", "flask", "analytics", "redirect"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
linkshort = "linkshort.app:main"

[tool.hatch.build.targets.wheel]
packages = ["linkshort"]

[tool.pytest.ini_options]
addopts = "-ra"
