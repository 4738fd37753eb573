"""Short-code generation and persistent storage of URL mappings."""

import json
import re
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

__all__ = [
    "InvalidURLError",
    "URLMapping",
    "UrlStore",
    "generate_short_code",
    "is_reserved_keyword",
    "RESERVED_KEYWORDS",
    "DEFAULT_DATA_FILE",
]

DEFAULT_DATA_FILE = "url_data.json"

SHORT_CODE_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SHORT_CODE_LENGTH = 7

RESERVED_KEYWORDS = (
    "admin", "api", "health", "analytics", "dashboard",
    "login", "logout", "register", "settings", "help",
    "about", "contact", "privacy", "terms", "docs",
)

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"\.(\d+)")


class InvalidURLError(ValueError):
    """Raised when a URL to shorten is not an http or https URL."""


def format_time(value):
    """Render a datetime as an RFC 3339 timestamp."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_time(text):
    """Parse an RFC 3339 timestamp, tolerating nanosecond precision."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class URLMapping:
    """A stored link from a short code to its original URL."""

    id: str
    original_url: str
    short_code: str
    created_at: datetime
    custom_alias: str = ""
    expires_at: datetime | None = None
    click_count: int = 0
    is_active: bool = True

    def to_dict(self):
        data = {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
        }
        if self.custom_alias:
            data["custom_alias"] = self.custom_alias
        data["created_at"] = format_time(self.created_at)
        if self.expires_at is not None:
            data["expires_at"] = format_time(self.expires_at)
        data["click_count"] = self.click_count
        data["is_active"] = self.is_active
        return data

    @classmethod
    def from_dict(cls, data):
        created = data.get("created_at")
        expires = data.get("expires_at")
        return cls(
            id=data.get("id", ""),
            original_url=data.get("original_url", ""),
            short_code=data.get("short_code", ""),
            created_at=parse_time(created) if created else _ZERO_TIME,
            custom_alias=data.get("custom_alias") or "",
            expires_at=parse_time(expires) if expires else None,
            click_count=int(data.get("click_count", 0)),
            is_active=bool(data.get("is_active", False)),
        )


def generate_short_code():
    """Return a random seven-character alphanumeric code."""
    return "".join(secrets.choice(SHORT_CODE_CHARSET) for _ in range(SHORT_CODE_LENGTH))


def is_reserved_keyword(alias):
    """Tell whether an alias collides, case-insensitively, with a reserved word."""
    return alias.lower() in RESERVED_KEYWORDS


def _mappings_from_json(raw):
    if not raw:
        return {}
    return {code: URLMapping.from_dict(item) for code, item in raw.items() if item is not None}


class UrlStore:
    """URL mappings held in memory and persisted as a JSON file."""

    def __init__(self, path=DEFAULT_DATA_FILE):
        self.path = Path(path)
        self.urls = {}
        self.aliases = {}

    def load(self):
        """Replace the mappings with those in the data file, if it can be read."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            return
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("data file does not hold an object")
            urls = _mappings_from_json(data.get("url_mappings"))
            aliases = _mappings_from_json(data.get("alias_mappings"))
        except (ValueError, TypeError, AttributeError) as exc:
            print(f"Error loading data: {exc}")
            return
        self.urls = urls
        self.aliases = aliases

    def save(self):
        """Write all mappings to the data file."""
        data = {
            "url_mappings": {code: m.to_dict() for code, m in self.urls.items()},
            "alias_mappings": {code: m.to_dict() for code, m in self.aliases.items()},
        }
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, code):
        """Return the mapping stored under a short code, or None."""
        return self.urls.get(code)

    def create(self, original_url):
        """Store a new mapping under a fresh random code and persist it."""
        if not original_url.startswith(("http://", "https://")):
            raise InvalidURLError("URL must start with http:// or https://")

        code = generate_short_code()
        while code in self.urls:
            code = generate_short_code()

        mapping = URLMapping(
            id=f"url_{time.time_ns()}",
            original_url=original_url,
            short_code=code,
            created_at=datetime.now(timezone.utc),
        )
        self.urls[code] = mapping
        self.save()
        return mapping