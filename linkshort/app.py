"""HTTP front end for the link shortener."""

import argparse
import logging

from flask import Flask, jsonify, redirect, request

from linkshort.analytics import ClickLog
from linkshort.shortener import InvalidURLError, UrlStore

__all__ = ["create_app", "main"]

log = logging.getLogger(__name__)

SHORT_URL_BASE = "http://localhost:8080"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _not_found():
    return jsonify(error="Short URL not found"), 404


def create_app(url_store=None, click_log=None):
    """Build the Flask application around a URL store and a click log."""
    if url_store is None:
        url_store = UrlStore()
        url_store.load()
    if click_log is None:
        click_log = ClickLog()
        click_log.load()

    app = Flask(__name__)
    app.config["URL_STORE"] = url_store
    app.config["CLICK_LOG"] = click_log

    @app.before_request
    def _preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def _cors(response):
        response.headers.update(_CORS_HEADERS)
        return response

    @app.post("/shorten")
    def shorten():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify(error="Invalid request format"), 400
        url = body.get("url")
        alias = body.get("custom_alias")
        if not isinstance(url, str) or not url or (alias is not None and not isinstance(alias, str)):
            return jsonify(error="Invalid request format"), 400

        try:
            mapping = url_store.create(url)
        except InvalidURLError as exc:
            return jsonify(error=str(exc)), 400
        except OSError:
            return jsonify(error="Failed to save URL mapping"), 500

        return (
            jsonify(
                short_url=f"{SHORT_URL_BASE}/{mapping.short_code}",
                short_code=mapping.short_code,
                original_url=url,
            ),
            201,
        )

    @app.get("/health")
    def health():
        return jsonify(status="healthy")

    @app.get("/analytics/<code>")
    def analytics(code):
        try:
            report = click_log.summary(code, url_store)
        except KeyError:
            return _not_found()
        return jsonify(report.to_dict())

    @app.get("/<code>")
    def follow(code):
        mapping = url_store.get(code)
        if mapping is None or not mapping.is_active:
            return _not_found()
        click_log.record(code, request.remote_addr or "", url_store)
        return redirect(mapping.original_url, code=301)

    return app


def main(argv=None):
    """Run the shortener service."""
    parser = argparse.ArgumentParser(prog="linkshort", description="URL shortener service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = create_app()
    log.info("URL Shortener API starting on :%d", args.port)
    app.run(host=args.host, port=args.port)
    return 0