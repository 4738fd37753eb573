# linkshort

A small URL shortener web service built on Flask. It turns long `http://`
or `https://` URLs into random seven-character alphanumeric short codes,
redirects visitors from a short code to the original address, and keeps a
log of clicks that can be queried for analytics.

Mappings and clicks are stored as JSON files, by default `url_data.json`
and `analytics_data.json` in the working directory. Both files are read
at start-up if they exist and rewritten after every change.

## Installation

```
pip install .
```

## Running the server

```
linkshort
```

Options:

- `--host` – address to bind to (default `0.0.0.0`)
- `--port` – port to listen on (default `8080`)

The server is Flask's built-in development server.

## HTTP API

| Method | Path                | Description                                   |
|--------|---------------------|-----------------------------------------------|
| POST   | `/shorten`          | Create a short code for a URL                 |
| GET    | `/<code>`           | Redirect (301) to the original URL            |
| GET    | `/analytics/<code>` | Click statistics for a short code             |
| GET    | `/health`           | Returns `{"status": "healthy"}`               |

Every response carries `Access-Control-Allow-*` headers allowing any
origin, and `OPTIONS` requests are answered with `204 No Content`.

### Shortening a URL

Request body:

```json
{"url": "https://example.com"}
```

Response (`201 Created`):

```json
{
  "short_url": "http://localhost:8080/aB3dE9x",
  "short_code": "aB3dE9x",
  "original_url": "https://example.com"
}
```

The `short_url` always uses `http://localhost:8080` as its base.

- A body that is not a JSON object, lacks a non-empty string `url`, or has
  a `custom_alias` that is not a string gets `400` with
  `{"error": "Invalid request format"}`.
- A URL that does not start with `http://` or `https://` gets `400` with
  `{"error": "URL must start with http:// or https://"}`.
- If the data file cannot be written, the answer is `500`.

### Redirecting

`GET /<code>` answers `301` to the original URL and records a click with
the client's IP address. An unknown or inactive code returns `404` with
`{"error": "Short URL not found"}`.

### Analytics

`GET /analytics/<code>` returns:

- `short_code`, `original_url`, `created_at` (RFC 3339)
- `total_clicks` – the mapping's click count
- `unique_clicks` – the number of distinct client IPs that clicked
- `recent_clicks` – the ten most recent click records (`null` if there
  are none)

An unknown code returns `404`.

## Using it from Python

```python
from linkshort.app import create_app
from linkshort.analytics import ClickLog
from linkshort.shortener import UrlStore

store = UrlStore("url_data.json")
store.load()
clicks = ClickLog("analytics_data.json")
clicks.load()

app = create_app(store, clicks)
app.run(port=8080)
```

`create_app()` with no arguments builds and loads a store and a click log
on the default file names.

- `UrlStore.create(url)` makes and saves a new `URLMapping`, raising
  `InvalidURLError` for a URL that is not `http://` or `https://`.
- `UrlStore.get(code)` looks a mapping up, returning `None` if absent.
- `ClickLog.record(code, ip, store)` logs a click and increments the
  mapping's click count.
- `ClickLog.summary(code, store)` builds the `AnalyticsReport` the
  analytics endpoint returns, raising `KeyError` for an unknown code.
- `linkshort.shortener.is_reserved_keyword(alias)` tells, case-insensitively,
  whether a word is reserved (`admin`, `api`, `health`, `analytics`, …).
- `linkshort.validator.validate_alias_format(alias)` raises
  `AliasFormatError` unless the alias is 3–20 characters of letters,
  digits and hyphens, not starting or ending with a hyphen.

## What it does not do

- Custom aliases are not supported. A `custom_alias` field in a
  `/shorten` request is checked to be a string and otherwise ignored;
  every link gets a random code. The alias-format and reserved-word
  helpers are not applied by the service.
- Links never expire, and nothing deactivates a mapping.
- Every click is counted in `total_clicks`, including repeated clicks
  from the same IP; only `unique_clicks` counts distinct IPs.
- The user agent of a click is not recorded.

## Running the tests

```
pip install ".[test]"
pytest
```