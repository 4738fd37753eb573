"""Click recording and per-link analytics."""

import contextlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from linkshort.shortener import format_time, parse_time

__all__ = [
    "ClickRecord",
    "AnalyticsReport",
    "ClickLog",
    "DEFAULT_ANALYTICS_FILE",
    "RECENT_CLICK_LIMIT",
]

DEFAULT_ANALYTICS_FILE = "analytics_data.json"
RECENT_CLICK_LIMIT = 10

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class ClickRecord:
    """One visit to a short link."""

    timestamp: datetime
    ip: str
    short_code: str
    user_agent: str = ""

    def to_dict(self):
        return {
            "timestamp": format_time(self.timestamp),
            "ip": self.ip,
            "user_agent": self.user_agent,
            "short_code": self.short_code,
        }

    @classmethod
    def from_dict(cls, data):
        stamp = data.get("timestamp")
        return cls(
            timestamp=parse_time(stamp) if stamp else _ZERO_TIME,
            ip=data.get("ip") or "",
            short_code=data.get("short_code") or "",
            user_agent=data.get("user_agent") or "",
        )


@dataclass
class AnalyticsReport:
    """Click statistics for a single short link."""

    short_code: str
    original_url: str
    total_clicks: int
    unique_clicks: int
    created_at: datetime
    recent_clicks: list = field(default_factory=list)

    def to_dict(self):
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "total_clicks": self.total_clicks,
            "unique_clicks": self.unique_clicks,
            "recent_clicks": [r.to_dict() for r in self.recent_clicks] or None,
            "created_at": format_time(self.created_at),
        }


class ClickLog:
    """All recorded clicks, held in memory and persisted as a JSON file."""

    def __init__(self, path=DEFAULT_ANALYTICS_FILE):
        self.path = Path(path)
        self.records = []

    def load(self):
        """Replace the records with those in the analytics file, if it can be read."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            return
        try:
            data = json.loads(raw)
            if data is None:
                records = []
            elif isinstance(data, list):
                records = [ClickRecord.from_dict(item) for item in data if item is not None]
            else:
                raise ValueError("analytics file does not hold a list")
        except (ValueError, TypeError, AttributeError) as exc:
            print(f"Error loading analytics: {exc}")
            return
        self.records = records

    def save(self):
        """Write all records to the analytics file."""
        payload = [record.to_dict() for record in self.records]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def record(self, short_code, client_ip, store):
        """Log a click on a short code and bump the mapping's click count."""
        entry = ClickRecord(
            timestamp=datetime.now(timezone.utc),
            ip=client_ip,
            short_code=short_code,
        )
        self.records.append(entry)

        mapping = store.get(short_code)
        if mapping is not None:
            mapping.click_count += 1

        with contextlib.suppress(OSError):
            self.save()
        with contextlib.suppress(OSError):
            store.save()
        return entry

    def summary(self, code, store):
        """Build the analytics report for a code; raise KeyError if it is unknown."""
        mapping = store.get(code)
        if mapping is None:
            raise KeyError(code)

        clicks = [r for r in self.records if r.short_code == code]
        unique_ips = {r.ip for r in clicks}

        return AnalyticsReport(
            short_code=code,
            original_url=mapping.original_url,
            total_clicks=mapping.click_count,
            unique_clicks=len(unique_ips),
            created_at=mapping.created_at,
            recent_clicks=clicks[-RECENT_CLICK_LIMIT:],
        )