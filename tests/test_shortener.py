import json
from datetime import datetime, timezone

import pytest

from linkshort.shortener import (
    InvalidURLError,
    URLMapping,
    UrlStore,
    generate_short_code,
    is_reserved_keyword,
)

CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


@pytest.fixture
def store(tmp_path):
    return UrlStore(tmp_path / "url_data.json")


@pytest.mark.parametrize("keyword", ["admin", "api", "health", "ADMIN", "Api"])
def test_reserved_keywords(keyword):
    assert is_reserved_keyword(keyword) is True


@pytest.mark.parametrize("alias", ["my-link", "adminx", "shop"])
def test_non_reserved_words(alias):
    assert is_reserved_keyword(alias) is False


def test_generate_short_code_shape():
    for _ in range(50):
        code = generate_short_code()
        assert len(code) == 7
        assert set(code) <= set(CHARSET)


def test_create_basic(store):
    mapping = store.create("https://example.com")
    assert mapping.original_url == "https://example.com"
    assert len(mapping.short_code) == 7
    assert mapping.click_count == 0
    assert mapping.is_active is True
    assert mapping.id.startswith("url_")
    assert store.get(mapping.short_code) is mapping


def test_create_invalid_url(store):
    with pytest.raises(InvalidURLError, match="URL must start with http:// or https://"):
        store.create("invalid-url")
    assert store.urls == {}


def test_create_writes_file(store):
    mapping = store.create("http://example.com/page")
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["url_mappings"][mapping.short_code]["original_url"] == "http://example.com/page"
    assert data["alias_mappings"] == {}


def test_get_unknown_code(store):
    assert store.get("nothere") is None


def test_save_load_round_trip(store):
    first = store.create("https://example.com/a")
    second = store.create("https://example.com/b")
    reloaded = UrlStore(store.path)
    reloaded.load()
    assert reloaded.urls == {first.short_code: first, second.short_code: second}


def test_load_missing_file_keeps_empty(tmp_path):
    store = UrlStore(tmp_path / "absent.json")
    store.load()
    assert store.urls == {}
    assert store.aliases == {}


def test_load_corrupt_file_keeps_state(store, capsys):
    store.path.write_text("{not json", encoding="utf-8")
    store.load()
    assert store.urls == {}
    assert "Error loading data" in capsys.readouterr().out


def test_load_null_sections(store):
    store.path.write_text(json.dumps({"url_mappings": None}), encoding="utf-8")
    store.load()
    assert store.urls == {}
    assert store.aliases == {}


def test_mapping_dict_round_trip():
    mapping = URLMapping(
        id="url_1",
        original_url="https://example.com",
        short_code="abc1234",
        created_at=datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc),
        custom_alias="my-link",
        expires_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        click_count=3,
    )
    assert URLMapping.from_dict(mapping.to_dict()) == mapping


def test_mapping_omits_empty_optional_fields():
    mapping = URLMapping(
        id="url_1",
        original_url="https://example.com",
        short_code="abc1234",
        created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )
    data = mapping.to_dict()
    assert "custom_alias" not in data
    assert "expires_at" not in data
    assert data["created_at"].endswith("Z")


def test_mapping_from_dict_nanosecond_time():
    mapping = URLMapping.from_dict(
        {
            "id": "url_1",
            "original_url": "https://example.com",
            "short_code": "abc1234",
            "created_at": "2024-01-02T03:04:05.123456789Z",
            "click_count": 2,
            "is_active": True,
        }
    )
    assert mapping.created_at == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    assert mapping.click_count == 2


def test_mapping_from_dict_missing_active_is_false():
    mapping = URLMapping.from_dict({"id": "x", "original_url": "https://example.com"})
    assert mapping.is_active is False