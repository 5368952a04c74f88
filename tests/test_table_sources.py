# tests/test_table_sources.py
"""Tests for table sources: bundled asset, user data, remote fetch and the TTL cache file."""

from __future__ import annotations

import os
import time
import types

import pytest
import requests

from named_colors import CacheIOError, FetchError, ParseError
from named_colors.table import sources
from named_colors.table.sources import (
    Bundled,
    Remote,
    RemoteCached,
    UserProvided,
    fetch_table,
    is_cache_fresh,
    resolve,
)

BODY = b'{"red": {"r": 255, "g": 0, "b": 0}}'
URL = "https://example.test/named_colors.json"
DAY = 24 * 60 * 60


# ── Dummies ───────────────────────────────────────────────────────────────────
class DummyResponse:
    def __init__(self, status_code=200, content=BODY):
        self.status_code = status_code
        self.content = content


class CountingSession:
    """Fake requests.Session recording every GET."""

    def __init__(self, response=None, exc=None):
        self.calls = []
        self._response = response or DummyResponse()
        self._exc = exc

    def get(self, url, timeout=None):
        self.calls.append(url)
        if self._exc is not None:
            raise self._exc
        return self._response


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Fail loudly if a test reaches the module-level session."""

    def raising_get(*args, **kwargs):
        raise AssertionError("Network call through the shared session")

    monkeypatch.setattr(sources, "_session", types.SimpleNamespace(get=raising_get))


def _age(path, seconds):
    then = time.time() - seconds
    os.utime(path, (then, then))


# ── Bundled / user data ──────────────────────────────────────────────────────
def test_bundled_returns_asset_bytes():
    data = resolve(Bundled())
    assert data.lstrip().startswith(b"{")
    assert b'"red"' in data


def test_bundled_missing_resource():
    with pytest.raises(CacheIOError):
        resolve(Bundled("does_not_exist.json"))


def test_user_provided_is_verbatim():
    assert resolve(UserProvided("{}")) == b"{}"
    assert resolve(UserProvided(BODY)) == BODY


def test_unknown_source_type():
    with pytest.raises(TypeError):
        resolve("bundled")  # type: ignore[arg-type]


# ── fetch_table ──────────────────────────────────────────────────────────────
def test_fetch_ok():
    session = CountingSession()
    assert fetch_table(URL, session=session) == BODY
    assert session.calls == [URL]


def test_fetch_uses_module_session_by_default(monkeypatch):
    session = CountingSession()
    monkeypatch.setattr(sources, "_session", session)
    assert resolve(Remote(URL)) == BODY
    assert session.calls == [URL]


def test_fetch_non_200_raises():
    session = CountingSession(DummyResponse(status_code=404, content=b"nope"))
    with pytest.raises(FetchError) as exc:
        fetch_table(URL, session=session)
    assert exc.value.status == 404
    assert exc.value.url == URL


def test_fetch_transport_error_raises():
    session = CountingSession(exc=requests.ConnectionError("boom"))
    with pytest.raises(FetchError) as exc:
        fetch_table(URL, session=session)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)
    assert exc.value.status is None


def test_fetch_non_text_body_raises():
    session = CountingSession(DummyResponse(content=b"\x89PNG\xff\xfe"))
    with pytest.raises(FetchError):
        fetch_table(URL, session=session)


# ── Cache freshness ──────────────────────────────────────────────────────────
def test_is_cache_fresh(tmp_path):
    path = tmp_path / "t.json"
    assert is_cache_fresh(path, DAY) is False
    path.write_bytes(BODY)
    assert is_cache_fresh(path, DAY) is True
    _age(path, DAY + 60)
    assert is_cache_fresh(path, DAY) is False


# ── RemoteCached state machine ───────────────────────────────────────────────
def test_fresh_cache_is_served_without_fetch(tmp_path):
    path = tmp_path / "cache" / "named_colors.json"
    path.parent.mkdir()
    path.write_bytes(b'{"cached": {"r": 1, "g": 2, "b": 3}}')
    _age(path, 60)

    session = CountingSession()
    data = resolve(RemoteCached(URL, path, DAY), session=session)
    assert data == b'{"cached": {"r": 1, "g": 2, "b": 3}}'
    assert session.calls == []


def test_missing_cache_fetches_and_creates_directory(tmp_path):
    path = tmp_path / "cache" / "named_colors.json"
    session = CountingSession()
    assert resolve(RemoteCached(URL, path, DAY), session=session) == BODY
    assert session.calls == [URL]
    assert path.read_bytes() == BODY


def test_stale_cache_fetches_and_overwrites(tmp_path):
    path = tmp_path / "named_colors.json"
    path.write_bytes(b"old")
    _age(path, DAY + 1)

    session = CountingSession()
    assert resolve(RemoteCached(URL, path, DAY), session=session) == BODY
    assert len(session.calls) == 1
    assert path.read_bytes() == BODY
    assert is_cache_fresh(path, DAY)


def test_fetch_error_on_cache_miss_propagates(tmp_path):
    path = tmp_path / "named_colors.json"
    session = CountingSession(DummyResponse(status_code=500, content=b""))
    with pytest.raises(FetchError):
        resolve(RemoteCached(URL, path, DAY), session=session)
    assert not path.exists()


def test_cache_read_failure_falls_back_to_fetch(tmp_path, monkeypatch):
    path = tmp_path / "named_colors.json"
    path.write_bytes(b"whatever")

    def failing_read(p):
        raise CacheIOError("unreadable", p)

    monkeypatch.setattr(sources, "read_cache", failing_read)
    session = CountingSession()
    assert resolve(RemoteCached(URL, path, DAY), session=session) == BODY
    assert session.calls == [URL]


def test_cache_write_failure_still_returns_fetched_bytes(tmp_path, caplog):
    # A regular file where the cache directory should be makes mkdir fail
    blocker = tmp_path / "cache"
    blocker.write_text("not a directory")
    path = blocker / "named_colors.json"

    errors = []
    source = RemoteCached(URL, path, DAY, on_cache_error=errors.append)
    with caplog.at_level("WARNING", logger=sources.__name__):
        data = resolve(source, session=CountingSession())

    assert data == BODY
    assert len(errors) == 1 and isinstance(errors[0], CacheIOError)
    assert errors[0].path == path
    assert "CACHE WRITE FAIL" in caplog.text


def test_write_cache_leaves_no_temp_files(tmp_path):
    path = tmp_path / "named_colors.json"
    sources.write_cache(path, BODY)
    sources.write_cache(path, b"{}")
    assert path.read_bytes() == b"{}"
    assert [p.name for p in tmp_path.iterdir()] == ["named_colors.json"]


# ── Invalid tables never become cache entries ────────────────────────────────
def test_fetched_non_table_is_not_cached(tmp_path):
    path = tmp_path / "cache" / "named_colors.json"
    session = CountingSession(DummyResponse(content=b"<html>captive portal</html>"))

    with pytest.raises(ParseError):
        resolve(RemoteCached(URL, path, DAY), session=session)
    assert not path.exists()

    with pytest.raises(ParseError):
        resolve(RemoteCached(URL, path, DAY), session=session)
    assert len(session.calls) == 2


def test_fresh_but_invalid_cache_is_refetched(tmp_path):
    path = tmp_path / "named_colors.json"
    path.write_bytes(b"<html>captive portal</html>")

    session = CountingSession()
    assert resolve(RemoteCached(URL, path, DAY), session=session) == BODY
    assert session.calls == [URL]
    assert path.read_bytes() == BODY


def test_cache_dated_in_future_is_stale(tmp_path):
    path = tmp_path / "t.json"
    path.write_bytes(BODY)
    _age(path, -DAY)
    assert is_cache_fresh(path, DAY) is False

    session = CountingSession()
    resolve(RemoteCached(URL, path, DAY), session=session)
    assert session.calls == [URL]


# ── Input errors surface as ParseError ───────────────────────────────────────
def test_user_text_with_lone_surrogate():
    with pytest.raises(ParseError):
        resolve(UserProvided('{"\ud800": {"r": 0, "g": 0, "b": 0}}'))


def test_bundled_missing_resource_reports_resource_name():
    with pytest.raises(CacheIOError) as exc:
        resolve(Bundled("does_not_exist.json"))
    assert exc.value.path is not None and exc.value.path.name == "does_not_exist.json"
