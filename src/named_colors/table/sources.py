"""
sources.py
==========

Does: Decide where table bytes come from and return them to the parser.
      A source is one of the frozen dataclasses below; resolve() dispatches on it.

      - Bundled       → asset shipped in named_colors/data (no network)
      - UserProvided  → caller-supplied JSON text, returned verbatim
      - Remote        → unconditional HTTP GET
      - RemoteCached  → cache file if younger than `ttl`, else HTTP GET + cache write

Returns: Raw table bytes.
Used By: api.load_* and any caller that picks a source at configuration time.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import logging
import os
import tempfile
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Protocol, Union

import requests  # type: ignore[import-untyped]

from named_colors import config
from named_colors.errors import CacheIOError, FetchError, ParseError
from named_colors.table.parser import parse_table

__all__ = [
    "Bundled",
    "UserProvided",
    "Remote",
    "RemoteCached",
    "TableSource",
    "HTTPSession",
    "resolve",
    "fetch_table",
    "is_cache_fresh",
    "read_cache",
    "write_cache",
]

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

# Single session for connection reuse
_session = requests.Session()


class HTTPSession(Protocol):
    """Minimal surface of requests.Session used for fetching tables."""

    def get(self, url: str, **kwargs) -> requests.Response: ...


# ── Source variants ──────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Bundled:
    """The table shipped inside the package."""

    resource: str = "named_colors.json"


@dataclass(frozen=True)
class UserProvided:
    """A table handed over by the caller (str is encoded as UTF-8)."""

    data: str | bytes


@dataclass(frozen=True)
class Remote:
    """A table fetched on every resolution, without a local copy."""

    url: str = field(default_factory=lambda: config.TABLE_URL)


@dataclass(frozen=True)
class RemoteCached:
    """A remote table mirrored in `cache_path`, refreshed once older than `ttl` seconds."""

    url: str = field(default_factory=lambda: config.TABLE_URL)
    cache_path: Path = field(default_factory=config.default_cache_path)
    ttl: float = field(default_factory=lambda: config.CACHE_TTL)
    # Called with the CacheIOError when the fetched table could not be persisted
    on_cache_error: Callable[[CacheIOError], None] | None = field(
        default=None, compare=False, repr=False
    )


TableSource = Union[Bundled, UserProvided, Remote, RemoteCached]


# ── Network ──────────────────────────────────────────────────────────────────
def fetch_table(
    url: str,
    *,
    session: HTTPSession | None = None,
    timeout: float | None = None,
) -> bytes:
    """
    Does: GET `url` and return the body, which must be UTF-8 text.
    Raises: FetchError on transport errors, non-200 status, or a non-text body.
    """
    http = session if session is not None else _session
    logger.debug("[FETCH] GET %s", url)
    try:
        resp = http.get(url, timeout=timeout if timeout is not None else config.FETCH_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}", url) from e

    if resp.status_code != 200:
        raise FetchError(f"GET {url} returned HTTP {resp.status_code}", url, resp.status_code)

    body = resp.content
    try:
        body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FetchError(f"GET {url} returned a non-text body", url, resp.status_code) from e
    return body


# ── Cache file ───────────────────────────────────────────────────────────────
def is_cache_fresh(path: Path, ttl: float, *, now: float | None = None) -> bool:
    """Does: True when `path` exists and its mtime is 0 to `ttl` seconds old.

    A file dated in the future (clock skew) is stale.
    """
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return False
    current = time.time() if now is None else now
    return 0 <= current - mtime < ttl


def read_cache(path: Path) -> bytes:
    """Does: Return the cached bytes (raises CacheIOError)."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise CacheIOError(f"Cannot read cache file {path}: {e}", path) from e


def write_cache(path: Path, data: bytes) -> None:
    """
    Does: Atomically replace `path` with `data`, creating the parent directory.
    Concurrent writers are not coordinated: the last rename wins.
    Raises: CacheIOError.
    """
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CacheIOError(f"Cannot write cache file {path}: {e}", path) from e
    logger.debug("[CACHE WRITE] %s (%d bytes)", path, len(data))


def _resolve_remote_cached(source: RemoteCached, session: HTTPSession | None) -> bytes:
    path = Path(source.cache_path)

    if is_cache_fresh(path, source.ttl):
        try:
            data = read_cache(path)
            parse_table(data)
        except CacheIOError as e:
            logger.warning("[CACHE READ FAIL] %s; fetching instead", e)
        except ParseError as e:
            logger.warning("[CACHE INVALID] %s: %s; fetching instead", path, e)
        else:
            logger.debug("[CACHE HIT] %s", path)
            return data
    else:
        logger.debug("[CACHE MISS] %s (absent or older than %ss)", path, source.ttl)

    data = fetch_table(source.url, session=session)
    # Only a valid table may become the cache entry
    parse_table(data)
    try:
        write_cache(path, data)
    except CacheIOError as e:
        # The fetched table is still returned
        logger.warning("[CACHE WRITE FAIL] %s", e)
        if source.on_cache_error is not None:
            source.on_cache_error(e)
    return data


# ── Dispatcher ───────────────────────────────────────────────────────────────
def resolve(source: TableSource, *, session: HTTPSession | None = None) -> bytes:
    """
    Does: Produce the raw table bytes for `source`.
    Raises: FetchError (network), CacheIOError (bundled asset missing),
            ParseError (user text not encodable, or a fetched body that is not
            a valid table), TypeError for an unknown source.
    """
    if isinstance(source, Bundled):
        try:
            return resources.files("named_colors.data").joinpath(source.resource).read_bytes()
        except OSError as e:
            raise CacheIOError(
                f"Bundled table {source.resource!r} is unavailable: {e}", source.resource
            ) from e

    if isinstance(source, UserProvided):
        data = source.data
        if not isinstance(data, str):
            return bytes(data)
        try:
            return data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseError(f"Table text is not encodable as UTF-8: {e}") from e

    if isinstance(source, Remote):
        return fetch_table(source.url, session=session)

    if isinstance(source, RemoteCached):
        return _resolve_remote_cached(source, session)

    raise TypeError(f"Unknown table source: {source!r}")
