"""
In-process stores backed by cachetools.
"""
import math
import time
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar

from cachetools import TLRUCache

from yt_transcript.core.providers.kv_store import CounterStore, ResultStore

T = TypeVar("T")


class _Entry(NamedTuple):
    value: Any
    expires_at: float


def _entry_expiry(_key: str, entry: _Entry, _now: float) -> float:
    return entry.expires_at


class _ExpiringMap(Generic[T]):
    """LRU map where every entry carries its own expiry time."""

    def __init__(self, max_entries: int, timer: Callable[[], float] = time.monotonic):
        self._timer = timer
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_entries, ttu=_entry_expiry, timer=timer
        )

    def expiry(self, ttl_seconds: Optional[int]) -> float:
        return math.inf if ttl_seconds is None else self._timer() + ttl_seconds

    def get(self, key: str) -> Optional[_Entry]:
        return self._cache.get(key)

    def put(self, key: str, value: T, expires_at: float) -> None:
        self._cache[key] = _Entry(value, expires_at)

    def __len__(self) -> int:
        return len(self._cache)


class MemoryResultStore(ResultStore):
    """Result store kept in process memory with per-entry TTL."""

    def __init__(self, max_entries: int = 10_000, timer: Callable[[], float] = time.monotonic):
        self._entries: _ExpiringMap[str] = _ExpiringMap(max_entries, timer)

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        self._entries.put(key, value, self._entries.expiry(ttl_seconds))

    def __len__(self) -> int:
        return len(self._entries)


class MemoryCounterStore(CounterStore):
    """Counter store kept in process memory."""

    def __init__(self, max_entries: int = 100_000, timer: Callable[[], float] = time.monotonic):
        self._entries: _ExpiringMap[int] = _ExpiringMap(max_entries, timer)

    async def increment(self, key: str, ttl_seconds: Optional[int] = None) -> int:
        entry = self._entries.get(key)
        if entry is None:
            value, expires_at = 1, self._entries.expiry(ttl_seconds)
        else:
            value, expires_at = entry.value + 1, entry.expires_at
        self._entries.put(key, value, expires_at)
        return value

    async def get(self, key: str) -> int:
        entry = self._entries.get(key)
        return entry.value if entry is not None else 0
