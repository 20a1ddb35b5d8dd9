"""Bounded key-value cache with least-recently-used eviction and expiry.

Entries live for a fixed time-to-live from the moment they are set. Any of
``has``, ``get`` or ``set`` on a live key marks it most recently used. When an
insert pushes the cache past its item limit, expired entries are purged first
and then the least recently used entry is evicted.
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

from ssml_markup.shared import CacheConfig

T = TypeVar("T")

MS_PER_SECOND = 1000.0


@dataclass
class CacheEntry(Generic[T]):
    value: T
    expires_at: float


class LRUCacheProvider(Generic[T]):
    """Thread-safe LRU cache with a per-entry time-to-live.

    Examples:
        >>> cache = LRUCacheProvider(ttl_ms=60_000, item_limit=2)
        >>> cache.set("a", 1); cache.set("b", 2)
        >>> cache.has("a")
        True
        >>> cache.set("c", 3)
        >>> cache.has("b")
        False
    """

    def __init__(
        self,
        ttl_ms: float,
        item_limit: int,
        clock: Callable[[], float] = time.monotonic
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_ms: Lifetime of each entry in milliseconds
            item_limit: Maximum number of live entries
            clock: Monotonic time source in seconds
        """
        self.config = CacheConfig(ttl_ms=ttl_ms, item_limit=item_limit)
        self._clock = clock
        self._entries: "OrderedDict[Hashable, CacheEntry[T]]" = OrderedDict()
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls, config: CacheConfig, clock: Callable[[], float] = time.monotonic
    ) -> "LRUCacheProvider[T]":
        return cls(config.ttl_ms, config.item_limit, clock)

    def _live_entry(self, key: Hashable) -> Optional[CacheEntry[T]]:
        """Return the entry for ``key`` if unexpired, refreshing its recency."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at < self._clock():
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry

    def has(self, key: Hashable) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def get(self, key: Hashable, default: Optional[T] = None) -> Optional[T]:
        with self._lock:
            entry = self._live_entry(key)
            return default if entry is None else entry.value

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            expires_at = self._clock() + self.config.ttl_ms / MS_PER_SECOND
            self._entries[key] = CacheEntry(value, expires_at)
            self._entries.move_to_end(key)
            if len(self._entries) > self.config.item_limit:
                self._evict()

    def delete(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items()
                       if entry.expires_at < now]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def _evict(self) -> None:
        self.purge_expired()
        while len(self._entries) > self.config.item_limit:
            self._entries.popitem(last=False)

    def __contains__(self, key: Hashable) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        """Number of stored entries, including any not yet purged after expiry."""
        with self._lock:
            return len(self._entries)


def create_lru_cache_provider(ttl_ms: float, item_limit: int) -> LRUCacheProvider:
    """Create an LRU cache with the given TTL (milliseconds) and item limit."""
    return LRUCacheProvider(ttl_ms=ttl_ms, item_limit=item_limit)
