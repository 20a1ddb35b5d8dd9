"""Bounded TTL cache, independent of the parsing core."""

from .lru import LRUCacheProvider, create_lru_cache_provider

__all__ = [
    "LRUCacheProvider",
    "create_lru_cache_provider",
]
