"""Key-value caches backed by process memory or by Redis."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

import redis


class MemoryCache:
    """A dictionary cache whose entries may expire after a time to live."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Return the cached value, or ``None`` if the key is absent."""
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: str, ttl: float = 0) -> None:
        """Store ``value``; if ``ttl`` is positive, drop the key after ``ttl`` seconds."""
        with self._lock:
            self._store[key] = value
        if ttl > 0:
            timer = threading.Timer(ttl, self._expire, args=(key,))
            timer.daemon = True
            timer.start()

    def _expire(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)


class RedisCache:
    """A cache kept in Redis."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def get(self, key: str) -> str | None:
        """Return the cached value, or ``None`` if the key does not exist."""
        value = self.client.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str, ttl: float = 0) -> None:
        """Store ``value``, expiring after ``ttl`` seconds when it is positive."""
        if ttl > 0:
            self.client.set(key, value, px=max(1, round(ttl * 1000)))
        else:
            self.client.set(key, value)


@dataclass
class CacheConfig:
    """``type`` is ``"memory"`` or ``"redis"``; ``redis_options`` go to the client."""

    type: str
    redis_options: dict[str, Any] | None = None


def new_cache(config: CacheConfig) -> MemoryCache | RedisCache | None:
    """Create the cache ``config`` describes.

    Returns ``None`` for an unknown type or a Redis cache without options.
    Connection failures from Redis are raised.
    """
    if config.type == "memory":
        return MemoryCache()
    if config.type == "redis":
        if config.redis_options is None:
            return None
        client = redis.Redis(**config.redis_options)
        client.ping()
        return RedisCache(client)
    return None