"""A sharded in-memory cache with per-item expiry and periodic cleanup."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

_MAX_SHARDS = 1000
_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def _fnv1a_32(data: bytes) -> int:
    value = _FNV32_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV32_PRIME) & 0xFFFFFFFF
    return value


@dataclass(frozen=True)
class CacheItem:
    """A cached value with the moment (on the cache's clock) it expires."""

    value: Any
    expires_at: float

    def expired(self, now: float) -> bool:
        """Return True once ``now`` is past the expiry moment."""
        return now > self.expires_at


@dataclass
class _Shard:
    items: Dict[str, CacheItem] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)


class ShardedCache:
    """Key/value cache split over several independently locked shards.

    Keys are spread by the 32-bit FNV-1a hash. With a positive
    ``cleanup_interval`` (seconds) a background thread drops expired items
    at that interval until :meth:`close` is called.
    """

    def __init__(
        self,
        num_shards: int,
        cleanup_interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if num_shards <= 0:
            raise ValueError(f"num_shards must be positive, got {num_shards}")
        if cleanup_interval < 0:
            raise ValueError(
                f"cleanup_interval must be non-negative, got {cleanup_interval}"
            )
        if num_shards > _MAX_SHARDS:
            raise ValueError(f"num_shards is too large: {num_shards}")

        self.num_shards = num_shards
        self.cleanup_interval = cleanup_interval
        self._clock = clock
        self._shards: List[_Shard] = [_Shard() for _ in range(num_shards)]
        self._stop = threading.Event()
        self._cleaner: Optional[threading.Thread] = None
        if cleanup_interval > 0:
            self._cleaner = threading.Thread(
                target=self._cleanup_loop, name="cache-cleanup", daemon=True
            )
            self._cleaner.start()

    def __enter__(self) -> "ShardedCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        """Number of stored items, expired ones not yet cleaned included."""
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.items)
        return total

    def shard_index(self, key: str) -> int:
        """Return the index of the shard that holds ``key``."""
        return _fnv1a_32(key.encode("utf-8")) % self.num_shards

    def _shard(self, key: str) -> _Shard:
        return self._shards[self.shard_index(key)]

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``.

        Raises KeyError when the key is absent or its item has expired.
        """
        shard = self._shard(key)
        now = self._clock()
        with shard.lock:
            item = shard.items.get(key)
        if item is None:
            raise KeyError(key)
        if item.expired(now):
            logger.info("Data in cache with key:%s are not valid", key)
            raise KeyError(key)
        return item.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        shard = self._shard(key)
        expires_at = self._clock() + ttl
        with shard.lock:
            shard.items[key] = CacheItem(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        shard = self._shard(key)
        with shard.lock:
            shard.items.pop(key, None)

    def cleanup_expired(self) -> None:
        """Drop every item whose expiry moment has passed."""
        now = self._clock()
        for shard in self._shards:
            with shard.lock:
                stale = [k for k, item in shard.items.items() if item.expired(now)]
                for key in stale:
                    del shard.items[key]

    def _cleanup_loop(self) -> None:
        while not self._stop.wait(self.cleanup_interval):
            self.cleanup_expired()

    def close(self) -> None:
        """Stop the background cleanup; safe to call more than once."""
        self._stop.set()
        cleaner = self._cleaner
        if cleaner is not None and cleaner is not threading.current_thread():
            cleaner.join()