"""
Bounded in-memory result cache with insertion-order eviction.

When full, the oldest inserted entry is evicted before a new one is
stored (FIFO, not LRU: reads never refresh an entry's position).
"""

import threading
from collections import deque
from typing import Deque, Dict, Generic, Hashable, TypeVar

import structlog

logger = structlog.get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ResultCache(Generic[K, V]):
    """
    Thread-safe bounded cache keyed by raw input.

    Usage:
        cache = ResultCache(max_size=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("c", 3)   # evicts "a"
        cache.get("a")      # None
    """

    def __init__(self, max_size: int = 100):
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._max_size = max_size
        self._entries: Dict[K, V] = {}
        self._order: Deque[K] = deque()
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: K) -> V | None:
        """Get a cached value, or None on miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: K, value: V) -> None:
        """
        Store a value.

        Existing keys are left untouched so repeated inserts never change
        a cached value or its eviction position.
        """
        with self._lock:
            if key in self._entries:
                return
            if len(self._entries) >= self._max_size:
                oldest = self._order.popleft()
                del self._entries[oldest]
                logger.debug("Evicted cached result", cache_size=len(self._entries))
            self._entries[key] = value
            self._order.append(key)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()
            self._order.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
