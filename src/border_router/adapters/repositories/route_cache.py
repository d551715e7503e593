"""
Route Cache - memoized routing with single-flight computation.

Wraps any RoutingCalculator and remembers successful routes per ordered
(origin, destination) pair for the lifetime of the instance. Entries are
never evicted: the key space is bounded by the number of countries squared.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from src.border_router.ports.routing_service import RoutingCalculator
    from src.border_router.schemas.route import RoutePath

RouteKey = Tuple[str, str]


@dataclass(frozen=True)
class RouteCacheStats:
    """
    Snapshot of cache counters.

    Attributes:
        hits: Requests answered from the memo.
        misses: Requests that ran the wrapped computation.
        size: Number of memoized routes.
    """

    hits: int
    misses: int
    size: int

    @property
    def hit_rate(self) -> float:
        """Fraction of requests served from the memo."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class CachedRoutingService:
    """
    Memoizing decorator for a RoutingCalculator.

    Concurrency:
    - ``_lock`` guards the route dict, the per-key lock table and counters
    - each key gets its own lock, so concurrent requests for the same
      uncomputed pair run the wrapped computation once while the others
      wait; different pairs compute in parallel
    - failures are not stored, the next request for that pair retries
    - a key lock is dropped once its computation ends, successful or not,
      so unroutable client input leaves nothing behind

    A->B and B->A are distinct keys.

    Attributes:
        _delegate: Wrapped route calculator.
        _routes: Memoized routes by (origin, destination).
        _key_locks: Per-key computation locks.
    """

    def __init__(self, delegate: RoutingCalculator) -> None:
        """
        Initialize an empty cache around a calculator.

        Args:
            delegate: Component computing routes on cache miss.
        """
        self._delegate = delegate
        self._routes: Dict[RouteKey, RoutePath] = {}
        self._key_locks: Dict[RouteKey, threading.Lock] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def calculate_route(self, origin: str, destination: str) -> RoutePath:
        """
        Return the memoized route, computing it on first request.

        Args:
            origin: Origin country code.
            destination: Destination country code.

        Returns:
            RoutePath, identical for every request of the same pair.

        Raises:
            Whatever the wrapped calculator raises; nothing is cached then.
        """
        key = (origin, destination)

        with self._lock:
            cached = self._routes.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            try:
                # Double-check: another thread may have finished while we waited
                with self._lock:
                    cached = self._routes.get(key)
                    if cached is not None:
                        self._hits += 1
                        return cached
                    self._misses += 1

                route = self._delegate.calculate_route(origin, destination)

                with self._lock:
                    self._routes[key] = route
                return route
            finally:
                # Key locks live only while a computation is in flight
                with self._lock:
                    if self._key_locks.get(key) is key_lock:
                        del self._key_locks[key]

    def contains(self, origin: str, destination: str) -> bool:
        """Check if a route for the pair is memoized."""
        with self._lock:
            return (origin, destination) in self._routes

    def clear(self) -> None:
        """Drop all memoized routes and reset counters."""
        with self._lock:
            self._routes.clear()
            self._key_locks.clear()
            self._hits = 0
            self._misses = 0

    @property
    def stats(self) -> RouteCacheStats:
        """Current cache counters."""
        with self._lock:
            return RouteCacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._routes),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)
