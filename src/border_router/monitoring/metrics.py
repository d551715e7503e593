"""
Routing metrics recorder.

Tracks successful route calculations, routing errors and calculation
duration. Counters only ever increase; the recorder is shared by all
request threads.
"""

import threading
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class MetricsSnapshot:
    """
    Point-in-time copy of the routing metrics.

    Attributes:
        calculations_total: Successful route calculations.
        errors_total: Failed route calculations.
        timed_total: Calculations with a recorded duration.
        duration_total_ms: Sum of recorded durations.
        duration_max_ms: Longest recorded duration.
    """

    calculations_total: int
    errors_total: int
    timed_total: int
    duration_total_ms: float
    duration_max_ms: float

    @property
    def duration_mean_ms(self) -> float:
        """Average calculation duration."""
        if self.timed_total == 0:
            return 0.0
        return self.duration_total_ms / self.timed_total

    def to_dict(self) -> Dict[str, float]:
        """Flat dict with dotted metric names."""
        return {
            "routing.calculations.total": self.calculations_total,
            "routing.errors.total": self.errors_total,
            "routing.calculation.duration.count": self.timed_total,
            "routing.calculation.duration.total_ms": round(self.duration_total_ms, 3),
            "routing.calculation.duration.max_ms": round(self.duration_max_ms, 3),
            "routing.calculation.duration.mean_ms": round(self.duration_mean_ms, 3),
        }


class RoutingMetrics:
    """
    Thread-safe in-process metrics for route calculations.

    Every call to record_success/record_error also records its duration,
    so the timer counts both outcomes.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calculations = 0
        self._errors = 0
        self._timed = 0
        self._duration_total = 0.0
        self._duration_max = 0.0

    def record_success(self, duration_seconds: float) -> None:
        """Record a successful route calculation."""
        with self._lock:
            self._calculations += 1
            self._observe(duration_seconds)

    def record_error(self, duration_seconds: float) -> None:
        """Record a failed route calculation."""
        with self._lock:
            self._errors += 1
            self._observe(duration_seconds)

    def _observe(self, duration_seconds: float) -> None:
        # Caller holds the lock
        duration_ms = duration_seconds * 1000
        self._timed += 1
        self._duration_total += duration_ms
        if duration_ms > self._duration_max:
            self._duration_max = duration_ms

    def snapshot(self) -> MetricsSnapshot:
        """Return a consistent copy of all counters."""
        with self._lock:
            return MetricsSnapshot(
                calculations_total=self._calculations,
                errors_total=self._errors,
                timed_total=self._timed,
                duration_total_ms=self._duration_total,
                duration_max_ms=self._duration_max,
            )
