"""
Country data health check.

Reports whether the border graph is loaded, with enough detail for an
operator to see what was loaded and when.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from src.border_router.adapters.repositories.border_graph_repo import (
        BorderGraphRepository,
    )


@dataclass(frozen=True)
class HealthReport:
    """
    Health of the country dataset.

    Attributes:
        is_up: True if routes can be served.
        details: Additional fields for the health response.
    """

    is_up: bool
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> str:
        """Either UP or DOWN."""
        return "UP" if self.is_up else "DOWN"

    def to_dict(self) -> Dict[str, Any]:
        """Health response body."""
        return {"status": self.status, **self.details}


def check_country_data(
    repo: BorderGraphRepository,
    started_at: datetime,
    now: Optional[datetime] = None,
) -> HealthReport:
    """
    Inspect the graph repository without triggering a load.

    Args:
        repo: Repository holding the border graph.
        started_at: Process start time, for uptime reporting.
        now: Current time (injectable for tests).

    Returns:
        HealthReport, DOWN when no graph is loaded.
    """
    if not repo.is_initialized:
        return HealthReport(
            is_up=False,
            details={"countries": 0, "error": "No country data loaded"},
        )

    graph = repo.get_graph()
    now = now or datetime.now()
    uptime_minutes = int((now - started_at).total_seconds() // 60)

    return HealthReport(
        is_up=True,
        details={
            "countries": graph.country_count,
            "borders": graph.border_count,
            "version": graph.version,
            "source": repo.provider_name,
            "dataLoadedAt": graph.built_at.isoformat(),
            "uptimeMinutes": uptime_minutes,
        },
    )
