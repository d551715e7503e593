"""
Observability for the Border Router: routing metrics and health checks.
"""

from src.border_router.monitoring.health import HealthReport, check_country_data
from src.border_router.monitoring.metrics import MetricsSnapshot, RoutingMetrics

__all__ = [
    "HealthReport",
    "MetricsSnapshot",
    "RoutingMetrics",
    "check_country_data",
]
