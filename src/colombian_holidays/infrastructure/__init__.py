"""
Infrastructure Layer.

Cross-cutting adapters around the pure holiday engine:
- Structured logging
- Prometheus metrics
"""

from colombian_holidays.infrastructure.logging import (
    get_logger,
    log_duration,
    log_request_context,
    logger,
    StructuredLogger,
)
from colombian_holidays.infrastructure.metrics import (
    MetricsRegistry,
    get_metrics,
    metrics_endpoint,
    setup_metrics_middleware,
)


__all__ = [
    "get_logger",
    "log_duration",
    "log_request_context",
    "logger",
    "StructuredLogger",
    "MetricsRegistry",
    "get_metrics",
    "metrics_endpoint",
    "setup_metrics_middleware",
]
