"""
Application Metrics.

Prometheus text-format counters and histograms, collected in-process.
"""

import time
from collections import defaultdict
from threading import Lock
from typing import Dict, List, Optional, Tuple

from flask import Flask, Response, g, request


LabelKey = Tuple[Tuple[str, str], ...]


def _labels_key(labels: Dict[str, str]) -> LabelKey:
    return tuple(sorted(labels.items()))


def _format_labels(key: LabelKey, **extra: str) -> str:
    pairs = list(key) + sorted(extra.items())
    if not pairs:
        return ""
    return "{" + ",".join(f'{k}="{v}"' for k, v in pairs) + "}"


class Counter:
    """A monotonically increasing counter metric."""
    
    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self._values: Dict[LabelKey, float] = defaultdict(float)
        self._lock = Lock()
    
    def inc(self, value: float = 1.0, **labels: str) -> None:
        """Increment the counter."""
        key = _labels_key(labels)
        with self._lock:
            self._values[key] += value
    
    def value(self, **labels: str) -> float:
        """Current value for a label set."""
        with self._lock:
            return self._values.get(_labels_key(labels), 0.0)
    
    def render(self) -> List[str]:
        lines = [
            f"# HELP {self.name} {self.description}",
            f"# TYPE {self.name} counter",
        ]
        with self._lock:
            for key, value in sorted(self._values.items()):
                lines.append(f"{self.name}{_format_labels(key)} {value}")
        return lines


class Histogram:
    """A histogram metric for tracking distributions."""
    
    DEFAULT_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
    
    def __init__(
        self,
        name: str,
        description: str,
        buckets: tuple = DEFAULT_BUCKETS,
    ) -> None:
        self.name = name
        self.description = description
        self.buckets = buckets
        self._counts: Dict[LabelKey, Dict[float, int]] = defaultdict(lambda: defaultdict(int))
        self._sums: Dict[LabelKey, float] = defaultdict(float)
        self._totals: Dict[LabelKey, int] = defaultdict(int)
        self._lock = Lock()
    
    def observe(self, value: float, **labels: str) -> None:
        """Record an observation."""
        key = _labels_key(labels)
        with self._lock:
            self._sums[key] += value
            self._totals[key] += 1
            for bucket in self.buckets:
                if value <= bucket:
                    self._counts[key][bucket] += 1
    
    def render(self) -> List[str]:
        lines = [
            f"# HELP {self.name} {self.description}",
            f"# TYPE {self.name} histogram",
        ]
        with self._lock:
            for key in sorted(self._totals):
                for bucket in self.buckets:
                    lines.append(
                        f"{self.name}_bucket{_format_labels(key, le=str(bucket))} "
                        f"{self._counts[key][bucket]}"
                    )
                lines.append(
                    f"{self.name}_bucket{_format_labels(key, le='+Inf')} {self._totals[key]}"
                )
                lines.append(f"{self.name}_sum{_format_labels(key)} {self._sums[key]}")
                lines.append(f"{self.name}_count{_format_labels(key)} {self._totals[key]}")
        return lines


class MetricsRegistry:
    """Registry for all application metrics."""
    
    def __init__(self) -> None:
        # HTTP metrics
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
        )
        
        # Calendar metrics
        self.holiday_lookups_total = Counter(
            "holiday_lookups_total",
            "Total number of holiday calendar computations",
        )
        self.ical_exports_total = Counter(
            "ical_exports_total",
            "Total number of iCalendar documents generated",
        )
    
    def to_prometheus_format(self) -> str:
        """Export metrics in Prometheus text format."""
        lines: List[str] = []
        for metric in (
            self.http_requests_total,
            self.http_request_duration_seconds,
            self.holiday_lookups_total,
            self.ical_exports_total,
        ):
            lines.extend(metric.render())
        return "\n".join(lines) + "\n"


# Global metrics registry
_metrics: Optional[MetricsRegistry] = None


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics


def setup_metrics_middleware(app: Flask) -> None:
    """
    Setup Flask middleware for automatic HTTP metrics collection.
    
    Args:
        app: Flask application instance.
    """
    metrics = get_metrics()
    
    @app.before_request
    def before_request() -> None:
        g.metrics_start_time = time.time()
    
    @app.after_request
    def after_request(response):
        duration = time.time() - getattr(g, "metrics_start_time", time.time())
        endpoint = request.endpoint or "unknown"
        
        metrics.http_requests_total.inc(
            method=request.method,
            endpoint=endpoint,
            status=str(response.status_code),
        )
        metrics.http_request_duration_seconds.observe(
            duration,
            method=request.method,
            endpoint=endpoint,
        )
        
        return response


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint handler."""
    return Response(
        get_metrics().to_prometheus_format(),
        mimetype="text/plain; charset=utf-8",
    )
