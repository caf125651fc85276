"""
Prometheus Metrics for EventDesk.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., dispatched requests)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
DISPATCH_TOTAL = Counter(
    "eventdesk_dispatch_total",
    "Total number of dispatched requests by kind and outcome",
    ["kind", "outcome"],
)

DISPATCH_LATENCY = Histogram(
    "eventdesk_dispatch_duration_seconds",
    "Latency of handler execution in seconds",
    ["kind"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

VALIDATION_FAILURES_TOTAL = Counter(
    "eventdesk_validation_failures_total",
    "Total number of field failures reported by validators",
    ["kind", "field"],
)

NOTIFICATION_ATTEMPTS_TOTAL = Counter(
    "eventdesk_notification_attempts_total",
    "Total number of notification delivery attempts by channel and outcome",
    ["channel", "outcome"],
)

NOTIFICATIONS_DROPPED_TOTAL = Counter(
    "eventdesk_notifications_dropped_total",
    "Notifications given up on after exhausting all attempts",
    ["channel"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsDispatchOutcome:
    """Outcome labels for eventdesk_dispatch_total."""

    OK = "ok"
    VALIDATION_FAILED = "validation_failed"


class MetricsNotificationOutcome:
    """Outcome labels for eventdesk_notification_attempts_total."""

    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_dispatch(kind: str, outcome: str):
    """Call once per dispatch. Integration point: application/behaviors.py, application/dispatcher.py"""
    DISPATCH_TOTAL.labels(kind=kind, outcome=outcome).inc()


def observe_dispatch_latency(kind: str, duration: float):
    """Integration point: application/behaviors.py - MetricsBehavior"""
    DISPATCH_LATENCY.labels(kind=kind).observe(duration)


def increment_validation_failures(kind: str, fields: list[str]):
    """Integration point: application/dispatcher.py after a failed validation"""
    for field in fields:
        VALIDATION_FAILURES_TOTAL.labels(kind=kind, field=field).inc()


def increment_notification_attempt(channel: str, outcome: str):
    """Integration point: application/notification_dispatcher.py"""
    NOTIFICATION_ATTEMPTS_TOTAL.labels(channel=channel, outcome=outcome).inc()


def increment_notification_dropped(channel: str):
    """Integration point: application/notification_dispatcher.py"""
    NOTIFICATIONS_DROPPED_TOTAL.labels(channel=channel).inc()


def get_metrics_content() -> tuple[bytes, str]:
    """Return metrics payload and content type for /metrics."""
    return generate_latest(), CONTENT_TYPE_LATEST
