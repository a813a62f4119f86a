"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Application metrics only; the process-wide default registry is left untouched.
registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry all application metrics are registered on."""
    return registry


def _get_metric(metric_class, *args, **kwargs):
    return metric_class(*args, **kwargs, registry=get_registry())


# Identity metrics
REGISTRATIONS = _get_metric(
    Counter,
    "account_registrations_total",
    "Total number of account registrations",
    ["role"],
)

LOGINS = _get_metric(
    Counter,
    "account_logins_total",
    "Total number of login attempts",
    ["outcome"],
)

APPROVALS = _get_metric(
    Counter,
    "field_worker_approvals_total",
    "Total number of field worker approval decisions",
    ["decision"],
)

# Workflow metrics
SERVICE_REQUESTS_CREATED = _get_metric(
    Counter,
    "service_requests_created_total",
    "Total number of service requests created",
    ["urgency"],
)

TASK_ASSIGNMENTS = _get_metric(
    Counter,
    "task_assignments_total",
    "Total number of tasks assigned to field workers",
)

TASK_TRANSITIONS = _get_metric(
    Counter,
    "task_transitions_total",
    "Total number of task status changes",
    ["from_status", "to_status"],
)

RATINGS = _get_metric(
    Counter,
    "task_ratings_total",
    "Total number of customer ratings",
    ["rating"],
)

# API metrics
API_REQUESTS = _get_metric(
    Counter,
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
)

API_REQUEST_DURATION = _get_metric(
    Histogram,
    "api_request_duration_seconds",
    "API request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ERRORS_TOTAL = _get_metric(
    Counter,
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
)

SYSTEM_UP_TIME = _get_metric(
    Gauge,
    "system_up_time_seconds",
    "System uptime in seconds",
)


def record_registration(role: str):
    """Record account registration metric."""
    REGISTRATIONS.labels(role=role).inc()


def record_login(outcome: str):
    """Record login attempt metric."""
    LOGINS.labels(outcome=outcome).inc()


def record_approval(decision: str):
    """Record approval decision metric."""
    APPROVALS.labels(decision=decision).inc()


def record_service_request_creation(urgency: str):
    SERVICE_REQUESTS_CREATED.labels(urgency=urgency).inc()


def record_task_assignment():
    TASK_ASSIGNMENTS.inc()


def record_task_transition(from_status: str, to_status: str):
    """Record task status change metric."""
    TASK_TRANSITIONS.labels(from_status=from_status, to_status=to_status).inc()


def record_rating(rating: int):
    RATINGS.labels(rating=str(rating)).inc()


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record API request count and latency."""
    API_REQUESTS.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def record_error(error_type: str, component: str):
    """Record error metric."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def set_uptime(seconds: float):
    SYSTEM_UP_TIME.set(seconds)


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
