# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "directory_requests_total",
    "Total HTTP requests to the user directory",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "directory_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "directory_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Remote employees API (updated by the client only) ──
REMOTE_CALLS = Counter(
    "directory_remote_calls_total",
    "Calls to the employees API",
    ["operation", "outcome"],
)
REMOTE_LATENCY = Histogram(
    "directory_remote_call_duration_seconds",
    "Employees API call latency in seconds",
    ["operation"],
)

# ── Business Metrics (updated by service layer only) ──
USERS_ADDED = Counter(
    "directory_users_added_total",
    "Users created through the directory",
)
USERS_UPDATED = Counter(
    "directory_users_updated_total",
    "Users updated through the directory",
)
USERS_DELETED = Counter(
    "directory_users_deleted_total",
    "Users deleted through the directory",
)
VALIDATION_REJECTIONS = Counter(
    "directory_validation_rejections_total",
    "Draft submissions blocked by validation",
    ["field"],
)
ROSTER_SIZE = Gauge(
    "directory_roster_size",
    "Number of user records held in the roster",
)
