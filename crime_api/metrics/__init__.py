# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the crime incident API."""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)

# ── Business Metrics (updated by service layer only) ──
INCIDENT_QUERIES = Counter(
    "incident_queries_total", "Incident listing queries executed"
)
INCIDENT_ROWS_RETURNED = Histogram(
    "incident_rows_returned",
    "Rows returned per incident listing",
    buckets=[0, 1, 10, 50, 100, 500, 1000, 5000],
)
FILTER_REJECTIONS = Counter(
    "incident_filter_rejections_total", "Rejected incident filters", ["key"]
)
INCIDENTS_REMOVED = Counter(
    "incidents_removed_total", "Incidents deleted"
)
STORAGE_ERRORS = Counter(
    "storage_errors_total", "Storage gateway failures", ["operation"]
)
