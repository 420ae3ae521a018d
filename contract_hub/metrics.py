from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path", "status"],
)
REQUEST_ERRORS = Counter(
    "http_request_errors_total",
    "Total HTTP 5xx responses",
    ["method", "path", "status"],
)

CONTRACT_TRANSITIONS = Counter(
    "contract_status_transitions_total",
    "Applied contract status transitions",
    ["from_status", "to_status"],
)
CONTRACT_TRANSITION_REJECTIONS = Counter(
    "contract_transition_rejections_total",
    "Contract status transitions refused by the lifecycle rules",
    ["reason"],
)


def observe_transition(from_status: str, to_status: str) -> None:
    CONTRACT_TRANSITIONS.labels(from_status=from_status, to_status=to_status).inc()


def observe_transition_rejection(reason: str) -> None:
    CONTRACT_TRANSITION_REJECTIONS.labels(reason=reason).inc()
