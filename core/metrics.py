"""
Prometheus metrics for the activation key service.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Activation key metrics
activation_keys_created_total = Counter(
    "activation_keys_created_total",
    "Total activation keys created",
    ["org_id", "server_bound"],
)

activation_keys_removed_total = Counter(
    "activation_keys_removed_total",
    "Total activation keys removed",
    ["reason"],
)

activation_key_validation_failures_total = Counter(
    "activation_key_validation_failures_total",
    "Activation key names rejected by validation",
    ["code"],
)

# Cache metrics
cache_hits_total = Counter(
    "cache_hits_total",
    "Total cache hits",
    ["cache"],
)

cache_misses_total = Counter(
    "cache_misses_total",
    "Total cache misses",
    ["cache"],
)
