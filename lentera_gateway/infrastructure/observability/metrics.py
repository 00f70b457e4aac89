"""Prometheus metrics for monitoring risk distribution, validation failures, and registry lookups"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "lentera_calculation_total",
    "Total loan calculations completed",
    ["risk_level"],  # Rendah | Sedang | Tinggi | Sangat Berbahaya
)

apr_bucket_counter = Counter(
    "lentera_effective_apr_bucket_total",
    "Calculated effective APRs by bucket",
    ["bucket"],  # <=20%, 20-36%, >36%
)

validation_failure_counter = Counter(
    "lentera_validation_failures_total",
    "Loan inputs rejected by validation",
    ["field"],
)

# Registry metrics
registry_latency_histogram = Histogram(
    "registry_lookup_latency_seconds",
    "Lender registry response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

registry_failure_counter = Counter(
    "registry_lookup_failures_total",
    "Failed lender registry lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(risk_level: str, effective_apr: float) -> None:
    """Record calculation metrics for monitoring risk tiers and APR distribution"""
    calculation_counter.labels(risk_level=risk_level).inc()

    # Same cut-offs the scorer uses for rate burden
    if effective_apr <= 20:
        bucket = "<=20%"
    elif effective_apr <= 36:
        bucket = "20-36%"
    else:
        bucket = ">36%"

    apr_bucket_counter.labels(bucket=bucket).inc()
