"""Prometheus metrics for monitoring schedule generation and validation failures"""

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_counter = Counter(
    "payplan_schedules_generated_total",
    "Installment schedules generated",
    ["frequency"],  # monthly | quarterly | custom
)

installment_count_histogram = Histogram(
    "payplan_schedule_installments",
    "Installments per generated schedule (initial payment included)",
    buckets=[1, 2, 4, 6, 12, 18, 24, 25],
)

expected_commission_histogram = Histogram(
    "payplan_expected_commission_dollars",
    "Expected commission per previewed plan",
    buckets=[0, 100, 500, 1000, 2500, 5000, 10000, 25000],
)

# Failure metrics
validation_failure_counter = Counter(
    "payplan_validation_failures_total",
    "Calculation requests rejected by domain validation",
    ["field"],
)

consistency_failure_counter = Counter(
    "payplan_consistency_failures_total",
    "Schedules that failed the reconciliation check",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule(frequency: str, total_installments: int, expected_commission_cents: int) -> None:
    """Record metrics for a successfully generated schedule"""
    schedule_counter.labels(frequency=frequency).inc()
    installment_count_histogram.observe(total_installments)
    expected_commission_histogram.observe(expected_commission_cents / 100)
