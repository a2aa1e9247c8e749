"""Prometheus metrics for the Loan Decision Gateway.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- loan_decision_total: Decisions by outcome
- loan_approved_amount_bucket: Offered amounts by bucket
- loan_approval_rate: Share of decisions that produced an offer

Technical Metrics (for Engineering/SRE):
- loan_decision_latency_seconds: Decision engine latency
- loan_http_requests_total: HTTP requests by endpoint/status
- loan_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

decision_total = Counter(
    "loan_decision_total",
    "Total number of loan decisions made",
    ["outcome"],  # approved, counter_offer, rejected, no_valid_loan
)

approved_amount_bucket = Counter(
    "loan_approved_amount_bucket",
    "Offered loan amounts by bucket",
    ["bucket", "outcome"],
)

approval_rate_gauge = Gauge(
    "loan_approval_rate",
    "Share of decisions that produced a loan offer (0.0-1.0)",
)

_offered_count = 0
_total_count = 0


# =============================================================================
# Technical Metrics
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision engine latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0],
)

http_requests_total = Counter(
    "loan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(outcome: str, loan_amount: Optional[int]) -> None:
    """Record a decision outcome in metrics."""
    global _offered_count, _total_count

    decision_total.labels(outcome=outcome).inc()

    _total_count += 1
    if loan_amount is not None:
        _offered_count += 1
        bucket = get_amount_bucket(loan_amount)
        approved_amount_bucket.labels(bucket=bucket, outcome=outcome).inc()

    approval_rate_gauge.set(_offered_count / _total_count)


def get_amount_bucket(loan_amount: int) -> str:
    """Map an offered amount to a bucket label."""
    if loan_amount < 2000:
        return "<2000"
    elif loan_amount <= 4000:
        return "2000-4000"
    elif loan_amount <= 6000:
        return "4000-6000"
    elif loan_amount <= 8000:
        return "6000-8000"
    else:
        return "8000-10000"


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision engine latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
