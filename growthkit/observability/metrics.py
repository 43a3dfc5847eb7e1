"""
Prometheus Metrics for the GrowthKit API.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Counter: Value only goes up (calculator runs, credits moved, errors)
    - Histogram: Distribution (request latency percentiles)
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
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

CALCULATOR_RUNS_TOTAL = Counter(
    "growthkit_calculator_runs_total",
    "Total number of interactive tool calculations",
    ["calculator"],
)

CREDITS_SPENT_TOTAL = Counter(
    "growthkit_credits_spent_total",
    "Total credits spent on unlocking tools",
)

CREDITS_EARNED_TOTAL = Counter(
    "growthkit_credits_earned_total",
    "Total credits added to balances by source",
    ["source"],
)

ERRORS_TOTAL = Counter(
    "growthkit_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class CalculatorName:
    """Calculator labels for growthkit_calculator_runs_total."""

    AB_TEST = "ab_test"
    SUBJECT_LINE = "subject_line"
    HEADLINE = "headline"


class CreditSource:
    """Source labels for growthkit_credits_earned_total."""

    PURCHASE = "purchase"
    CONTRIBUTION = "contribution"
    REVIEW = "review"


class MetricsErrorType:
    """Error type labels for growthkit_errors_total."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Integration point: presentation/middleware/metrics_middleware.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_calculator_run(calculator: str):
    """Integration point: application/queries/calculators/*"""
    CALCULATOR_RUNS_TOTAL.labels(calculator=calculator).inc()


def increment_credits_spent(amount: int):
    """Integration point: application/commands/tools/unlock_tool.py"""
    if amount > 0:
        CREDITS_SPENT_TOTAL.inc(amount)


def increment_credits_earned(source: str, amount: int):
    """Integration point: buy_credits, approve_contribution, create_review"""
    if amount > 0:
        CREDITS_EARNED_TOTAL.labels(source=source).inc(amount)


def increment_error(error_type: str):
    """Integration point: exception handlers in fastapi_app.py"""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_request_latency",
    "increment_calculator_run",
    "increment_credits_spent",
    "increment_credits_earned",
    "increment_error",
    "get_metrics_content",
    "CalculatorName",
    "CreditSource",
    "MetricsErrorType",
]
