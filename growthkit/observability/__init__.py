"""Observability package for the GrowthKit API."""

from growthkit.observability.metrics import (
    observe_request_latency,
    increment_calculator_run,
    increment_credits_spent,
    increment_credits_earned,
    increment_error,
    get_metrics_content,
    CalculatorName,
    CreditSource,
    MetricsErrorType,
)

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
