from growthkit.presentation.middleware.correlation_id import CorrelationIdMiddleware
from growthkit.presentation.middleware.metrics_middleware import MetricsMiddleware

__all__ = ["CorrelationIdMiddleware", "MetricsMiddleware"]
