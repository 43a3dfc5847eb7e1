"""
Request latency middleware.

Routes are labelled by their path template (/api/tools/{tool_id}), never the
raw URL, to keep label cardinality bounded.
"""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from growthkit.observability.metrics import observe_request_latency

UNMATCHED_ROUTE = "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            route = request.scope.get("route")
            observe_request_latency(
                method=request.method,
                route=getattr(route, "path", UNMATCHED_ROUTE),
                status_code=status_code,
                duration=time.perf_counter() - start,
            )
