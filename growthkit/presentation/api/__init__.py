"""
API Routers - FastAPI endpoint definitions.
"""

from growthkit.presentation.api.auth import router as auth_router
from growthkit.presentation.api.calculators import router as calculators_router
from growthkit.presentation.api.tools import router as tools_router
from growthkit.presentation.api.credits import router as credits_router
from growthkit.presentation.api.contributions import router as contributions_router
from growthkit.presentation.api.admin import router as admin_router
from growthkit.presentation.api.metrics import router as metrics_router

__all__ = [
    "auth_router",
    "calculators_router",
    "tools_router",
    "credits_router",
    "contributions_router",
    "admin_router",
    "metrics_router",
]
