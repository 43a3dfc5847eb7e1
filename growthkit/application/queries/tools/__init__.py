"""Tool catalog queries."""

from growthkit.application.queries.tools.list_tools import (
    ListToolsQuery,
    ListToolsHandler,
)
from growthkit.application.queries.tools.get_tool import GetToolQuery, GetToolHandler
from growthkit.application.queries.tools.list_admin_tools import (
    ListAdminToolsQuery,
    ListAdminToolsHandler,
)

__all__ = [
    "ListToolsQuery",
    "ListToolsHandler",
    "GetToolQuery",
    "GetToolHandler",
    "ListAdminToolsQuery",
    "ListAdminToolsHandler",
]
