"""Tool commands."""

from .unlock_tool import UnlockToolCommand, UnlockToolHandler, UnlockResult
from .update_tool import UpdateToolCommand, UpdateToolHandler
from .delete_tool import DeleteToolCommand, DeleteToolHandler

__all__ = [
    "UnlockToolCommand",
    "UnlockToolHandler",
    "UnlockResult",
    "UpdateToolCommand",
    "UpdateToolHandler",
    "DeleteToolCommand",
    "DeleteToolHandler",
]
