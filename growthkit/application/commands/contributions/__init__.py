"""Contribution commands."""

from .submit_contribution import SubmitContributionCommand, SubmitContributionHandler
from .approve_contribution import (
    ApproveContributionCommand,
    ApproveContributionHandler,
)
from .reject_contribution import RejectContributionCommand, RejectContributionHandler

__all__ = [
    "SubmitContributionCommand",
    "SubmitContributionHandler",
    "ApproveContributionCommand",
    "ApproveContributionHandler",
    "RejectContributionCommand",
    "RejectContributionHandler",
]
