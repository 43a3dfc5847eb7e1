"""Credit commands."""

from .buy_credits import BuyCreditsCommand, BuyCreditsHandler

__all__ = [
    "BuyCreditsCommand",
    "BuyCreditsHandler",
]
