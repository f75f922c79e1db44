"""
JUPAG API - Endpoint groups mixed into JupiterClient.
"""

from .recurring import RecurringApi
from .swap import SwapApi
from .token import TokenApi
from .trigger import TriggerApi
from .ultra import UltraApi

__all__ = [
    "SwapApi",
    "UltraApi",
    "TokenApi",
    "TriggerApi",
    "RecurringApi",
]
