"""
JUPAG Types - Request and response records for every Jupiter endpoint group.
"""

from .common import JupiterModel, to_query_params
from .dex import DexEnum
from .recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    GetRecurringOrders,
    PriceDeposit,
    PriceParams,
    PriceWithdraw,
    RecurringOrders,
    RecurringOrderType,
    RecurringParams,
    RecurringResponse,
    TimeParams,
)
from .swap import (
    AccountMeta,
    DynamicSlippageReport,
    Instruction,
    PlatformFee,
    PrioritizationFee,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    QuoteRequest,
    QuoteResponse,
    RoutePlanItem,
    SwapInfo,
    SwapInstructionsResponse,
    SwapMode,
    SwapRequest,
    SwapResponse,
)
from .token import Audit, Category, FirstPool, Interval, Price, PriceResponse, TokenInfo, TokenStats
from .trigger import (
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
    ExecuteTriggerOrderResponse,
    GetTriggerOrders,
    Order,
    OrderResponse,
    OrderStatus,
    Trade,
    TriggerParams,
    TriggerResponse,
)
from .ultra import (
    Router,
    Shield,
    ShieldWarning,
    SwapEvent,
    TokenBalance,
    TokenBalancesResponse,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
    UltraStatus,
)

__all__ = [
    "JupiterModel",
    "to_query_params",
    "DexEnum",
    # Swap
    "SwapMode",
    "QuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "SwapInfo",
    "RoutePlanItem",
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "PrioritizationFee",
    "SwapRequest",
    "SwapResponse",
    "DynamicSlippageReport",
    "AccountMeta",
    "Instruction",
    "SwapInstructionsResponse",
    # Ultra
    "UltraOrderRequest",
    "UltraOrderResponse",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "UltraStatus",
    "SwapEvent",
    "TokenBalance",
    "TokenBalancesResponse",
    "ShieldWarning",
    "Shield",
    "Router",
    # Token / price
    "Category",
    "Interval",
    "TokenStats",
    "FirstPool",
    "Audit",
    "TokenInfo",
    "Price",
    "PriceResponse",
    # Trigger
    "OrderStatus",
    "TriggerParams",
    "CreateTriggerOrder",
    "TriggerResponse",
    "ExecuteTriggerOrder",
    "ExecuteTriggerOrderResponse",
    "CancelTriggerOrder",
    "CancelTriggerOrders",
    "GetTriggerOrders",
    "Trade",
    "Order",
    "OrderResponse",
    # Recurring
    "RecurringOrderType",
    "TimeParams",
    "PriceParams",
    "RecurringParams",
    "CreateRecurringOrderRequest",
    "CancelRecurringOrderRequest",
    "PriceDeposit",
    "PriceWithdraw",
    "RecurringResponse",
    "ExecuteRecurringRequest",
    "ExecuteRecurringResponse",
    "GetRecurringOrders",
    "RecurringOrders",
]
