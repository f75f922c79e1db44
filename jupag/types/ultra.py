#!/usr/bin/env python3
"""
JUPAG - Ultra API records
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .common import JupiterModel
from .swap import PlatformFee, RoutePlanItem, SwapMode


class UltraOrderRequest(JupiterModel):
    """
    Query for GET /ultra/v1/order.

    Without a taker the API still answers, but the order carries no
    transaction.
    """

    input_mint: str
    output_mint: str
    amount: int = Field(ge=0)
    taker: Optional[str] = None
    referral_account: Optional[str] = None
    referral_fee: Optional[int] = Field(None, ge=50, le=255)
    exclude_routers: Optional[list[str]] = None


class UltraOrderResponse(JupiterModel):
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    price_impact_pct: str
    route_plan: list[RoutePlanItem]
    fee_mint: Optional[str] = None
    fee_bps: int
    prioritization_fee_lamports: int
    swap_type: str
    transaction: Optional[str] = None
    gasless: bool
    request_id: str
    total_time: int
    taker: Optional[str] = None
    quote_id: Optional[str] = None
    maker: Optional[str] = None
    platform_fee: Optional[PlatformFee] = None
    expire_at: Optional[str] = None


class UltraExecuteOrderRequest(JupiterModel):
    signed_transaction: str
    request_id: str  # From the /order response


class UltraStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


class SwapEvent(JupiterModel):
    input_mint: Optional[str] = None
    input_amount: Optional[str] = None
    output_mint: Optional[str] = None
    output_amount: Optional[str] = None


class UltraExecuteOrderResponse(JupiterModel):
    status: UltraStatus
    signature: Optional[str] = None
    slot: Optional[str] = None
    error: Optional[str] = None
    code: int
    total_input_amount: Optional[str] = None
    total_output_amount: Optional[str] = None
    input_amount_result: Optional[str] = None
    output_amount_result: Optional[str] = None
    swap_events: Optional[list[SwapEvent]] = None


class TokenBalance(JupiterModel):
    amount: str
    ui_amount: float
    slot: int
    is_frozen: bool


# Keyed by mint address, with "SOL" for the native balance
TokenBalancesResponse = dict[str, TokenBalance]


class ShieldWarning(JupiterModel):
    warning_type: str = Field(alias="type")
    message: str
    severity: str


class Shield(JupiterModel):
    warnings: dict[str, list[ShieldWarning]]


class Router(JupiterModel):
    id: str
    name: str
    icon: str
