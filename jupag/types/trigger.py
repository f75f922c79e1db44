#!/usr/bin/env python3
"""
JUPAG - Trigger (limit order) API records
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_serializer

from .common import JupiterModel


class OrderStatus(str, Enum):
    ACTIVE = "active"
    HISTORY = "history"


class TriggerParams(JupiterModel):
    """Amounts are raw integers sent as strings."""

    making_amount: str
    taking_amount: str
    expired_at: Optional[str] = None
    slippage_bps: Optional[str] = None
    fee_bps: Optional[str] = None


class CreateTriggerOrder(JupiterModel):
    input_mint: str
    output_mint: str
    maker: str
    payer: str
    params: TriggerParams
    compute_unit_price: Optional[str] = None
    fee_account: Optional[str] = None
    wrap_and_unwrap_sol: Optional[bool] = None

    @classmethod
    def new(
        cls,
        input_mint: str,
        output_mint: str,
        maker: str,
        payer: str,
        making_amount: int,
        taking_amount: int,
        expired_at: Optional[int] = None,
        slippage_bps: Optional[int] = None,
        fee_bps: Optional[int] = None,
        compute_unit_price: Optional[int] = None,
        fee_account: Optional[str] = None,
        wrap_and_unwrap_sol: Optional[bool] = None,
    ) -> "CreateTriggerOrder":
        """Build an order from raw integer amounts."""

        def _text(value: Optional[int]) -> Optional[str]:
            return None if value is None else str(value)

        params = TriggerParams(
            making_amount=str(making_amount),
            taking_amount=str(taking_amount),
            expired_at=_text(expired_at),
            slippage_bps=_text(slippage_bps),
            fee_bps=_text(fee_bps),
        )
        return cls(
            input_mint=input_mint,
            output_mint=output_mint,
            maker=maker,
            payer=payer,
            params=params,
            compute_unit_price=_text(compute_unit_price),
            fee_account=fee_account,
            wrap_and_unwrap_sol=wrap_and_unwrap_sol,
        )


class TriggerResponse(JupiterModel):
    """Unsigned transaction(s) to sign and pass to /execute."""

    request_id: str
    transaction: str = ""
    transactions: Optional[list[str]] = None
    order: Optional[str] = None
    code: int


class ExecuteTriggerOrder(JupiterModel):
    request_id: str
    signed_transaction: str


class ExecuteTriggerOrderResponse(JupiterModel):
    code: int
    signature: str
    status: str
    order: Optional[str] = None


class CancelTriggerOrder(JupiterModel):
    maker: str
    order: str
    compute_unit_price: Optional[str] = None


class CancelTriggerOrders(JupiterModel):
    """Cancel several orders at once; `orders` go over the wire comma-joined."""

    maker: str
    orders: list[str] = Field(alias="order")
    compute_unit_price: Optional[str] = None

    @field_serializer("orders")
    def _join_orders(self, orders: list[str]) -> str:
        return ",".join(orders)


class GetTriggerOrders(JupiterModel):
    user: str
    order_status: OrderStatus
    page: Optional[int] = Field(None, ge=1)
    include_failed_tx: Optional[bool] = False
    input_mint: Optional[str] = None
    output_mint: Optional[str] = None


class Trade(JupiterModel):
    order_key: str
    keeper: str
    input_mint: str
    output_mint: str
    input_amount: str
    output_amount: str
    raw_input_amount: str
    raw_output_amount: str
    fee_mint: str
    fee_amount: str
    raw_fee_amount: str
    tx_id: str
    confirmed_at: str
    action: str
    product_meta: Optional[Any] = None


class Order(JupiterModel):
    user_pubkey: str
    order_key: str
    input_mint: str
    output_mint: str
    making_amount: str
    taking_amount: str
    remaining_making_amount: str
    remaining_taking_amount: str
    raw_making_amount: str
    raw_taking_amount: str
    raw_remaining_making_amount: str
    raw_remaining_taking_amount: str
    slippage_bps: str
    expired_at: Optional[str] = None
    created_at: str
    updated_at: str
    status: str
    open_tx: str
    close_tx: str
    program_version: str
    trades: list[Trade] = Field(default_factory=list)


class OrderResponse(JupiterModel):
    user: str
    order_status: str
    orders: list[Order]
    total_pages: int
    page: int
