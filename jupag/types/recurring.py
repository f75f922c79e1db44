#!/usr/bin/env python3
"""
JUPAG - Recurring (DCA) API records

A recurring order is either time-based or price-based; the request carries
exactly one of the two parameter blocks.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, model_validator

from .common import JupiterModel
from .trigger import OrderStatus


class RecurringOrderType(str, Enum):
    TIME = "time"
    PRICE = "price"
    ALL = "all"


class TimeParams(JupiterModel):
    in_amount: int
    number_of_orders: int
    interval: int  # Seconds between orders
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    start_at: Optional[int] = None


class PriceParams(JupiterModel):
    deposit_amount: int
    increment_usdc_value: int
    interval: int
    start_at: Optional[int] = None


class RecurringParams(JupiterModel):
    time: Optional[TimeParams] = None
    price: Optional[PriceParams] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "RecurringParams":
        if (self.time is None) == (self.price is None):
            raise ValueError("recurring params need exactly one of time or price")
        return self


class CreateRecurringOrderRequest(JupiterModel):
    user: str
    input_mint: str
    output_mint: str
    params: RecurringParams

    @classmethod
    def time_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        in_amount: int,
        number_of_orders: int,
        interval: int,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        start_at: Optional[int] = None,
    ) -> "CreateRecurringOrderRequest":
        time = TimeParams(
            in_amount=in_amount,
            number_of_orders=number_of_orders,
            interval=interval,
            min_price=min_price,
            max_price=max_price,
            start_at=start_at,
        )
        return cls(
            user=user,
            input_mint=input_mint,
            output_mint=output_mint,
            params=RecurringParams(time=time),
        )

    @classmethod
    def price_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        deposit_amount: int,
        increment_usdc_value: int,
        interval: int,
        start_at: Optional[int] = None,
    ) -> "CreateRecurringOrderRequest":
        price = PriceParams(
            deposit_amount=deposit_amount,
            increment_usdc_value=increment_usdc_value,
            interval=interval,
            start_at=start_at,
        )
        return cls(
            user=user,
            input_mint=input_mint,
            output_mint=output_mint,
            params=RecurringParams(price=price),
        )


class CancelRecurringOrderRequest(JupiterModel):
    order: str
    recurring_type: RecurringOrderType
    user: str


class PriceDeposit(JupiterModel):
    amount: int
    order: str
    user: str


class PriceWithdraw(JupiterModel):
    amount: int
    order: str
    user: str
    input_or_output: str  # "In" or "Out"


class RecurringResponse(JupiterModel):
    request_id: str
    transaction: str


class ExecuteRecurringRequest(JupiterModel):
    request_id: str
    signed_transaction: str


class ExecuteRecurringResponse(JupiterModel):
    signature: str
    status: str


class GetRecurringOrders(JupiterModel):
    recurring_type: RecurringOrderType
    order_status: OrderStatus
    user: str
    page: int = Field(1, ge=1)
    mint: Optional[str] = None
    include_failed_tx: bool = False


class RecurringOrders(JupiterModel):
    order_status: OrderStatus
    page: int
    total_pages: int
    user: str
    time: Optional[list[Any]] = None
    price: Optional[list[Any]] = None
    all: Optional[list[Any]] = None
