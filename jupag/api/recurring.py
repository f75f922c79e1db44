#!/usr/bin/env python3
"""
JUPAG - Recurring API (/recurring/v1)
"""

from jupag.types import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    GetRecurringOrders,
    PriceDeposit,
    PriceWithdraw,
    RecurringOrders,
    RecurringResponse,
    to_query_params,
)


class RecurringApi:
    async def create_recurring_order(self, data: CreateRecurringOrderRequest) -> RecurringResponse:
        """Unsigned transaction creating a time- or price-based order."""
        return await self._post("/recurring/v1/createOrder", RecurringResponse, data.to_payload())

    async def cancel_recurring_order(self, data: CancelRecurringOrderRequest) -> RecurringResponse:
        return await self._post("/recurring/v1/cancelOrder", RecurringResponse, data.to_payload())

    async def price_deposit_recurring(self, data: PriceDeposit) -> RecurringResponse:
        return await self._post("/recurring/v1/priceDeposit", RecurringResponse, data.to_payload())

    async def price_withdraw_recurring(self, data: PriceWithdraw) -> RecurringResponse:
        return await self._post("/recurring/v1/priceWithdraw", RecurringResponse, data.to_payload())

    async def execute_recurring_order(self, data: ExecuteRecurringRequest) -> ExecuteRecurringResponse:
        return await self._post("/recurring/v1/execute", ExecuteRecurringResponse, data.to_payload())

    async def get_recurring_orders(self, params: GetRecurringOrders) -> RecurringOrders:
        return await self._get(
            "/recurring/v1/getRecurringOrders", RecurringOrders, params=to_query_params(params)
        )
