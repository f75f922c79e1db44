#!/usr/bin/env python3
"""
JUPAG - Trigger API (/trigger/v1)

Create and cancel return unsigned transactions; sign them and submit
through execute_trigger_order.
"""

from jupag.types import (
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
    ExecuteTriggerOrderResponse,
    GetTriggerOrders,
    OrderResponse,
    TriggerResponse,
    to_query_params,
)


class TriggerApi:
    async def create_trigger_order(self, data: CreateTriggerOrder) -> TriggerResponse:
        return await self._post("/trigger/v1/createOrder", TriggerResponse, data.to_payload())

    async def execute_trigger_order(
        self, data: ExecuteTriggerOrder
    ) -> ExecuteTriggerOrderResponse:
        return await self._post(
            "/trigger/v1/execute", ExecuteTriggerOrderResponse, data.to_payload()
        )

    async def cancel_trigger_order(self, data: CancelTriggerOrder) -> TriggerResponse:
        return await self._post("/trigger/v1/cancelOrder", TriggerResponse, data.to_payload())

    async def cancel_trigger_orders(self, data: CancelTriggerOrders) -> TriggerResponse:
        """Batch cancel; may return several transactions in `transactions`."""
        return await self._post("/trigger/v1/cancelOrders", TriggerResponse, data.to_payload())

    async def get_trigger_orders(self, params: GetTriggerOrders) -> OrderResponse:
        """Active or historical orders for a wallet, one page at a time."""
        return await self._get(
            "/trigger/v1/getTriggerOrders", OrderResponse, params=to_query_params(params)
        )
