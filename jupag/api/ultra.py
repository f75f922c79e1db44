#!/usr/bin/env python3
"""
JUPAG - Ultra API (/ultra/v1)
"""

from jupag.types import (
    Router,
    Shield,
    TokenBalancesResponse,
    TokenInfo,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
    to_query_params,
)
from jupag.types.common import comma_params


class UltraApi:
    """Order/execute flow where Jupiter lands the transaction."""

    async def get_ultra_order(self, params: UltraOrderRequest) -> UltraOrderResponse:
        """
        Quote plus an unsigned transaction for the taker.
        Sign it and hand it back through ultra_execute_order.
        """
        return await self._get("/ultra/v1/order", UltraOrderResponse, params=to_query_params(params))

    async def ultra_execute_order(
        self, data: UltraExecuteOrderRequest
    ) -> UltraExecuteOrderResponse:
        """Submit the signed order transaction."""
        return await self._post("/ultra/v1/execute", UltraExecuteOrderResponse, data.to_payload())

    async def get_token_balances(self, address: str) -> TokenBalancesResponse:
        """Balances for a wallet, keyed by mint ("SOL" for native)."""
        return await self._get(f"/ultra/v1/balances/{address}", TokenBalancesResponse)

    async def shield(self, mints: list[str]) -> Shield:
        """Safety warnings for the given mints."""
        return await self._get("/ultra/v1/shield", Shield, params=comma_params("mints", mints))

    async def ultra_token_search(self, queries: list[str]) -> list[TokenInfo]:
        """Search by symbol, name or mint. At most 100 mints per query."""
        return await self._get(
            "/ultra/v1/search", list[TokenInfo], params=comma_params("query", queries)
        )

    async def routers(self) -> list[Router]:
        """Routers available to the Ultra routing engine."""
        return await self._get("/ultra/v1/order/routers", list[Router])
