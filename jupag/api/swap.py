#!/usr/bin/env python3
"""
JUPAG - Swap API (/swap/v1)
"""

from jupag.types import (
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapRequest,
    SwapResponse,
    to_query_params,
)


class SwapApi:
    """Quote, then either a ready transaction or the raw instructions."""

    async def get_quote(self, params: QuoteRequest) -> QuoteResponse:
        """
        Best route for swapping `amount` of input_mint into output_mint.
        The response is passed unchanged into SwapRequest.
        """
        return await self._get("/swap/v1/quote", QuoteResponse, params=to_query_params(params))

    async def get_swap_transaction(self, data: SwapRequest) -> SwapResponse:
        """Unsigned base64 swap transaction built from a quote."""
        return await self._post("/swap/v1/swap", SwapResponse, data.to_payload())

    async def get_swap_instructions(self, data: SwapRequest) -> SwapInstructionsResponse:
        """
        The swap as separate instruction groups plus the lookup tables it
        needs, for callers that compose their own transaction.
        """
        return await self._post(
            "/swap/v1/swap-instructions", SwapInstructionsResponse, data.to_payload()
        )

    async def program_id_to_label(self) -> dict[str, str]:
        """Map of dex program ids to route labels."""
        return await self._get("/swap/v1/program-id-to-label", dict[str, str])
