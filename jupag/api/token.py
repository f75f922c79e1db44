#!/usr/bin/env python3
"""
JUPAG - Token (/tokens/v2) and Price (/price/v3) APIs
"""

from typing import Optional

from jupag.types import Category, Interval, PriceResponse, TokenInfo
from jupag.types.common import comma_params

MAX_CATEGORY_LIMIT = 100


class TokenApi:
    async def token_search(self, queries: list[str]) -> list[TokenInfo]:
        """
        Search by symbol, name or mint address.
        At most 100 mints per query; symbol/name searches return 20 results.
        """
        return await self._get(
            "/tokens/v2/search", list[TokenInfo], params=comma_params("query", queries)
        )

    async def get_mints_by_tags(self, tags: list[str]) -> list[TokenInfo]:
        """Tokens carrying any of the tags (verified, lst, token-2022, ...)."""
        return await self._get("/tokens/v2/tag", list[TokenInfo], params=comma_params("query", tags))

    async def get_tokens_by_category(
        self,
        category: Category,
        interval: Interval,
        limit: Optional[int] = None,
    ) -> list[TokenInfo]:
        """Ranked tokens for a category over an interval; limit is 1..100 (API default 50)."""
        params = None
        if limit is not None:
            if not 1 <= limit <= MAX_CATEGORY_LIMIT:
                raise ValueError(f"limit must be between 1 and {MAX_CATEGORY_LIMIT}, got {limit}")
            params = {"limit": str(limit)}

        path = f"/tokens/v2/{Category(category).value}/{Interval(interval).value}"
        return await self._get(path, list[TokenInfo], params=params)

    async def get_recent_tokens(self) -> list[TokenInfo]:
        """Mints that most recently had their first pool created."""
        return await self._get("/tokens/v2/recent", list[TokenInfo])

    async def get_tokens_price(self, mints: list[str]) -> PriceResponse:
        """USD prices keyed by mint."""
        return await self._get("/price/v3", PriceResponse, params=comma_params("ids", mints))
