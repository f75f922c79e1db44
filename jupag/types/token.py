#!/usr/bin/env python3
"""
JUPAG - Token and Price API records
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .common import JupiterModel


class Category(str, Enum):
    """Ranking used by /tokens/v2/{category}/{interval}."""

    TOP_ORGANIC_SCORE = "toporganicscore"
    TOP_TRADED = "toptraded"
    TOP_TRENDING = "toptrending"


class Interval(str, Enum):
    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"
    SIX_HOURS = "6h"
    TWENTY_FOUR_HOURS = "24h"


class TokenStats(JupiterModel):
    price_change: Optional[float] = None
    holder_change: Optional[float] = None
    liquidity_change: Optional[float] = None
    volume_change: Optional[float] = None
    buy_volume: Optional[float] = None
    sell_volume: Optional[float] = None
    buy_organic_volume: Optional[float] = None
    sell_organic_volume: Optional[float] = None
    num_buys: Optional[int] = None
    num_sells: Optional[int] = None
    num_traders: Optional[int] = None
    num_organic_buyers: Optional[int] = None
    num_net_buyers: Optional[int] = None


class FirstPool(JupiterModel):
    id: str
    created_at: str


class Audit(JupiterModel):
    is_sus: Optional[bool] = None
    mint_authority_disabled: Optional[bool] = None
    freeze_authority_disabled: Optional[bool] = None
    top_holders_percentage: Optional[float] = None
    dev_balance_percentage: Optional[float] = None
    dev_migrations: Optional[int] = None


class TokenInfo(JupiterModel):
    """Token metadata, audit flags, and rolling stats."""

    id: str
    name: str
    symbol: str
    icon: Optional[str] = None
    decimals: int
    twitter: Optional[str] = None
    telegram: Optional[str] = None
    website: Optional[str] = None
    dev: Optional[str] = None
    circ_supply: Optional[float] = None
    total_supply: Optional[float] = None
    token_program: str
    launchpad: Optional[str] = None
    partner_config: Optional[str] = None
    graduated_pool: Optional[str] = None
    graduated_at: Optional[str] = None
    mint_authority: Optional[str] = None
    freeze_authority: Optional[str] = None
    first_pool: Optional[FirstPool] = None
    holder_count: Optional[int] = None
    audit: Optional[Audit] = None
    organic_score: Optional[float] = None
    organic_score_label: Optional[str] = None
    is_verified: Optional[bool] = None
    cexes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    fdv: Optional[float] = None
    mcap: Optional[float] = None
    usd_price: Optional[float] = None
    price_block_id: Optional[float] = None
    liquidity: Optional[float] = None
    # to_camel would upper-case the letter after a digit (stats24H)
    stats5m: Optional[TokenStats] = Field(None, alias="stats5m")
    stats1h: Optional[TokenStats] = Field(None, alias="stats1h")
    stats6h: Optional[TokenStats] = Field(None, alias="stats6h")
    stats24h: Optional[TokenStats] = Field(None, alias="stats24h")
    ct_likes: Optional[int] = None
    smart_ct_likes: Optional[int] = None
    updated_at: Optional[str] = None


class Price(JupiterModel):
    usd_price: float
    block_id: Optional[int] = None
    decimals: int
    price_change_24h: Optional[float] = Field(None, alias="priceChange24h")


# Keyed by mint address; mints without a reliable price are omitted
PriceResponse = dict[str, Price]
