#!/usr/bin/env python3
"""
JUPAG - Swap API records

Quote, swap transaction, and swap-instruction payloads for /swap/v1.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from .common import JupiterModel, PassthroughModel
from .dex import DexEnum


class SwapMode(str, Enum):
    """Whether `amount` fixes the input or the output side."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class QuoteRequest(JupiterModel):
    """
    Query for GET /swap/v1/quote.

    Only the mints and the raw amount are required; every other field is
    sent only when set.
    """

    input_mint: str
    output_mint: str
    amount: int = Field(ge=0)
    slippage_bps: Optional[int] = Field(None, ge=0)
    swap_mode: Optional[SwapMode] = None
    dexes: Optional[list[DexEnum]] = None
    exclude_dexes: Optional[list[DexEnum]] = None
    restrict_intermediate_tokens: Optional[bool] = None
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    platform_fee_bps: Optional[int] = Field(None, ge=0)
    max_accounts: Optional[int] = Field(None, ge=1)
    dynamic_slippage: Optional[bool] = None


class PlatformFee(PassthroughModel):
    amount: Optional[str] = None
    fee_bps: int


class SwapInfo(PassthroughModel):
    amm_key: str
    label: Optional[str] = None
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: Optional[str] = None
    fee_mint: Optional[str] = None


class RoutePlanItem(PassthroughModel):
    swap_info: SwapInfo
    percent: Optional[int] = None
    bps: Optional[int] = None


class QuoteResponse(PassthroughModel):
    """
    Best route for a quote request. Passed back verbatim inside
    SwapRequest, so fields the model does not name are preserved.
    """

    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: str
    route_plan: list[RoutePlanItem]
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class PriorityLevelWithMaxLamports(JupiterModel):
    priority_level: PriorityLevel
    max_lamports: int
    global_: Optional[bool] = Field(None, alias="global")


class PrioritizationFee(JupiterModel):
    """Either a Jito tip or a capped priority level."""

    priority_level_with_max_lamports: Optional[PriorityLevelWithMaxLamports] = None
    jito_tip_lamports: Optional[int] = None


class SwapRequest(JupiterModel):
    """Body for POST /swap/v1/swap and /swap/v1/swap-instructions."""

    user_public_key: str
    quote_response: QuoteResponse
    payer: Optional[str] = None
    wrap_and_unwrap_sol: Optional[bool] = None
    use_shared_accounts: Optional[bool] = None
    fee_account: Optional[str] = None
    tracking_account: Optional[str] = None
    prioritization_fee_lamports: Optional[PrioritizationFee] = None
    as_legacy_transaction: Optional[bool] = None
    destination_token_account: Optional[str] = None
    dynamic_compute_unit_limit: Optional[bool] = None
    skip_user_accounts_rpc_calls: Optional[bool] = None
    dynamic_slippage: Optional[bool] = None
    compute_unit_price_micro_lamports: Optional[int] = None
    blockhash_slots_to_expiry: Optional[int] = None


class DynamicSlippageReport(JupiterModel):
    slippage_bps: Optional[int] = None
    other_amount: Optional[int] = None
    simulated_incurred_slippage_bps: Optional[int] = None
    amplification_ratio: Optional[str] = None
    category_name: Optional[str] = None
    heuristic_max_slippage_bps: Optional[int] = None


class SwapResponse(JupiterModel):
    """Unsigned base64 transaction ready for signing."""

    swap_transaction: str
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[Any] = None


class AccountMeta(JupiterModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class Instruction(JupiterModel):
    """
    An instruction as the API returns it: program id and account keys
    as base58 text, payload as base64 text.
    """

    program_id: str
    accounts: list[AccountMeta] = Field(default_factory=list)
    data: str


class SwapInstructionsResponse(JupiterModel):
    """
    Instruction groups for building the swap transaction locally.
    Execution order is compute budget, setup, swap, cleanup, other.
    """

    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: Optional[list[Instruction]] = None
    setup_instructions: list[Instruction] = Field(default_factory=list)
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction] = None
    other_instructions: Optional[list[Instruction]] = None
    address_lookup_table_addresses: list[str] = Field(default_factory=list)
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
