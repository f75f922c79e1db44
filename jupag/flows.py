#!/usr/bin/env python3
"""
JUPAG - End-to-end flows

Each flow asks Jupiter for an unsigned transaction (or the instructions
for one), signs it with the configured wallet, then hands it back to
Jupiter or broadcasts it over RPC and waits for confirmation. Errors
propagate unchanged.
"""

import asyncio
import base64

from solders.transaction import VersionedTransaction
from solders.transaction_status import TransactionConfirmationStatus

from jupag.core.assembler import InstructionAssembler
from jupag.core.client import JupiterClient
from jupag.core.rpc import SolanaClient
from jupag.core.wallet import WalletManager
from jupag.exceptions import ConfirmationError, JupiterClientError
from jupag.logger import JupagLogger
from jupag.types import (
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    ExecuteTriggerOrder,
    ExecuteTriggerOrderResponse,
    QuoteRequest,
    SwapRequest,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
)

# Seconds between signature status polls
CONFIRM_POLL_SECONDS = 2.0

CONFIRMED_STATUSES = (
    (TransactionConfirmationStatus.Confirmed, "confirmed"),
    (TransactionConfirmationStatus.Finalized, "finalized"),
)


def _sign(client: JupiterClient, wallet: WalletManager, envelope_b64: str) -> str:
    signed = wallet.sign_b64(envelope_b64)
    tx = VersionedTransaction.from_bytes(base64.b64decode(signed))
    client.logger.transaction_signed(str(tx.signatures[0]))
    return signed


async def ultra_swap(
    client: JupiterClient,
    wallet: WalletManager,
    request: UltraOrderRequest,
) -> UltraExecuteOrderResponse:
    """
    Order, sign, execute. Jupiter lands the transaction.
    The wallet becomes the taker when the request names none.
    """
    if request.taker is None:
        request = request.model_copy(update={"taker": wallet.get_address()})

    order = await client.get_ultra_order(request)
    if not order.transaction:
        raise JupiterClientError(f"Ultra order {order.request_id} came back without a transaction")

    signed = _sign(client, wallet, order.transaction)
    result = await client.ultra_execute_order(
        UltraExecuteOrderRequest(signed_transaction=signed, request_id=order.request_id)
    )
    client.logger.info(f"Ultra execute: {result.status.value} {result.signature or ''}")
    return result


async def confirm_transaction(
    rpc: SolanaClient,
    signature: str,
    last_valid_block_height: int,
    logger: JupagLogger,
):
    """
    Poll until the signature reaches confirmed commitment.
    Raises ConfirmationError when it fails on chain or its blockhash expires.
    """
    while True:
        statuses = await rpc.get_signature_statuses([signature])
        status = statuses[0] if statuses else None
        if status is not None:
            if status.err:
                raise ConfirmationError(f"Transaction {signature} failed on chain: {status.err}")
            for level, label in CONFIRMED_STATUSES:
                if status.confirmation_status == level:
                    logger.transaction_confirmed(signature, label)
                    return

        if await rpc.get_block_height() > last_valid_block_height:
            raise ConfirmationError(
                f"Transaction {signature} expired at block height {last_valid_block_height}"
            )
        await asyncio.sleep(CONFIRM_POLL_SECONDS)


def _swap_request(wallet: WalletManager, quote) -> SwapRequest:
    return SwapRequest(
        user_public_key=wallet.get_address(),
        quote_response=quote,
        dynamic_compute_unit_limit=True,
    )


async def swap_with_transaction(
    client: JupiterClient,
    wallet: WalletManager,
    rpc: SolanaClient,
    quote_request: QuoteRequest,
) -> str:
    """Quote, fetch the ready-made swap transaction, sign, send and confirm it."""
    quote = await client.get_quote(quote_request)
    swap = await client.get_swap_transaction(_swap_request(wallet, quote))

    signed = _sign(client, wallet, swap.swap_transaction)
    signature = await rpc.send_raw_transaction(base64.b64decode(signed))
    await confirm_transaction(rpc, signature, swap.last_valid_block_height, client.logger)
    return signature


async def swap_with_instructions(
    client: JupiterClient,
    wallet: WalletManager,
    rpc: SolanaClient,
    quote_request: QuoteRequest,
) -> str:
    """
    Quote, fetch the swap as instructions, assemble a v0 transaction
    locally against a fresh blockhash, sign, send and confirm it.
    """
    quote = await client.get_quote(quote_request)
    instructions = await client.get_swap_instructions(_swap_request(wallet, quote))

    blockhash, last_valid_block_height = await rpc.get_latest_blockhash()
    assembler = InstructionAssembler(rpc, client.logger)
    tx = await assembler.assemble_swap(instructions, wallet.pubkey, blockhash)

    unsigned = base64.b64encode(bytes(tx)).decode("utf-8")
    signed = _sign(client, wallet, unsigned)
    signature = await rpc.send_raw_transaction(base64.b64decode(signed))
    await confirm_transaction(rpc, signature, last_valid_block_height, client.logger)
    return signature


async def create_trigger_order_and_execute(
    client: JupiterClient,
    wallet: WalletManager,
    order: CreateTriggerOrder,
) -> ExecuteTriggerOrderResponse:
    created = await client.create_trigger_order(order)
    signed = _sign(client, wallet, created.transaction)
    result = await client.execute_trigger_order(
        ExecuteTriggerOrder(request_id=created.request_id, signed_transaction=signed)
    )
    client.logger.info(f"Trigger order {created.order or ''} {result.status}: {result.signature}")
    return result


async def create_recurring_order_and_execute(
    client: JupiterClient,
    wallet: WalletManager,
    order: CreateRecurringOrderRequest,
) -> ExecuteRecurringResponse:
    created = await client.create_recurring_order(order)
    signed = _sign(client, wallet, created.transaction)
    result = await client.execute_recurring_order(
        ExecuteRecurringRequest(request_id=created.request_id, signed_transaction=signed)
    )
    client.logger.info(f"Recurring order {result.status}: {result.signature}")
    return result
