#!/usr/bin/env python3
"""
JUPAG - Instruction Assembler

Turns the instruction groups from /swap-instructions into a compiled v0
transaction: instructions parsed, lookup tables fetched from chain, message
compiled against the payer and blockhash. The result carries placeholder
signatures; sign it with the wallet before sending.
"""

import asyncio
import base64
import binascii
from typing import Optional, Protocol

from solders.address_lookup_table_account import AddressLookupTable, AddressLookupTableAccount
from solders.hash import Hash
from solders.instruction import AccountMeta as SoldersAccountMeta
from solders.instruction import Instruction as SoldersInstruction
from solders.message import MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from jupag.exceptions import CompilationError, InvalidAddress, InvalidPayload, LookupNotFound
from jupag.logger import JupagLogger
from jupag.types import Instruction, SwapInstructionsResponse

# Max serialized transaction size (IPv6 MTU minus headers)
PACKET_DATA_SIZE = 1232


class ChainQuery(Protocol):
    """Read access to on-chain accounts. None means the account is absent."""

    async def get_account_info(self, pubkey: Pubkey) -> Optional[bytes]: ...


def parse_pubkey(address: str, what: str = "address") -> Pubkey:
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise InvalidAddress(f"Invalid {what} {address!r}: {e}") from e


def parse_instruction(instruction: Instruction) -> SoldersInstruction:
    """API instruction record to a solders Instruction."""
    program_id = parse_pubkey(instruction.program_id, "program id")
    accounts = [
        SoldersAccountMeta(
            pubkey=parse_pubkey(meta.pubkey, "account"),
            is_signer=meta.is_signer,
            is_writable=meta.is_writable,
        )
        for meta in instruction.accounts
    ]
    try:
        data = base64.b64decode(instruction.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidPayload(f"Instruction data for {program_id} is not valid base64: {e}") from e

    return SoldersInstruction(program_id=program_id, data=data, accounts=accounts)


def order_swap_instructions(response: SwapInstructionsResponse) -> list[Instruction]:
    """Groups in execution order: compute budget, setup, swap, cleanup, other."""
    ordered: list[Instruction] = []
    ordered.extend(response.compute_budget_instructions or [])
    ordered.extend(response.setup_instructions)
    ordered.append(response.swap_instruction)
    if response.cleanup_instruction is not None:
        ordered.append(response.cleanup_instruction)
    ordered.extend(response.other_instructions or [])
    return ordered


class InstructionAssembler:
    """
    Compiles instructions and lookup tables into an unsigned v0 transaction.
    Holds no state between calls; lookup tables are fetched every time.
    """

    def __init__(self, chain_query: ChainQuery, logger: JupagLogger):
        self.chain_query = chain_query
        self.logger = logger

    async def _resolve_lookup_table(self, key: Pubkey) -> AddressLookupTableAccount:
        data = await self.chain_query.get_account_info(key)
        if data is None:
            raise LookupNotFound(f"Lookup table {key} not found")
        try:
            table = AddressLookupTable.deserialize(data)
        except ValueError as e:
            raise LookupNotFound(f"Lookup table {key} could not be decoded: {e}") from e
        return AddressLookupTableAccount(key=key, addresses=list(table.addresses))

    async def resolve_lookup_tables(
        self, lookup_refs: list[str]
    ) -> list[AddressLookupTableAccount]:
        """
        Fetch every referenced table concurrently, duplicates removed in order.
        One failure fails the whole batch.
        """
        keys = [parse_pubkey(ref, "lookup table address") for ref in dict.fromkeys(lookup_refs)]
        if not keys:
            return []
        return list(await asyncio.gather(*(self._resolve_lookup_table(k) for k in keys)))

    async def assemble(
        self,
        instructions: list[Instruction],
        lookup_refs: list[str],
        payer: Pubkey,
        recent_blockhash: Hash,
    ) -> VersionedTransaction:
        ixs = [parse_instruction(ix) for ix in instructions]
        tables = await self.resolve_lookup_tables(lookup_refs)

        try:
            message = MessageV0.try_compile(payer, ixs, tables, recent_blockhash)
        except Exception as e:
            raise CompilationError(f"Failed to compile message: {e}") from e

        placeholders = [Signature.default()] * message.header.num_required_signatures
        tx = VersionedTransaction.populate(message, placeholders)

        size = len(bytes(tx))
        if size > PACKET_DATA_SIZE:
            raise CompilationError(
                f"Transaction too large: {size} bytes (max {PACKET_DATA_SIZE})"
            )

        self.logger.transaction_assembled(len(ixs), len(tables), size)
        return tx

    async def assemble_swap(
        self,
        response: SwapInstructionsResponse,
        payer: Pubkey,
        recent_blockhash: Hash,
    ) -> VersionedTransaction:
        """Assemble a /swap-instructions response with its own lookup tables."""
        return await self.assemble(
            order_swap_instructions(response),
            response.address_lookup_table_addresses,
            payer,
            recent_blockhash,
        )
