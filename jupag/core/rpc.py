#!/usr/bin/env python3
"""
JUPAG - Solana RPC Client

Account reads for lookup tables, blockhashes for assembly, submission of
signed transactions built locally and polling until they confirm.
"""

import asyncio
from typing import Optional

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature

from jupag.config import ClientConfig
from jupag.exceptions import RpcError
from jupag.logger import JupagLogger

# Default timeout for individual RPC calls (seconds)
RPC_TIMEOUT_SECONDS = 15


class SolanaClient:
    """
    solana-py AsyncClient with per-call timeouts.
    Satisfies the assembler's ChainQuery.
    """

    def __init__(self, config: ClientConfig, logger: JupagLogger):
        self.config = config
        self.logger = logger
        self.client = AsyncClient(config.rpc_url)

    async def get_account_info(self, pubkey: Pubkey) -> Optional[bytes]:
        """Fetch raw account data bytes. None when absent or unreadable."""
        try:
            response = await asyncio.wait_for(
                self.client.get_account_info(pubkey, commitment=Confirmed),
                timeout=RPC_TIMEOUT_SECONDS,
            )
            if response.value and response.value.data:
                return bytes(response.value.data)
            return None
        except asyncio.TimeoutError:
            self.logger.warning(f"RPC timeout: get_account_info {pubkey}")
            return None
        except Exception as e:
            self.logger.error(f"Failed to fetch account info for {pubkey}", e)
            return None

    async def get_latest_blockhash(self) -> tuple[Hash, int]:
        """Recent blockhash and the last block height it stays valid for."""
        try:
            response = await asyncio.wait_for(
                self.client.get_latest_blockhash(commitment=Confirmed),
                timeout=RPC_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            raise RpcError("RPC timeout: get_latest_blockhash") from e
        except Exception as e:
            raise RpcError(f"Failed to fetch latest blockhash: {e}") from e
        return response.value.blockhash, response.value.last_valid_block_height

    async def send_raw_transaction(
        self,
        raw: bytes,
        skip_preflight: bool = False
    ) -> str:
        """Broadcast a signed, serialized transaction; returns its signature."""
        opts = TxOpts(
            skip_preflight=skip_preflight,
            preflight_commitment=Confirmed
        )
        try:
            response = await asyncio.wait_for(
                self.client.send_raw_transaction(raw, opts),
                timeout=RPC_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            raise RpcError("RPC timeout: send_raw_transaction") from e
        except Exception as e:
            raise RpcError(f"Failed to send transaction: {e}") from e

        signature = str(response.value)
        self.logger.transaction_sent(signature)
        return signature

    async def get_signature_statuses(self, signatures: list[str]) -> list:
        """Confirmation status per signature; None entries are unknown."""
        try:
            sigs = [Signature.from_string(s) for s in signatures]
            response = await asyncio.wait_for(
                self.client.get_signature_statuses(sigs),
                timeout=RPC_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            raise RpcError("RPC timeout: get_signature_statuses") from e
        except Exception as e:
            raise RpcError(f"Failed to fetch signature statuses: {e}") from e
        return list(response.value) if response.value else []

    async def get_block_height(self) -> int:
        try:
            response = await asyncio.wait_for(
                self.client.get_block_height(commitment=Confirmed),
                timeout=RPC_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            raise RpcError("RPC timeout: get_block_height") from e
        except Exception as e:
            raise RpcError(f"Failed to fetch block height: {e}") from e
        return response.value

    async def close(self):
        await self.client.close()
