"""
JUPAG Test Suite - Shared Fixtures
"""

import base64
import json
import struct
from typing import Optional

import pytest
from solders.hash import Hash
from solders.instruction import AccountMeta, Instruction
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from jupag.config import ClientConfig
from jupag.core.client import JupiterClient
from jupag.core.transport import HttpResponse
from jupag.logger import JupagLogger

BASE_URL = "https://lite-api.jup.ag"
MEMO_PROGRAM = Pubkey.from_string("MemoSq4gqABAXKb96qnH8TysNcWxMyWCqXgDLGmfcHr")

SOL = "So11111111111111111111111111111111111111112"
USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
JUP = "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"
WALLET = "372sKPyyiwU5zYASHzqvYY48Sv4ihEujfN5rGFKhVQ9j"

QUOTE = {
    "inputMint": SOL,
    "inAmount": "1000000",
    "outputMint": USDC,
    "outAmount": "150000",
    "otherAmountThreshold": "149250",
    "swapMode": "ExactIn",
    "slippageBps": 50,
    "platformFee": None,
    "priceImpactPct": "0",
    "routePlan": [
        {
            "swapInfo": {
                "ammKey": "5BKxfWMbmYBAEWvyPZS9esPducUba9GqyMjtLCfbaqyF",
                "label": "Meteora DLMM",
                "inputMint": SOL,
                "outputMint": USDC,
                "inAmount": "1000000",
                "outAmount": "150000",
                "feeAmount": "24",
                "feeMint": SOL,
            },
            "percent": 100,
            "bps": 10000,
        }
    ],
    "contextSlot": 299283763,
    "timeTaken": 0.015,
    "swapUsdValue": "0.15",
}

TOKEN = {
    "id": JUP,
    "name": "Jupiter",
    "symbol": "JUP",
    "tokenProgram": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
    "decimals": 6,
    "isVerified": True,
    "tags": ["verified"],
}


class FakeTransport:
    """Records requests and answers from a table keyed by (method, path)."""

    def __init__(self):
        self.calls: list[dict] = []
        self.responses: dict[tuple[str, str], object] = {}
        self.closed = False

    def respond(self, method: str, path: str, body, status: int = 200):
        text = body if isinstance(body, str) else json.dumps(body)
        self.responses[(method, path)] = HttpResponse(status=status, text=text)

    def fail(self, method: str, path: str, error: Exception):
        self.responses[(method, path)] = error

    async def request(self, method, url, params=None, json_body=None):
        path = url[len(BASE_URL):]
        self.calls.append({"method": method, "path": path, "params": params, "json": json_body})
        response = self.responses.get((method, path))
        if response is None:
            return HttpResponse(status=404, text="not found")
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self):
        self.closed = True

    @property
    def last(self) -> dict:
        return self.calls[-1]


class FakeChainQuery:
    """Lookup table accounts keyed by base58 address."""

    def __init__(self, accounts: Optional[dict[str, bytes]] = None):
        self.accounts = accounts or {}
        self.queried: list[str] = []

    async def get_account_info(self, pubkey: Pubkey) -> Optional[bytes]:
        self.queried.append(str(pubkey))
        return self.accounts.get(str(pubkey))


def lookup_table_data(addresses: list[Pubkey], authority: Optional[Pubkey] = None) -> bytes:
    """Serialize a lookup table account the way the runtime stores it."""
    meta = struct.pack("<IQQB", 1, 2**64 - 1, 0, 0)
    if authority is None:
        meta += b"\x00" + bytes(32)
    else:
        meta += b"\x01" + bytes(authority)
    meta += b"\x00\x00"
    return meta + b"".join(bytes(a) for a in addresses)


def unsigned_transaction(payer: Pubkey, extra_signers: list[Pubkey] = (), slots: Optional[int] = None):
    """v0 transaction with default signatures; `slots` overrides the count."""
    accounts = [AccountMeta(pubkey=payer, is_signer=True, is_writable=True)]
    accounts += [AccountMeta(pubkey=s, is_signer=True, is_writable=False) for s in extra_signers]
    ix = Instruction(program_id=MEMO_PROGRAM, data=b"jupag", accounts=accounts)
    message = MessageV0.try_compile(payer, [ix], [], Hash.default())
    count = message.header.num_required_signatures if slots is None else slots
    return VersionedTransaction.populate(message, [Signature.default()] * count)


def to_b64(tx: VersionedTransaction) -> str:
    return base64.b64encode(bytes(tx)).decode("utf-8")


@pytest.fixture
def config():
    """Client configuration pinned away from the environment."""
    return ClientConfig(
        base_url=BASE_URL,
        rpc_url="https://rpc.example.com",
        private_key="",
        log_level="DEBUG",
    )


@pytest.fixture
def logger(config):
    """Logger instance for tests."""
    return JupagLogger(config)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(config, logger, transport):
    return JupiterClient(config, logger, transport=transport)


@pytest.fixture
def keypair():
    """Fixed keypair so signatures are reproducible."""
    return Keypair.from_seed(bytes([1] * 32))


@pytest.fixture
def chain():
    return FakeChainQuery()
