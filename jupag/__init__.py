"""
JUPAG - Jupiter aggregator client

Typed async client for the Jupiter swap APIs, plus the pieces needed to
turn their answers into signed Solana transactions.

Usage:
    from jupag import ClientConfig, JupagLogger, JupiterClient, QuoteRequest

    config = ClientConfig()
    async with JupiterClient(config, JupagLogger(config)) as client:
        quote = await client.get_quote(QuoteRequest(input_mint=..., output_mint=..., amount=...))
"""

__version__ = "0.1.0"

# Config
from jupag.config import ClientConfig

# Core
from jupag.core.assembler import InstructionAssembler, order_swap_instructions
from jupag.core.client import JupiterClient
from jupag.core.rpc import SolanaClient
from jupag.core.signer import sign_transaction
from jupag.core.transport import AiohttpTransport, HttpResponse, HttpTransport
from jupag.core.wallet import WalletManager, load_secret_key

# Exceptions
from jupag.exceptions import (
    ApiError,
    AssemblyError,
    CompilationError,
    ConfigError,
    ConfirmationError,
    DecodeError,
    DeserializationError,
    InvalidAddress,
    InvalidKey,
    InvalidPayload,
    JupagError,
    JupiterClientError,
    LookupNotFound,
    RequestError,
    ResponseParseError,
    RpcError,
    SigningError,
)

# Logger
from jupag.logger import JupagLogger

# Records
from jupag.types import *  # noqa: F401,F403

__all__ = [
    # Config
    "ClientConfig",
    # Exceptions
    "JupagError",
    "ConfigError",
    "SigningError",
    "DecodeError",
    "DeserializationError",
    "InvalidKey",
    "AssemblyError",
    "InvalidAddress",
    "InvalidPayload",
    "LookupNotFound",
    "CompilationError",
    "JupiterClientError",
    "RequestError",
    "ApiError",
    "ResponseParseError",
    "RpcError",
    "ConfirmationError",
    # Logger
    "JupagLogger",
    # Core
    "JupiterClient",
    "HttpTransport",
    "HttpResponse",
    "AiohttpTransport",
    "sign_transaction",
    "WalletManager",
    "load_secret_key",
    "InstructionAssembler",
    "order_swap_instructions",
    "SolanaClient",
]
