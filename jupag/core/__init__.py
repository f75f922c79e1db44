"""
JUPAG Core - Client, signer, assembler and RPC plumbing.
"""

from .assembler import ChainQuery, InstructionAssembler, order_swap_instructions, parse_instruction
from .client import JupiterClient
from .rpc import SolanaClient
from .signer import keypair_from_secret, sign_transaction
from .transport import AiohttpTransport, HttpResponse, HttpTransport
from .wallet import WalletManager, load_secret_key

__all__ = [
    "JupiterClient",
    "HttpTransport",
    "HttpResponse",
    "AiohttpTransport",
    "sign_transaction",
    "keypair_from_secret",
    "InstructionAssembler",
    "ChainQuery",
    "order_swap_instructions",
    "parse_instruction",
    "SolanaClient",
    "WalletManager",
    "load_secret_key",
]
