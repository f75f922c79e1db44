#!/usr/bin/env python3
"""
JUPAG - Client Configuration

API endpoints, credentials, and environment management.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://lite-api.jup.ag"
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"

_dotenv_loaded = False


def _ensure_dotenv() -> None:
    """Load .env file exactly once, on first call."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        load_dotenv()
        _dotenv_loaded = True


@dataclass
class ClientConfig:
    """
    Everything the client, the RPC collaborator, and the example flows need.
    Empty fields are filled from the environment after init.
    """

    # Jupiter API
    base_url: str = ""
    api_key: str = ""  # Switches on the x-api-key header
    request_timeout_seconds: float = 10.0

    # Solana RPC
    rpc_url: str = ""

    # Wallet
    private_key: str = ""  # Base58 encoded, 64 bytes

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables the file handler

    def __post_init__(self):
        """Fill env-based defaults after dataclass init."""
        _ensure_dotenv()
        if not self.base_url:
            self.base_url = os.getenv("JUPITER_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = self.base_url.rstrip("/")
        if not self.api_key:
            self.api_key = os.getenv("JUPITER_API_KEY", "")
        if not self.rpc_url:
            self.rpc_url = os.getenv("SOLANA_RPC_URL", DEFAULT_RPC_URL)
        if not self.private_key:
            self.private_key = os.getenv("PRIVATE_KEY", "")

    def __repr__(self) -> str:
        """Redact secrets so the config can be logged."""
        pk_display = "***" if self.private_key else "(empty)"
        api_key_display = "***" if self.api_key else "(empty)"
        return (
            f"ClientConfig(base_url='{self.base_url}', "
            f"rpc_url='{self.rpc_url[:30]}...', "
            f"api_key='{api_key_display}', "
            f"private_key='{pk_display}')"
        )

    def validate(self) -> list[str]:
        """Return a list of human-readable problems; empty means usable."""
        errors = []

        if not self.base_url.startswith("https://"):
            errors.append("Jupiter base URL must use HTTPS")

        if not self.rpc_url:
            errors.append("RPC URL required")
        elif not self.rpc_url.startswith("https://"):
            if not self.rpc_url.startswith("http://127.0.0.1") and not self.rpc_url.startswith(
                "http://localhost"
            ):
                errors.append("RPC URL must use HTTPS (plaintext HTTP leaks wallet data)")

        if self.request_timeout_seconds <= 0:
            errors.append("Request timeout must be positive")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors
