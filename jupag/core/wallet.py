#!/usr/bin/env python3
"""
JUPAG - Wallet Management

Loads the configured key and signs API transactions with it.
Never logs private keys.
"""

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from jupag.core.signer import keypair_from_secret, sign_transaction
from jupag.exceptions import InvalidKey


def load_secret_key(private_key_b58: str) -> bytes:
    """Decode a base58 private key into its 64 raw bytes."""
    if not private_key_b58:
        raise InvalidKey("Private key is empty")
    try:
        secret = base58.b58decode(private_key_b58.strip())
    except ValueError as e:
        raise InvalidKey(f"Invalid private key format: {e}") from e

    # Validates length and the public half.
    keypair_from_secret(secret)
    return secret


class WalletManager:
    """
    Holds the public key of the configured wallet. The secret bytes are
    kept only as long as this object lives and are handed to the signer
    per call.
    """

    def __init__(self, private_key_b58: str):
        self._secret = load_secret_key(private_key_b58)
        self.pubkey: Pubkey = Keypair.from_bytes(self._secret).pubkey()

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> "WalletManager":
        return cls(str(keypair))

    def get_address(self) -> str:
        """Return the wallet's public address."""
        return str(self.pubkey)

    def sign_b64(self, envelope_b64: str) -> str:
        """Sign an unsigned base64 transaction from the API."""
        return sign_transaction(envelope_b64, self._secret)

    def __repr__(self) -> str:
        return f"WalletManager(pubkey={self.pubkey})"
