#!/usr/bin/env python3
"""
JUPAG - Transaction Signer

Takes an unsigned base64 transaction from the API, signs its message with
the wallet key and hands back the base64 wire form. No network, no state.

Only slot 0 (the fee payer) is ever written. Transactions that need more
than one signer must be signed elsewhere.
"""

import base64
import binascii

from solders.keypair import Keypair
from solders.message import to_bytes_versioned
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from jupag.exceptions import DecodeError, DeserializationError, InvalidKey

SECRET_KEY_LENGTH = 64


def keypair_from_secret(secret_key: bytes) -> Keypair:
    """64 raw bytes (secret half + public half) to a Keypair."""
    if len(secret_key) != SECRET_KEY_LENGTH:
        raise InvalidKey(
            f"Secret key must be {SECRET_KEY_LENGTH} bytes, got {len(secret_key)}"
        )
    try:
        return Keypair.from_bytes(secret_key)
    except Exception as e:
        raise InvalidKey(f"Invalid secret key: {e}") from e


def decode_envelope(envelope_b64: str) -> VersionedTransaction:
    try:
        raw = base64.b64decode(envelope_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Transaction is not valid base64: {e}") from e

    try:
        return VersionedTransaction.from_bytes(raw)
    except Exception as e:
        raise DeserializationError(f"Failed to deserialize transaction: {e}") from e


def sign_versioned(tx: VersionedTransaction, keypair: Keypair) -> VersionedTransaction:
    """
    Sign the versioned message bytes and place the signature in slot 0.
    An empty signature list gets one entry; otherwise the slot count is kept.
    """
    signature = keypair.sign_message(to_bytes_versioned(tx.message))

    signatures: list[Signature] = list(tx.signatures)
    if signatures:
        signatures[0] = signature
    else:
        signatures.append(signature)

    return VersionedTransaction.populate(tx.message, signatures)


def sign_transaction(envelope_b64: str, secret_key: bytes) -> str:
    """
    Sign a base64 transaction and return it re-encoded as base64.

    Raises DecodeError, DeserializationError or InvalidKey; none are retryable.
    """
    tx = decode_envelope(envelope_b64)
    keypair = keypair_from_secret(secret_key)
    signed = sign_versioned(tx, keypair)
    return base64.b64encode(bytes(signed)).decode("utf-8")
