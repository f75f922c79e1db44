#!/usr/bin/env python3
"""
JUPAG - Exception Hierarchy

Structured error types for signing, assembly, and API calls.
"""


class JupagError(Exception):
    """Base exception for all jupag errors."""

    pass


class ConfigError(JupagError):
    """Invalid or missing configuration."""

    pass


# Signing


class SigningError(JupagError):
    """Transaction signing failure."""

    pass


class DecodeError(SigningError):
    """Envelope text is not valid base64."""

    pass


class DeserializationError(SigningError):
    """Envelope bytes do not match the transaction wire format."""

    pass


class InvalidKey(SigningError):
    """Secret key material has the wrong length or format."""

    pass


# Assembly


class AssemblyError(JupagError):
    """Instruction assembly failure."""

    pass


class InvalidAddress(AssemblyError):
    """Text does not parse as a Solana address."""

    pass


class InvalidPayload(AssemblyError):
    """Instruction data is not valid base64."""

    pass


class LookupNotFound(AssemblyError):
    """Referenced address lookup table is absent or unreadable."""

    pass


class CompilationError(AssemblyError):
    """Compiled message violates account or size limits."""

    pass


# Jupiter API


class JupiterClientError(JupagError):
    """Jupiter API call failure."""

    pass


class RequestError(JupiterClientError):
    """The HTTP request could not be completed."""

    pass


class ApiError(JupiterClientError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, status: int):
        super().__init__(f"API returned error: {message}, Status Code: {status}")
        self.message = message
        self.status = status


class ResponseParseError(JupiterClientError):
    """The response body could not be mapped onto the expected record."""

    pass


class RpcError(JupagError):
    """Solana RPC call failure."""

    pass


class ConfirmationError(RpcError):
    """Sent transaction failed on chain or expired before confirming."""

    pass
