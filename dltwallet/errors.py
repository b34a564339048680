"""
Typed error classes for the wallet core.

Library functions raise these so callers can catch a specific failure mode
while still being able to catch the base `WalletError`. The boundary layer
(`dltwallet.api`) converts them into `Failure` results keyed by `code`.
"""

from __future__ import annotations

from typing import Any, Dict

__all__ = [
    "WalletError",
    "EntropyError",
    "MnemonicEncodingError",
    "InvalidPrivateKeyEncoding",
    "KeyGenerationError",
    "KeystreamExhausted",
    "AddressError",
    "InvalidInput",
    "as_error_dict",
]


class WalletError(Exception):
    """Base class for all wallet errors."""

    code = "WalletError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class EntropyError(WalletError):
    """The OS randomness source failed while generating a mnemonic."""

    code = "EntropyError"


class MnemonicEncodingError(WalletError):
    """Entropy could not be turned into a mnemonic phrase."""

    code = "MnemonicEncodingError"


class InvalidPrivateKeyEncoding(WalletError):
    """
    Private key bytes do not decode under the parameter set.

    Raised for a wrong length or a structure the backend rejects. This is a
    data-integrity failure; no signature is produced.
    """

    code = "InvalidPrivateKeyEncoding"


class KeyGenerationError(WalletError):
    """
    The signature backend failed to produce a keypair from the keystream.

    Never retried: a retry would need a different stream and would yield a
    different key.
    """

    code = "KeyGenerationError"


class KeystreamExhausted(KeyGenerationError):
    """A read went past the HKDF output limit (255 * HashLen bytes)."""

    code = "KeyGenerationError"


class AddressError(WalletError, ValueError):
    """Raised when an address fails parsing or checksum validation."""

    code = "AddressError"


class InvalidInput(WalletError, TypeError):
    """An argument has the wrong type, e.g. a non-text mnemonic or message."""

    code = "InvalidInput"


def as_error_dict(err: WalletError) -> Dict[str, Any]:
    """Serialize an error for logs or transport."""
    return {"kind": err.code, "error": err.message}
