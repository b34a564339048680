from __future__ import annotations

"""
address.py — wallet addresses

Format
------
raw address   = hex( sha256(pubkey)[:20] )                  40 lowercase hex chars
checksummed   = "dlt1" || raw || hex( sha256("dlt1" || raw) )[:4]   48 chars

- The checksum hashes the *text* "dlt1" + raw hex (ASCII), not the raw bytes.
- Only the first 4 hex characters (2 bytes) of the digest are kept.
- Key derivation returns the raw form; the checksummed form is a separate,
  explicit step. Both are valid recipient inputs (see `parse_address`).

Examples
--------
>>> raw = derive_address(b"\\x01" * 1952)
>>> len(raw), len(checksum_address(raw))
(40, 48)
>>> parse_address(checksum_address(raw)) == raw
True
"""

import hashlib

from dltwallet.errors import AddressError
from dltwallet.utils.hexutil import is_lower_hex

PREFIX = "dlt1"
RAW_BYTES = 20
RAW_HEX_LEN = 2 * RAW_BYTES
CHECKSUM_HEX_LEN = 4
CHECKSUMMED_LEN = len(PREFIX) + RAW_HEX_LEN + CHECKSUM_HEX_LEN


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def derive_address(public_key: bytes) -> str:
    """
    Raw address for a serialized public key: first 20 bytes of SHA-256, hex.
    """
    if not isinstance(public_key, (bytes, bytearray, memoryview)):
        raise TypeError("public_key must be bytes-like")
    return hashlib.sha256(bytes(public_key)).digest()[:RAW_BYTES].hex()


def address_checksum(raw_hex: str) -> str:
    """The 4-hex-char checksum over PREFIX + raw_hex."""
    digest = hashlib.sha256((PREFIX + raw_hex).encode("utf-8")).hexdigest()
    return digest[:CHECKSUM_HEX_LEN]


def checksum_address(raw_hex: str) -> str:
    """
    Prefix and checksum a raw address: "dlt1" + raw_hex + checksum.

    The input is hashed as given and not validated.
    """
    return PREFIX + raw_hex + address_checksum(raw_hex)


def public_key_hex(public_key: bytes) -> str:
    """Lowercase hex of a serialized public key."""
    return bytes(public_key).hex()


# ---------------------------------------------------------------------------
# Decoding / Validation
# ---------------------------------------------------------------------------


def parse_address(text: str) -> str:
    """
    Accept a raw (40 hex) or checksummed ("dlt1…", 48 chars) address and
    return the raw hex form. Raises AddressError on failure.
    """
    if not isinstance(text, str):
        raise AddressError("address must be a string")
    addr = text.strip()

    if len(addr) == RAW_HEX_LEN:
        if not is_lower_hex(addr.lower()):
            raise AddressError("raw address must be hex")
        return addr.lower()

    if not addr.startswith(PREFIX):
        raise AddressError(f"address must be {RAW_HEX_LEN} hex chars or start with {PREFIX!r}")
    if len(addr) != CHECKSUMMED_LEN:
        raise AddressError(f"checksummed address length invalid: {len(addr)} != {CHECKSUMMED_LEN}")

    raw = addr[len(PREFIX) : len(PREFIX) + RAW_HEX_LEN]
    got = addr[len(PREFIX) + RAW_HEX_LEN :]
    if not is_lower_hex(raw) or not is_lower_hex(got):
        raise AddressError("checksummed address must be lowercase hex after the prefix")
    want = address_checksum(raw)
    if got != want:
        raise AddressError(f"address checksum mismatch: expected {want}, got {got}")
    return raw


def is_valid_address(text: str) -> bool:
    """Non-raising form of `parse_address`."""
    try:
        parse_address(text)
    except AddressError:
        return False
    return True


# ---------------------------------------------------------------------------
# Pretty helpers
# ---------------------------------------------------------------------------


def short(addr: str, *, keep: int = 6) -> str:
    """
    Render a short address like dlt1ab…9f3c (useful in logs/UI).
    """
    if len(addr) <= 2 * keep + 3:
        return addr
    return f"{addr[:keep]}…{addr[-keep:]}"


__all__ = [
    "PREFIX",
    "RAW_HEX_LEN",
    "CHECKSUMMED_LEN",
    "derive_address",
    "address_checksum",
    "checksum_address",
    "public_key_hex",
    "parse_address",
    "is_valid_address",
    "short",
]
