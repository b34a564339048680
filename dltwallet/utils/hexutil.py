from __future__ import annotations

import string

_LOWER_HEX = frozenset(string.digits + "abcdef")


def from_hex(s: str) -> bytes:
    """
    Hex string (optionally '0x' prefixed) -> bytes.

    Enforces even length; accepts either letter case.
    """
    if not isinstance(s, str):
        raise TypeError("from_hex expects a string")
    s = s.strip()
    if s.startswith(("0x", "0X")):
        s = s[2:]
    if len(s) % 2 != 0:
        raise ValueError("hex string must have even length")
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def is_lower_hex(s: str, length: int | None = None) -> bool:
    """True if `s` is made only of 0-9a-f (and has `length` chars, if given)."""
    if length is not None and len(s) != length:
        return False
    return bool(s) and all(c in _LOWER_HEX for c in s)


__all__ = ["from_hex", "is_lower_hex"]
