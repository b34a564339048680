"""
dltwallet.utils
===============

Small portable helpers used by the derivation pipeline:

- HKDF-SHA256 extract/expand and the lazy `HKDFStream` reader
- Hex helpers for transport encodings
"""

from __future__ import annotations

from .hkdf import HKDFStream, hkdf_expand, hkdf_extract
from .hexutil import from_hex, is_lower_hex

__all__ = [
    "HKDFStream",
    "hkdf_extract",
    "hkdf_expand",
    "from_hex",
    "is_lower_hex",
]
