"""
Keystream expander: 64-byte seed -> ordered, on-demand key-generation bytes.

    PRK    = HMAC-SHA256(key="dilithium-v1-keypair", msg=seed)
    stream = T(1) | T(2) | ...      (HKDF-Expand, empty info)

The salt is a domain-separation constant. It is not used by any other
derivation in the wallet, so the same seed fed to another protocol cannot
yield this key material.

Each call to `open_keystream` returns a fresh stream positioned at offset 0.
A stream is consumed by exactly one key generation; reads never repeat.
"""

from __future__ import annotations

import hashlib

from dltwallet.mnemonic import SEED_SIZE
from dltwallet.utils.hkdf import HKDFStream

KEYPAIR_SALT = b"dilithium-v1-keypair"
KEYPAIR_INFO = b""


def open_keystream(seed: bytes) -> HKDFStream:
    """Build the keypair keystream for `seed`."""
    if len(seed) != SEED_SIZE:
        raise ValueError(f"seed must be {SEED_SIZE} bytes, got {len(seed)}")
    return HKDFStream.from_ikm(
        seed,
        salt=KEYPAIR_SALT,
        info=KEYPAIR_INFO,
        digest=hashlib.sha256,
    )


__all__ = ["KEYPAIR_SALT", "KEYPAIR_INFO", "SEED_SIZE", "open_keystream"]
