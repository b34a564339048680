"""
dltwallet — deterministic post-quantum wallet core

A BIP-39 mnemonic is stretched into a 64-byte seed, expanded with HKDF-SHA256
into a keystream, and fed to Dilithium3 key generation. The wallet address is
the first 20 bytes of SHA-256 over the public key. The same phrase always
yields the same keys and address.

Quick use:
    from dltwallet import generate_mnemonic, derive_keys
    from dltwallet.sign import sign, verify

    phrase = generate_mnemonic()
    keys = derive_keys(phrase)
    sig = sign(keys.private_key, "hello")
    assert verify(keys.public_key, "hello", sig.signature)

Host integrations that want tagged results instead of exceptions use
`dltwallet.api`.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .address import checksum_address, derive_address, parse_address, public_key_hex
from .errors import WalletError
from .keygen import WalletKeys, derive_keys
from .mnemonic import generate_mnemonic, mnemonic_to_seed, validate_mnemonic

try:
    __version__ = version("dlt-wallet")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    "derive_keys",
    "WalletKeys",
    "derive_address",
    "checksum_address",
    "parse_address",
    "public_key_hex",
    "WalletError",
]
