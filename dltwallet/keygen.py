from __future__ import annotations

"""
keygen.py — deterministic wallet key derivation.

Pipeline
--------
    mnemonic ──PBKDF2-SHA512──▶ seed(64) ──HKDF-SHA256──▶ keystream
             ──Dilithium3 keygen──▶ (pk, sk) ──SHA-256[:20]──▶ raw address

Every call builds its own seed, keystream and backend instance. The same
mnemonic always produces the same keys and address on any machine.

The returned address is the raw 40-hex form. Use
`dltwallet.address.checksum_address` for the "dlt1…" display form.
"""

import logging
from dataclasses import dataclass

from dltwallet.address import derive_address
from dltwallet.algs import DEFAULT_SIG_ALG, select_sig
from dltwallet.keystream import open_keystream
from dltwallet.mnemonic import mnemonic_to_seed

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalletKeys:
    public_key: bytes
    private_key: bytes
    address: str  # raw 40-hex address

    def __repr__(self) -> str:
        pk8 = self.public_key[:8].hex()
        return f"WalletKeys(pk[:8]={pk8}…, sk=<{len(self.private_key)} bytes>, addr={self.address})"


def keypair_from_seed(seed: bytes, *, alg: str = DEFAULT_SIG_ALG) -> tuple[bytes, bytes]:
    """
    Expand `seed` into a fresh keystream and run one key generation over it.

    Returns (public_key, private_key). Raises KeyGenerationError on backend
    failure; there is no retry.
    """
    backend = select_sig(alg)
    stream = open_keystream(seed)
    pk, sk = backend.keypair_from_stream(stream.read)
    log.debug("keypair generated", extra={"alg": alg, "keystream_bytes": stream.consumed})
    return pk, sk


def derive_keys(mnemonic: str) -> WalletKeys:
    """
    Derive the wallet keypair and raw address from a mnemonic phrase.

    The phrase is not validated here; any text derives some wallet. Call
    `dltwallet.mnemonic.validate_mnemonic` first when the input is user-typed.
    """
    seed = mnemonic_to_seed(mnemonic)
    pk, sk = keypair_from_seed(seed)
    address = derive_address(pk)
    log.info("wallet keys derived", extra={"address": address})
    return WalletKeys(public_key=pk, private_key=sk, address=address)


__all__ = ["WalletKeys", "keypair_from_seed", "derive_keys"]
