from __future__ import annotations

"""
Dilithium3 signature backend (dilithium-py wrapper)

CRYSTALS-Dilithium round 3, parameter set 3 (NIST level 3). The lattice
arithmetic lives in `dilithium_py`; this module only threads randomness in
and validates sizes on the way out.

Uniform surface exposed to higher layers:
  - sizes: dict {"pk","sk","sig"} (ints)
  - keypair_from_stream(read) -> (pk: bytes, sk: bytes)
  - sign(sk: bytes, msg: bytes) -> sig: bytes
  - verify(pk: bytes, msg: bytes, sig: bytes) -> bool

Randomness
----------
`dilithium_py` draws key-generation randomness through the instance attribute
`random_bytes(n)`. We never touch the shared `Dilithium3` object: every call
works on a shallow copy whose `random_bytes` is the caller's stream reader,
so concurrent derivations cannot observe each other's streams.
"""

import copy
import logging
from typing import Callable, Dict, Tuple

from dilithium_py.dilithium import Dilithium3 as _Dilithium3

from dltwallet.errors import InvalidPrivateKeyEncoding, KeyGenerationError, WalletError

log = logging.getLogger(__name__)

NAME = "dilithium3"

# Published round-3 sizes for Dilithium3.
PUBLIC_KEY_SIZE = 1952
PRIVATE_KEY_SIZE = 4000
SIGNATURE_SIZE = 3293

sizes: Dict[str, int] = {
    "pk": PUBLIC_KEY_SIZE,
    "sk": PRIVATE_KEY_SIZE,
    "sig": SIGNATURE_SIZE,
}

RandomSource = Callable[[int], bytes]


def _instance(random_source: RandomSource | None = None):
    inst = copy.copy(_Dilithium3)
    if random_source is not None:
        inst.random_bytes = random_source
    return inst


def keypair_from_stream(read: RandomSource) -> Tuple[bytes, bytes]:
    """
    Generate a Dilithium3 keypair drawing all randomness from `read`.

    The output is a pure function of the bytes `read` returns. A failure is
    reported as KeyGenerationError and is not retried.
    """
    try:
        pk, sk = _instance(read).keygen()
    except WalletError:
        raise
    except Exception as e:
        raise KeyGenerationError(f"dilithium3 key generation failed: {e}") from e

    pk, sk = bytes(pk), bytes(sk)
    if len(pk) != PUBLIC_KEY_SIZE or len(sk) != PRIVATE_KEY_SIZE:
        raise KeyGenerationError(
            f"dilithium3 backend returned pk={len(pk)} sk={len(sk)} bytes, "
            f"expected pk={PUBLIC_KEY_SIZE} sk={PRIVATE_KEY_SIZE}"
        )
    return pk, sk


def sign(sk: bytes, msg: bytes) -> bytes:
    """
    Sign `msg` with a serialized private key.

    The key must be exactly PRIVATE_KEY_SIZE bytes; anything else, or a key
    the backend cannot unpack, raises InvalidPrivateKeyEncoding.
    """
    if len(sk) != PRIVATE_KEY_SIZE:
        raise InvalidPrivateKeyEncoding(
            f"invalid private key: expected {PRIVATE_KEY_SIZE} bytes, got {len(sk)}"
        )
    try:
        sig = _Dilithium3.sign(bytes(sk), bytes(msg))
    except Exception as e:
        raise InvalidPrivateKeyEncoding(f"invalid private key: {e}") from e
    return bytes(sig)


def verify(pk: bytes, msg: bytes, sig: bytes) -> bool:
    """
    Verify a signature. Returns False for any malformed input.
    """
    if len(pk) != PUBLIC_KEY_SIZE or len(sig) != SIGNATURE_SIZE:
        return False
    try:
        return bool(_Dilithium3.verify(bytes(pk), bytes(msg), bytes(sig)))
    except Exception:
        log.debug("dilithium3 verify rejected malformed input", exc_info=True)
        return False


__all__ = [
    "NAME",
    "PUBLIC_KEY_SIZE",
    "PRIVATE_KEY_SIZE",
    "SIGNATURE_SIZE",
    "sizes",
    "keypair_from_stream",
    "sign",
    "verify",
]
