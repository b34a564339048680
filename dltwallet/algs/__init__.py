from __future__ import annotations

"""
dltwallet.algs — signature scheme backends

The wallet is pinned to one parameter set, Dilithium3 (round 3). Higher
layers (dltwallet.keygen / dltwallet.sign) reach the backend through
`select_sig`, so the pinned choice lives in one place.

Signature backend surface:
  - sizes: dict with keys {"pk","sk","sig"} (ints)
  - keypair_from_stream(read) -> (pk: bytes, sk: bytes)
  - sign(sk: bytes, msg: bytes) -> sig: bytes
  - verify(pk: bytes, msg: bytes, sig: bytes) -> bool
"""

from types import ModuleType

from . import dilithium3

DEFAULT_SIG_ALG = dilithium3.NAME

_BACKENDS = {
    dilithium3.NAME: dilithium3,
}


def select_sig(name: str = DEFAULT_SIG_ALG) -> ModuleType:
    """Return the backend module for a signature scheme name."""
    lname = name.strip().lower().replace("-", "")
    try:
        return _BACKENDS[lname]
    except KeyError:
        raise NotImplementedError(f"Signature algorithm not available: {name}") from None


__all__ = ["DEFAULT_SIG_ALG", "select_sig", "dilithium3"]
