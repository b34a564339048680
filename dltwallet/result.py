"""
Tagged results returned by the boundary API (`dltwallet.api`).

Each fallible operation returns either its success variant or `Failure`.
Both carry `ok` as the discriminant, so a caller can branch without
`isinstance`:

    res = api.derive_keys(phrase)
    if res.ok:
        use(res.public_key, res.address)
    else:
        show(res.kind, res.error)

`to_dict()` renders a result for transport; bytes become lowercase hex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Union

from dltwallet.errors import WalletError

__all__ = [
    "Failure",
    "MnemonicOk",
    "KeysOk",
    "SignatureOk",
    "MnemonicResult",
    "KeysResult",
    "SignatureResult",
]


@dataclass(frozen=True)
class Failure:
    """A failed operation: error class name plus a human-readable message."""

    kind: str
    error: str
    ok: Literal[False] = field(default=False, init=False)

    @classmethod
    def from_error(cls, err: WalletError) -> "Failure":
        return cls(kind=err.code, error=err.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "kind": self.kind, "error": self.error}


@dataclass(frozen=True)
class MnemonicOk:
    mnemonic: str
    ok: Literal[True] = field(default=True, init=False)

    def __repr__(self) -> str:
        return f"MnemonicOk(words={len(self.mnemonic.split())})"

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "mnemonic": self.mnemonic}


@dataclass(frozen=True)
class KeysOk:
    public_key: bytes
    private_key: bytes
    address: str
    ok: Literal[True] = field(default=True, init=False)

    def __repr__(self) -> str:
        return f"KeysOk(pk[:8]={self.public_key[:8].hex()}…, sk=<hidden>, address={self.address})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": True,
            "publicKey": self.public_key.hex(),
            "privateKey": self.private_key.hex(),
            "address": self.address,
        }


@dataclass(frozen=True)
class SignatureOk:
    signature: bytes
    signature_hex: str
    ok: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "signature": self.signature.hex(), "signatureHex": self.signature_hex}


MnemonicResult = Union[MnemonicOk, Failure]
KeysResult = Union[KeysOk, Failure]
SignatureResult = Union[SignatureOk, Failure]
