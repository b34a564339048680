"""
dltwallet.api
=============

Boundary operations for host environments (UI bridges, RPC handlers, CLIs).

Each function is stateless and safe to call concurrently. Fallible operations
return a tagged result (see `dltwallet.result`) instead of raising, so the
host can report structured errors without unwinding through its own stack:

| operation            | success               | failure  |
|----------------------|-----------------------|----------|
| generate_mnemonic()  | MnemonicOk            | Failure  |
| validate_mnemonic(t) | bool                  | never    |
| derive_keys(m)       | KeysOk                | Failure  |
| sign(sk, msg)        | SignatureOk           | Failure  |
| checksum_address(a)  | str                   | never    |
| public_key_hex(pk)   | str                   | never    |

Nothing is retried. Identical inputs give identical outputs, except that a
signature may differ between calls if the backend hedges its signing.
"""

from __future__ import annotations

import logging

from dltwallet import address as _address
from dltwallet import keygen as _keygen
from dltwallet import mnemonic as _mnemonic
from dltwallet import sign as _sign
from dltwallet.errors import WalletError, as_error_dict
from dltwallet.result import (
    Failure,
    KeysOk,
    KeysResult,
    MnemonicOk,
    MnemonicResult,
    SignatureOk,
    SignatureResult,
)
from dltwallet.sign import Message

log = logging.getLogger(__name__)

__all__ = [
    "generate_mnemonic",
    "validate_mnemonic",
    "derive_keys",
    "sign",
    "checksum_address",
    "public_key_hex",
]


def _fail(op: str, err: WalletError) -> Failure:
    log.warning("%s failed", op, extra=as_error_dict(err))
    return Failure.from_error(err)


def generate_mnemonic() -> MnemonicResult:
    try:
        phrase = _mnemonic.generate_mnemonic()
    except WalletError as e:
        return _fail("generate_mnemonic", e)
    return MnemonicOk(mnemonic=phrase)


def validate_mnemonic(phrase: str) -> bool:
    return _mnemonic.validate_mnemonic(phrase)


def derive_keys(mnemonic: str) -> KeysResult:
    try:
        keys = _keygen.derive_keys(mnemonic)
    except WalletError as e:
        return _fail("derive_keys", e)
    return KeysOk(public_key=keys.public_key, private_key=keys.private_key, address=keys.address)


def sign(private_key: bytes, message: Message) -> SignatureResult:
    try:
        sig = _sign.sign(private_key, message)
    except WalletError as e:
        return _fail("sign", e)
    return SignatureOk(signature=sig.signature, signature_hex=sig.signature_hex)


def checksum_address(raw_hex: str) -> str:
    return _address.checksum_address(raw_hex)


def public_key_hex(public_key: bytes) -> str:
    return _address.public_key_hex(public_key)
