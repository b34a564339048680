from __future__ import annotations

"""
sign.py — message signing with a serialized wallet private key.

The message is signed as raw bytes: a `str` is UTF-8 encoded and nothing is
added (no length prefix, no domain tag, no prehash). Callers that need a
transcript structure, e.g. binding to a transaction hash, build it before
calling `sign`.

Whether two signatures over the same (key, message) are byte-identical is a
backend property. Compare signatures by verifying them, not by equality.
"""

import logging
from dataclasses import dataclass
from typing import Union

from dltwallet.algs import DEFAULT_SIG_ALG, select_sig
from dltwallet.errors import InvalidInput, InvalidPrivateKeyEncoding

log = logging.getLogger(__name__)

Message = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Signature:
    signature: bytes
    signature_hex: str

    def __repr__(self) -> str:
        return f"Signature(len={len(self.signature)}, sig[:8]={self.signature_hex[:16]}…)"


def message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise InvalidInput(f"message must be str or bytes-like, got {type(message).__name__}")


def sign(private_key: bytes, message: Message, *, alg: str = DEFAULT_SIG_ALG) -> Signature:
    """
    Sign `message` with a serialized private key.

    Raises InvalidPrivateKeyEncoding when the key has the wrong length or
    does not decode; no signature is produced in that case.
    """
    if not isinstance(private_key, (bytes, bytearray, memoryview)):
        raise InvalidPrivateKeyEncoding(f"private key must be bytes, got {type(private_key).__name__}")
    backend = select_sig(alg)
    sig = backend.sign(bytes(private_key), message_bytes(message))
    log.debug("message signed", extra={"alg": alg, "sig_len": len(sig)})
    return Signature(signature=sig, signature_hex=sig.hex())


def verify(public_key: bytes, message: Message, signature: bytes, *, alg: str = DEFAULT_SIG_ALG) -> bool:
    """
    Verify a signature over `message`. Never raises for malformed input.
    """
    backend = select_sig(alg)
    return backend.verify(bytes(public_key), message_bytes(message), bytes(signature))


__all__ = ["Signature", "Message", "message_bytes", "sign", "verify"]
