from __future__ import annotations

"""
HKDF-SHA256 (RFC 5869) utilities
================================

The wallet turns its 64-byte mnemonic seed into key-generation randomness with
HKDF over **SHA-256**. This module provides a dependency-free implementation:

- hkdf_extract(salt, ikm, digest=sha256) -> prk
- hkdf_expand(prk, info, length, digest=sha256) -> okm
- HKDFStream(prk, info, digest=sha256) -> incremental reader over the OKM

Conventions
-----------
* All inputs accept bytes-like (bytes/bytearray/memoryview).
* HKDF output is capped at 255 * HashLen bytes (8160 for SHA-256). The
  stream raises `KeystreamExhausted` instead of running past the cap.
* `HKDFStream.read(n)` yields exactly the bytes `hkdf_expand(prk, info, L)`
  would return at the same offsets, so chunked and one-shot reads agree.
"""

import hashlib
import hmac
from typing import Callable, Optional, Union

from dltwallet.errors import KeystreamExhausted

BytesLike = Union[bytes, bytearray, memoryview]
DigestFactory = Callable[[], "hashlib._Hash"]  # create a new hash object

_MAX_BLOCKS = 255


def _to_bytes(b: Optional[BytesLike]) -> bytes:
    if b is None:
        return b""
    if isinstance(b, (bytes, bytearray)):
        return bytes(b)
    return bytes(memoryview(b))


def hkdf_extract(
    salt: Optional[BytesLike],
    ikm: BytesLike,
    *,
    digest: DigestFactory = hashlib.sha256,
) -> bytes:
    """
    HKDF-Extract(salt, IKM) → PRK

    PRK = HMAC(salt || zeros(HashLen), IKM)
    """
    ikm_b = _to_bytes(ikm)
    hash_len = digest().digest_size
    salt_b = _to_bytes(salt) or (b"\x00" * hash_len)
    return hmac.new(salt_b, ikm_b, digestmod=digest).digest()


def hkdf_expand(
    prk: BytesLike,
    info: Optional[BytesLike],
    length: int,
    *,
    digest: DigestFactory = hashlib.sha256,
) -> bytes:
    """
    HKDF-Expand(PRK, info, L) → OKM

    T(0) = empty
    T(i) = HMAC(PRK, T(i-1) | info | byte(i))
    OKM  = first L bytes of T(1) | T(2) | ... | T(N)
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    return HKDFStream(prk, info, digest=digest).read(length)


class HKDFStream:
    """
    Lazily expanded HKDF output.

    Blocks T(i) are computed only when a read reaches them. The stream is a
    single consumable sequence: every `read` continues where the previous one
    stopped. Build a new stream to start over from T(1).
    """

    __slots__ = ("_prk", "_info", "_digest", "_hash_len", "_block", "_counter", "_buf", "_emitted")

    def __init__(
        self,
        prk: BytesLike,
        info: Optional[BytesLike] = b"",
        *,
        digest: DigestFactory = hashlib.sha256,
    ) -> None:
        self._prk = _to_bytes(prk)
        self._info = _to_bytes(info)
        self._digest = digest
        self._hash_len = digest().digest_size
        self._block = b""
        self._counter = 0
        self._buf = bytearray()
        self._emitted = 0

    @classmethod
    def from_ikm(
        cls,
        ikm: BytesLike,
        *,
        salt: Optional[BytesLike] = None,
        info: Optional[BytesLike] = b"",
        digest: DigestFactory = hashlib.sha256,
    ) -> "HKDFStream":
        """Extract a PRK from `ikm` and return a stream over its expansion."""
        return cls(hkdf_extract(salt, ikm, digest=digest), info, digest=digest)

    @property
    def limit(self) -> int:
        """Total number of bytes HKDF can produce for this digest."""
        return _MAX_BLOCKS * self._hash_len

    @property
    def consumed(self) -> int:
        """Number of bytes handed out so far."""
        return self._emitted

    def remaining(self) -> int:
        return self.limit - self._emitted

    def _next_block(self) -> None:
        self._counter += 1
        self._block = hmac.new(
            self._prk,
            self._block + self._info + bytes([self._counter]),
            digestmod=self._digest,
        ).digest()
        self._buf.extend(self._block)

    def read(self, n: int) -> bytes:
        """Return the next `n` bytes of output."""
        if n < 0:
            raise ValueError("read size must be non-negative")
        if n > self.remaining():
            raise KeystreamExhausted(
                f"HKDF output limit reached: requested {n} bytes with "
                f"{self.remaining()} of {self.limit} remaining"
            )
        while len(self._buf) < n:
            self._next_block()
        out = bytes(self._buf[:n])
        del self._buf[:n]
        self._emitted += n
        return out

    def __repr__(self) -> str:
        return f"HKDFStream(consumed={self._emitted}, limit={self.limit})"


__all__ = [
    "hkdf_extract",
    "hkdf_expand",
    "HKDFStream",
]
