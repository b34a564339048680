"""
Mnemonic helpers (BIP-39) → 64-byte wallet seed.

Design notes
------------
- Generation & checksum: we lean on the widely used `mnemonic` (Trezor)
  package to turn 256 bits of OS entropy into 24 English words and to
  validate phrases. The wordlist and checksum rules are not reimplemented.

- Seed derivation (BIP-39 stretching):
    PBKDF2-HMAC-SHA512(
        password = UTF-8(mnemonic)          # exactly as given
        salt     = b"mnemonic" + UTF-8(passphrase),
        iter     = 2048,
        dkLen    = 64
    )  -> 64-byte seed

  The phrase is hashed verbatim. Unlike `Mnemonic.to_seed` we do not apply
  NFKD or collapse whitespace, so a phrase typed with a double space derives
  a different wallet. Wallets restored elsewhere depend on these bytes.

- The wallet itself always uses the empty passphrase. The parameter exists
  so the published BIP-39 vectors (passphrase "TREZOR") can pin the KDF.
"""

from __future__ import annotations

import functools
import hashlib
import secrets

from mnemonic import Mnemonic

from dltwallet.errors import EntropyError, InvalidInput, MnemonicEncodingError

SEED_SALT_PREFIX = "mnemonic"
SEED_ITERATIONS = 2048
SEED_SIZE = 64
ENTROPY_BITS = 256
WORD_COUNT = 24


@functools.lru_cache(maxsize=1)
def _english() -> Mnemonic:
    return Mnemonic("english")


def random_entropy(num_bytes: int = ENTROPY_BITS // 8) -> bytes:
    """
    Draw mnemonic entropy from the OS CSPRNG.

    Raises EntropyError if the platform randomness source fails.
    """
    try:
        return secrets.token_bytes(num_bytes)
    except OSError as e:
        raise EntropyError(f"OS randomness unavailable: {e}") from e


def entropy_to_mnemonic(entropy: bytes) -> str:
    """Encode raw entropy as English words (checksum appended by the library)."""
    try:
        return _english().to_mnemonic(entropy)
    except ValueError as e:
        raise MnemonicEncodingError(f"cannot encode entropy as mnemonic: {e}") from e


def generate_mnemonic() -> str:
    """
    Create a new 24-word BIP-39 English mnemonic from 256 bits of entropy.
    """
    return entropy_to_mnemonic(random_entropy())


def validate_mnemonic(phrase: str) -> bool:
    """
    Validate a mnemonic phrase against the English wordlist and checksum.

    Words may be separated by any whitespace. Malformed input is simply
    invalid; this never raises.
    """
    if not isinstance(phrase, str):
        return False
    words = [w for w in phrase.strip().split() if w]
    if not words:
        return False
    try:
        return bool(_english().check(" ".join(words)))
    except (ValueError, LookupError):
        return False


def mnemonic_to_seed(phrase: str, passphrase: str = "") -> bytes:
    """
    Stretch a mnemonic into the 64-byte seed (PBKDF2-HMAC-SHA512, 2048 rounds).

    Parameters
    ----------
    phrase : str
        Mnemonic text. Treated as opaque UTF-8; not validated here.
    passphrase : str
        Optional BIP-39 passphrase appended to the salt. The wallet never
        sets one.
    """
    if not isinstance(phrase, str):
        raise InvalidInput(f"mnemonic must be text, got {type(phrase).__name__}")
    salt = (SEED_SALT_PREFIX + passphrase).encode("utf-8")
    return hashlib.pbkdf2_hmac(
        "sha512",
        phrase.encode("utf-8"),
        salt,
        SEED_ITERATIONS,
        dklen=SEED_SIZE,
    )


__all__ = [
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    "random_entropy",
    "entropy_to_mnemonic",
    "SEED_SIZE",
    "WORD_COUNT",
]
