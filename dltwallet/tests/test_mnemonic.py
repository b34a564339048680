import pytest

from dltwallet import mnemonic as M
from dltwallet.errors import EntropyError, InvalidInput, MnemonicEncodingError
from dltwallet.tests.vectors import ABOUT_PHRASE, ABOUT_SEED, ART_PHRASE, ART_TREZOR_SEED


def test_bip39_vector_with_passphrase():
    assert M.mnemonic_to_seed(ART_PHRASE, "TREZOR").hex() == ART_TREZOR_SEED


def test_bip39_vector_empty_passphrase():
    seed = M.mnemonic_to_seed(ABOUT_PHRASE)
    assert len(seed) == M.SEED_SIZE
    assert seed.hex() == ABOUT_SEED


def test_seed_uses_phrase_verbatim():
    # whitespace is part of the password; no normalization happens
    assert M.mnemonic_to_seed(ABOUT_PHRASE + " ") != M.mnemonic_to_seed(ABOUT_PHRASE)
    assert M.mnemonic_to_seed(ABOUT_PHRASE.replace(" ", "  ", 1)) != M.mnemonic_to_seed(ABOUT_PHRASE)


def test_generate_is_24_valid_words():
    phrase = M.generate_mnemonic()
    assert len(phrase.split(" ")) == M.WORD_COUNT
    assert M.validate_mnemonic(phrase)


def test_generate_is_random():
    assert M.generate_mnemonic() != M.generate_mnemonic()


def test_zero_entropy_encodes_to_vector():
    assert M.entropy_to_mnemonic(bytes(32)) == ART_PHRASE


def test_bad_entropy_length():
    with pytest.raises(MnemonicEncodingError):
        M.entropy_to_mnemonic(b"\x00" * 7)


def test_entropy_failure_is_reported(monkeypatch):
    def boom(n):
        raise OSError("no entropy")

    monkeypatch.setattr(M.secrets, "token_bytes", boom)
    with pytest.raises(EntropyError):
        M.generate_mnemonic()


@pytest.mark.parametrize("phrase", [ART_PHRASE, ABOUT_PHRASE, "  " + ABOUT_PHRASE.replace(" ", "\n") + "\t"])
def test_valid_phrases(phrase):
    assert M.validate_mnemonic(phrase)


@pytest.mark.parametrize(
    "phrase",
    [
        "",
        "   ",
        " ".join(["abandon"] * 24),  # checksum word wrong
        " ".join(["abandon"] * 22 + ["art"]),  # 23 words
        " ".join(["abandon"] * 23 + ["notaword"]),
        ART_PHRASE.upper(),
        None,
        12345,
    ],
)
def test_invalid_phrases(phrase):
    assert M.validate_mnemonic(phrase) is False


def test_single_word_mutation_is_caught():
    words = ART_PHRASE.split()
    caught = 0
    for i in range(len(words)):
        mutated = words[:i] + ["zoo"] + words[i + 1 :]
        caught += not M.validate_mnemonic(" ".join(mutated))
    # each substitution slips past the 8-bit checksum with p ~ 1/256
    assert caught >= len(words) - 2


@pytest.mark.parametrize("phrase", [None, b"abandon about", 7])
def test_seed_requires_text(phrase):
    with pytest.raises(InvalidInput):
        M.mnemonic_to_seed(phrase)
