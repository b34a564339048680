import pytest

from dltwallet import api
from dltwallet import mnemonic as M
from dltwallet.algs import dilithium3 as D3
from dltwallet.result import Failure, KeysOk, MnemonicOk, SignatureOk
from dltwallet.sign import verify
from dltwallet.tests.vectors import ART_PHRASE


def test_generate_mnemonic_ok():
    res = api.generate_mnemonic()
    assert isinstance(res, MnemonicOk) and res.ok
    assert api.validate_mnemonic(res.mnemonic)
    assert res.to_dict() == {"ok": True, "mnemonic": res.mnemonic}
    # repr never shows the words
    assert repr(res) == "MnemonicOk(words=24)"


def test_generate_mnemonic_entropy_failure(monkeypatch):
    def boom(n):
        raise OSError("getrandom failed")

    monkeypatch.setattr(M.secrets, "token_bytes", boom)
    res = api.generate_mnemonic()
    assert isinstance(res, Failure)
    assert res.ok is False
    assert res.kind == "EntropyError"
    assert "getrandom failed" in res.error


def test_validate_mnemonic_never_raises():
    assert api.validate_mnemonic(ART_PHRASE)
    assert not api.validate_mnemonic("hello")
    assert not api.validate_mnemonic(None)  # type: ignore[arg-type]


def test_derive_keys_ok(art_keys):
    res = api.derive_keys(ART_PHRASE)
    assert isinstance(res, KeysOk) and res.ok
    assert res.public_key == art_keys.public_key
    assert res.private_key == art_keys.private_key
    assert res.address == art_keys.address

    d = res.to_dict()
    assert d["ok"] is True
    assert d["publicKey"] == art_keys.public_key.hex()
    assert d["privateKey"] == art_keys.private_key.hex()
    assert d["address"] == art_keys.address
    assert "<hidden>" in repr(res)


def test_derive_keys_backend_failure(monkeypatch):
    class Broken:
        def keygen(self):
            raise RuntimeError("boom")

    monkeypatch.setattr(D3, "_instance", lambda read=None: Broken())
    res = api.derive_keys(ART_PHRASE)
    assert isinstance(res, Failure)
    assert res.kind == "KeyGenerationError"
    assert res.to_dict()["ok"] is False


def test_sign_ok(art_keys):
    res = api.sign(art_keys.private_key, "hello world")
    assert isinstance(res, SignatureOk) and res.ok
    assert res.signature_hex == res.signature.hex()
    assert verify(art_keys.public_key, "hello world", res.signature)
    assert res.to_dict() == {"ok": True, "signature": res.signature_hex, "signatureHex": res.signature_hex}


def test_sign_bad_key():
    res = api.sign(b"\x01" * 10, "hello world")
    assert isinstance(res, Failure)
    assert res.kind == "InvalidPrivateKeyEncoding"
    assert res.to_dict() == {"ok": False, "kind": "InvalidPrivateKeyEncoding", "error": res.error}


def test_failure_is_logged(caplog):
    with caplog.at_level("WARNING", logger="dltwallet"):
        api.sign(b"", "x")
    rec = [r for r in caplog.records if r.name == "dltwallet.api"]
    assert rec and rec[0].kind == "InvalidPrivateKeyEncoding"


def test_address_helpers(art_keys):
    out = api.checksum_address(art_keys.address)
    assert out.startswith("dlt1") and len(out) == 48
    assert api.public_key_hex(art_keys.public_key) == art_keys.public_key.hex()


def test_failure_ok_not_settable():
    with pytest.raises(TypeError):
        Failure(kind="X", error="y", ok=True)  # type: ignore[call-arg]


def test_non_text_mnemonic_is_a_failure():
    res = api.derive_keys(None)  # type: ignore[arg-type]
    assert isinstance(res, Failure)
    assert res.kind == "InvalidInput"
    assert "NoneType" in res.error


def test_non_text_message_is_a_failure(art_keys):
    res = api.sign(art_keys.private_key, 42)  # type: ignore[arg-type]
    assert isinstance(res, Failure)
    assert res.kind == "InvalidInput"


def test_non_bytes_private_key_is_a_failure():
    res = api.sign("00" * 4000, "hello world")  # type: ignore[arg-type]
    assert isinstance(res, Failure)
    assert res.kind == "InvalidPrivateKeyEncoding"
