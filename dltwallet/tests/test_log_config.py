import io
import json
from pathlib import Path

import pytest

from dltwallet import log as wlog
from dltwallet.config import WalletConfig, load_config
from dltwallet.keygen import derive_keys
from dltwallet.tests.vectors import ABOUT_PHRASE


def test_defaults():
    cfg = load_config()
    assert cfg == WalletConfig()
    assert cfg.log_level == "WARNING"
    assert cfg.log_json is None
    assert cfg.log_file is None


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("DLTWALLET_LOG_LEVEL", "debug")
    monkeypatch.setenv("DLTWALLET_LOG_FORMAT", "JSON")
    monkeypatch.setenv("DLTWALLET_LOG_FILE", str(tmp_path / "w.log"))
    cfg = load_config()
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json" and cfg.log_json is True
    assert cfg.log_file == tmp_path / "w.log"


def test_bad_format(monkeypatch):
    monkeypatch.setenv("DLTWALLET_LOG_FORMAT", "yaml")
    with pytest.raises(ValueError):
        load_config()


def test_json_lines_carry_context_and_extras():
    buf = io.StringIO()
    wlog.configure(json=True, level="INFO", stream=buf)
    logger = wlog.get_logger("dltwallet.test")
    with wlog.trace_scope("t-1"):
        wlog.bind(component="test")
        logger.info("hello", extra={"address": "ab" * 20, "blob": b"\x01\x02"})
    rec = json.loads(buf.getvalue().strip())
    assert rec["msg"] == "hello"
    assert rec["level"] == "INFO"
    assert rec["trace_id"] == "t-1"
    assert rec["component"] == "test"
    assert rec["address"] == "ab" * 20
    assert rec["blob"] == "0102"


def test_trace_scope_restores_context():
    wlog.bind(component="outer")
    before = wlog.context()
    with wlog.trace_scope():
        wlog.bind(component="inner")
        assert wlog.context()["component"] == "inner"
        assert len(wlog.context()["trace_id"]) == 12
    assert wlog.context() == before
    wlog.unbind("component")
    assert "component" not in wlog.context()


def test_text_format_and_level_filter():
    buf = io.StringIO()
    wlog.configure(json=False, level="WARNING", stream=buf)
    logger = wlog.get_logger("dltwallet.test")
    logger.info("dropped")
    logger.warning("kept", extra={"kind": "X"})
    out = buf.getvalue()
    assert "dropped" not in out
    line = out.strip()
    assert "| WARNING | dltwallet.test |" in line
    assert "kind=X" in line and line.endswith("| kept")


def test_file_handler_writes_json(tmp_path: Path):
    path = tmp_path / "logs" / "wallet.log"
    cfg = WalletConfig(log_level="INFO", log_format="text", log_file=path)
    wlog.configure_from_config(cfg, stream=io.StringIO())
    wlog.get_logger("dltwallet.keygen").info("wallet keys derived", extra={"address": "cd" * 20})
    for h in wlog.get_logger().handlers:
        h.flush()
    rec = json.loads(path.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert rec["address"] == "cd" * 20


def test_derivation_logs_address_not_secrets(caplog):
    with caplog.at_level("DEBUG", logger="dltwallet"):
        keys = derive_keys(ABOUT_PHRASE)
    text = " ".join(f"{r.getMessage()} {r.__dict__}" for r in caplog.records)
    assert keys.address in text
    assert "abandon" not in text
    assert keys.private_key.hex()[:32] not in text
