"""
dltwallet — command-line front end for the wallet core.

Commands:
  mnemonic new                      print a fresh 24-word phrase
  mnemonic check WORDS...           validate a phrase (exit 1 if invalid)
  derive [--mnemonic-file PATH]     derive keys + address (stdin if no file)
  sign --key-file PATH (--message TEXT | --message-file PATH)
  verify --pubkey-file PATH --signature-hex HEX (--message TEXT | --message-file PATH)
  address checksum RAW              raw hex -> "dlt1…" form
  address parse TEXT                raw or "dlt1…" -> raw hex (checks checksum)

Global options:
  --json                            machine-readable output

Key files hold lowercase hex on a single line, as written by
`derive --key-out/--pubkey-out`.

Examples:
  dltwallet mnemonic new > phrase.txt
  dltwallet derive --mnemonic-file phrase.txt --key-out sk.hex --pubkey-out pk.hex --checksum
  dltwallet sign --key-file sk.hex --message "hello"
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import typer

from dltwallet import address as _address
from dltwallet import api
from dltwallet import log as wlog
from dltwallet.config import load_config
from dltwallet.errors import AddressError
from dltwallet.result import Failure
from dltwallet.sign import verify as _verify
from dltwallet.utils.hexutil import from_hex

app = typer.Typer(
    name="dltwallet",
    help="Dilithium3 wallet: mnemonics, deterministic keys, addresses and signatures.",
    no_args_is_help=True,
    add_completion=False,
)
mnemonic_app = typer.Typer(help="Generate and validate BIP-39 mnemonics.", no_args_is_help=True)
address_app = typer.Typer(help="Convert and validate wallet addresses.", no_args_is_help=True)
app.add_typer(mnemonic_app, name="mnemonic")
app.add_typer(address_app, name="address")

log = wlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _json_mode(ctx: typer.Context) -> bool:
    root = ctx.find_root()
    return bool(root.obj and root.obj.get("json"))


def _emit(ctx: typer.Context, payload: Dict[str, Any], text: str) -> None:
    if _json_mode(ctx):
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(text)


def _fail(ctx: typer.Context, kind: str, message: str) -> NoReturn:
    log.debug("command failed", extra={"kind": kind})
    if _json_mode(ctx):
        typer.echo(json.dumps(Failure(kind=kind, error=message).to_dict(), indent=2))
    else:
        typer.echo(f"error: {kind}: {message}", err=True)
    raise typer.Exit(code=1)


def _secure_path(path: Path) -> None:
    try:
        os.chmod(path, 0o600)
    except OSError:
        pass


def _write_hex(path: Path, data: bytes, *, secret: bool) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data.hex() + "\n", encoding="utf-8")
    if secret:
        _secure_path(path)


def _read_hex_file(ctx: typer.Context, path: Path, what: str) -> bytes:
    try:
        return from_hex(path.read_text(encoding="utf-8").strip())
    except OSError as e:
        _fail(ctx, "IOError", f"cannot read {what} file {path}: {e.strerror or e}")
    except ValueError as e:
        _fail(ctx, "InvalidHex", f"{what} file {path}: {e}")


def _message_arg(ctx: typer.Context, message: Optional[str], message_file: Optional[Path]) -> str | bytes:
    if (message is None) == (message_file is None):
        raise typer.BadParameter("pass exactly one of --message or --message-file")
    if message is not None:
        return message
    try:
        return message_file.read_bytes()
    except OSError as e:
        _fail(ctx, "IOError", f"cannot read message file {message_file}: {e.strerror or e}")


def _read_phrase(ctx: typer.Context, mnemonic_file: Optional[Path]) -> str:
    # One phrase per input; the surrounding line ending is not part of it.
    if mnemonic_file is not None:
        try:
            text = mnemonic_file.read_text(encoding="utf-8")
        except OSError as e:
            _fail(ctx, "IOError", f"cannot read mnemonic file {mnemonic_file}: {e.strerror or e}")
    else:
        text = typer.get_text_stream("stdin").read()
    return text.strip()


# ---------------------------------------------------------------------------
# Typer wiring
# ---------------------------------------------------------------------------


@app.callback()
def _configure(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
) -> None:
    try:
        cfg = load_config()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    wlog.configure_from_config(cfg, stream=sys.stderr)
    wlog.bind(component="cli", command=ctx.invoked_subcommand)
    ctx.obj = {"json": json_output}


@mnemonic_app.command("new")
def mnemonic_new(ctx: typer.Context) -> None:
    """Generate a new 24-word mnemonic from OS entropy."""
    res = api.generate_mnemonic()
    if not res.ok:
        _fail(ctx, res.kind, res.error)
    _emit(ctx, res.to_dict(), res.mnemonic)


@mnemonic_app.command("check")
def mnemonic_check(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Mnemonic words (quote the phrase or pass words separately)"),
) -> None:
    """Check a phrase against the English wordlist and its checksum."""
    phrase = " ".join(words)
    valid = api.validate_mnemonic(phrase)
    _emit(ctx, {"ok": True, "valid": valid}, "valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(code=1)


@app.command()
def derive(
    ctx: typer.Context,
    mnemonic_file: Optional[Path] = typer.Option(
        None, "--mnemonic-file", help="File holding the phrase (default: read stdin)"
    ),
    checksum: bool = typer.Option(False, "--checksum", help="Also print the dlt1… checksummed address"),
    key_out: Optional[Path] = typer.Option(None, "--key-out", help="Write the private key (hex) here, mode 0600"),
    pubkey_out: Optional[Path] = typer.Option(None, "--pubkey-out", help="Write the public key (hex) here"),
) -> None:
    """Derive the Dilithium3 keypair and address for a mnemonic."""
    phrase = _read_phrase(ctx, mnemonic_file)
    if not api.validate_mnemonic(phrase):
        _fail(ctx, "InvalidMnemonic", "mnemonic failed wordlist or checksum validation")

    res = api.derive_keys(phrase)
    if not res.ok:
        _fail(ctx, res.kind, res.error)

    if key_out is not None:
        _write_hex(key_out, res.private_key, secret=True)
    if pubkey_out is not None:
        _write_hex(pubkey_out, res.public_key, secret=False)

    payload = res.to_dict()
    lines = [f"Address:    {res.address}"]
    if checksum:
        payload["checksumAddress"] = api.checksum_address(res.address)
        lines.append(f"Checksum:   {payload['checksumAddress']}")
    lines.append(f"Public key: {api.public_key_hex(res.public_key)}")
    if key_out is not None:
        lines.append(f"Private key written to {key_out}")
    _emit(ctx, payload, "\n".join(lines))


@app.command()
def sign(
    ctx: typer.Context,
    key_file: Path = typer.Option(..., "--key-file", help="Private key file (hex)"),
    message: Optional[str] = typer.Option(None, "--message", help="Message text (signed as UTF-8)"),
    message_file: Optional[Path] = typer.Option(None, "--message-file", help="Sign the raw bytes of this file"),
) -> None:
    """Sign a message with a derived private key."""
    msg = _message_arg(ctx, message, message_file)
    sk = _read_hex_file(ctx, key_file, "key")
    res = api.sign(sk, msg)
    if not res.ok:
        _fail(ctx, res.kind, res.error)
    _emit(ctx, res.to_dict(), res.signature_hex)


@app.command()
def verify(
    ctx: typer.Context,
    pubkey_file: Path = typer.Option(..., "--pubkey-file", help="Public key file (hex)"),
    signature_hex: str = typer.Option(..., "--signature-hex", help="Signature as hex"),
    message: Optional[str] = typer.Option(None, "--message", help="Message text (UTF-8)"),
    message_file: Optional[Path] = typer.Option(None, "--message-file", help="Raw message bytes"),
) -> None:
    """Verify a signature (exit 1 if it does not verify)."""
    msg = _message_arg(ctx, message, message_file)
    pk = _read_hex_file(ctx, pubkey_file, "public key")
    try:
        sig = from_hex(signature_hex)
    except ValueError as e:
        _fail(ctx, "InvalidHex", f"signature: {e}")
    valid = _verify(pk, msg, sig)
    _emit(ctx, {"ok": True, "valid": valid}, "valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(code=1)


@address_app.command("checksum")
def address_checksum(ctx: typer.Context, raw: str = typer.Argument(..., help="40-char raw hex address")) -> None:
    """Render a raw address in the dlt1… checksummed form."""
    if len(raw.strip()) != _address.RAW_HEX_LEN:
        _fail(ctx, AddressError.code, f"expected a raw {_address.RAW_HEX_LEN}-char hex address")
    try:
        raw_hex = _address.parse_address(raw)
    except AddressError as e:
        _fail(ctx, e.code, e.message)
    out = api.checksum_address(raw_hex)
    _emit(ctx, {"ok": True, "address": raw_hex, "checksumAddress": out}, out)


@address_app.command("parse")
def address_parse(ctx: typer.Context, text: str = typer.Argument(..., help="Raw or dlt1… address")) -> None:
    """Validate an address in either form and print the raw hex."""
    try:
        raw_hex = _address.parse_address(text)
    except AddressError as e:
        _fail(ctx, e.code, e.message)
    out = _address.checksum_address(raw_hex)
    _emit(ctx, {"ok": True, "address": raw_hex, "checksumAddress": out}, raw_hex)


def main() -> None:
    with wlog.trace_scope():
        app()


if __name__ == "__main__":  # pragma: no cover
    main()
