"""Runtime configuration for wallet tools.

Settings come from environment variables so the CLI and any embedding host
read the same knobs. Only ambient behaviour (logging) is configurable; the
derivation constants are fixed in code because changing them changes every
wallet.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "DLTWALLET_"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class WalletConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    # None = auto: text on a TTY, JSON otherwise
    log_format: Optional[str] = None
    log_file: Optional[Path] = None

    @property
    def log_json(self) -> Optional[bool]:
        if self.log_format is None:
            return None
        return self.log_format == "json"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(ENV_PREFIX + name)
    return v if v not in (None, "") else default


def load_config() -> WalletConfig:
    """
    Build config from the environment:

    DLTWALLET_LOG_LEVEL    DEBUG | INFO | WARNING | ERROR   (default WARNING)
    DLTWALLET_LOG_FORMAT   json | text                      (default: auto)
    DLTWALLET_LOG_FILE     optional path; JSON lines are appended there
    """
    level = (_env("LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    fmt = _env("LOG_FORMAT")
    if fmt is not None:
        fmt = fmt.strip().lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"{ENV_PREFIX}LOG_FORMAT must be one of {_LOG_FORMATS}, got {fmt!r}")
    log_file = _env("LOG_FILE")
    return WalletConfig(
        log_level=level,
        log_format=fmt,
        log_file=Path(log_file).expanduser() if log_file else None,
    )


__all__ = ["WalletConfig", "load_config", "ENV_PREFIX", "DEFAULT_LOG_LEVEL"]
