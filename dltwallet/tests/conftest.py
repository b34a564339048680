import logging

import pytest

from dltwallet import log as wlog
from dltwallet.keygen import derive_keys
from dltwallet.tests.vectors import ABOUT_PHRASE, ART_PHRASE


@pytest.fixture(autouse=True)
def _reset_wallet_logging():
    token = wlog._LOG_CONTEXT.set({})
    yield
    wlog._LOG_CONTEXT.reset(token)
    root = logging.getLogger("dltwallet")
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DLTWALLET_LOG_LEVEL", "DLTWALLET_LOG_FORMAT", "DLTWALLET_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def art_keys():
    return derive_keys(ART_PHRASE)


@pytest.fixture(scope="session")
def about_keys():
    return derive_keys(ABOUT_PHRASE)
