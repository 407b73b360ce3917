from __future__ import annotations

import os

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("TERMQR_"):
            monkeypatch.delenv(key)
    yield
    # sinks added by the CLI point at capsys streams that are closed after each test
    logger.remove()
