from __future__ import annotations

import pytest

from glbridge.config import reset_config

_ENV_VARS = ("GLBRIDGE_LOG_LEVEL", "GLBRIDGE_COLOR_POLICY", "GLBRIDGE_TOLERANCE")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
