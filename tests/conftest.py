from __future__ import annotations

import pytest

CONFIG_VARIABLES = ("LOG_DIR", "LOG_LEVEL", "LOG_FILE_ENCODING", "DECODE_ERRORS")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Unset config variables and restore them after the test, including ones set by dotenv."""

    for name in CONFIG_VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
