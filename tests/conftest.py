"""Pytest configuration for chp tests."""

import pytest

CHP_ENV_VARS = ("CHP_EXE_SUFFIX", "CHP_GIT")


@pytest.fixture(autouse=True)
def clean_chp_env(monkeypatch):
    """Run every test without the developer's CHP_* overrides."""
    for name in CHP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
