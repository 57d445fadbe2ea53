"""Shared pytest fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any real .env and BILL_SPLIT_* variables."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "BILL_SPLIT_ROUNDING_UNIT",
        "BILL_SPLIT_DECIMAL_PLACES",
        "BILL_SPLIT_CURRENCY_CODE",
        "BILL_SPLIT_DEFAULT_PARTICIPANTS",
        "BILL_SPLIT_LANGUAGE",
    ):
        monkeypatch.delenv(var, raising=False)
