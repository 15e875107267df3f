"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bankqueue.configuration import BankQueueSettings


def test_defaults_apply_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BANKQUEUE_TIER_CAPACITY", raising=False)
    monkeypatch.delenv("BANKQUEUE_LOG_LEVEL", raising=False)

    settings = BankQueueSettings(_env_file=None)

    assert settings.tier_capacity == 64
    assert settings.log_level == "INFO"


def test_environment_overrides_are_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BANKQUEUE_TIER_CAPACITY", "8")
    monkeypatch.setenv("BANKQUEUE_LOG_LEVEL", "debug")

    settings = BankQueueSettings(_env_file=None)

    assert settings.tier_capacity == 8
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [("BANKQUEUE_TIER_CAPACITY", "0"), ("BANKQUEUE_LOG_LEVEL", "chatty")],
)
def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        BankQueueSettings(_env_file=None)
