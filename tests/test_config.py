from __future__ import annotations

import pytest

from pyfirestate.config import StoreConfig
from pyfirestate.exceptions import FirestateConfigError


def test_defaults() -> None:
    config = StoreConfig()
    assert config.log_actions is False
    assert config.copy_on_read is True
    assert config.max_log_string == 512


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFIRESTATE_LOG_ACTIONS", "yes")
    monkeypatch.setenv("PYFIRESTATE_COPY_ON_READ", "off")
    monkeypatch.setenv("PYFIRESTATE_MAX_LOG_STRING", "64")

    config = StoreConfig.from_env()

    assert config.log_actions is True
    assert config.copy_on_read is False
    assert config.max_log_string == 64


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFIRESTATE_LOG_ACTIONS", "true")
    monkeypatch.setenv("PYFIRESTATE_MAX_LOG_STRING", "64")

    config = StoreConfig.from_env(log_actions=False, max_log_string=8)

    assert config.log_actions is False
    assert config.max_log_string == 8


def test_unknown_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFIRESTATE_COPY_ON_READ", "maybe")
    assert StoreConfig.from_env().copy_on_read is True


def test_invalid_int_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFIRESTATE_MAX_LOG_STRING", "lots")
    with pytest.raises(FirestateConfigError):
        StoreConfig.from_env()
