from __future__ import annotations

import pytest

from assetledger.config import ContractConfig
from assetledger.exceptions import ConfigError


def test_defaults() -> None:
    config = ContractConfig()

    assert config.version == "1.0"
    assert config.nickname == "SIMPLE"
    assert config.mru_key == "_MruListKey"
    assert config.contract_state_key == "ContractStateKey"
    assert config.mru_capacity == 10
    assert config.log_payloads is False


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSETLEDGER_VERSION", "2.1")
    monkeypatch.setenv("ASSETLEDGER_MRU_CAPACITY", "25")
    monkeypatch.setenv("ASSETLEDGER_MRU_KEY", "recent")
    monkeypatch.setenv("ASSETLEDGER_LOG_PAYLOADS", "yes")

    config = ContractConfig.from_env()

    assert config.version == "2.1"
    assert config.mru_capacity == 25
    assert config.mru_key == "recent"
    assert config.log_payloads is True


def test_overrides_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSETLEDGER_MRU_CAPACITY", "25")
    monkeypatch.setenv("ASSETLEDGER_NICKNAME", "FROM_ENV")

    config = ContractConfig.from_env(mru_capacity=5, nickname="EXPLICIT")

    assert config.mru_capacity == 5
    assert config.nickname == "EXPLICIT"


def test_non_integer_capacity_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSETLEDGER_MRU_CAPACITY", "ten")

    with pytest.raises(ConfigError):
        ContractConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mru_capacity": 0},
        {"version": " "},
        {"mru_key": ""},
        {"mru_key": "same", "contract_state_key": "same"},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        ContractConfig(**kwargs)  # type: ignore[arg-type]
