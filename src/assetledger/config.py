"""Contract configuration for assetledger."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from assetledger._constants import (
    CONTRACT_NICKNAME,
    CONTRACT_STATE_KEY,
    CONTRACT_VERSION,
    MRU_CAPACITY,
    MRU_KEY,
)
from assetledger.exceptions import ConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ContractConfig:
    """Immutable contract configuration.

    Loaded once at startup and handed to every component that needs it.

    Parameters
    ----------
    version : str
        Compiled-in contract version. ``init`` must be called with the
        same value.
    nickname : str
        Short contract name reported in samples.
    mru_key : str
        Ledger key holding the most-recently-updated list.
    contract_state_key : str
        Ledger key holding the contract version record.
    mru_capacity : int
        Maximum number of entries kept in the most-recently-updated list.
    log_payloads : bool
        Include (truncated) payload contents in debug logs.
    """

    version: str = CONTRACT_VERSION
    nickname: str = CONTRACT_NICKNAME
    mru_key: str = MRU_KEY
    contract_state_key: str = CONTRACT_STATE_KEY
    mru_capacity: int = MRU_CAPACITY
    log_payloads: bool = False

    def __post_init__(self) -> None:
        if self.mru_capacity < 1:
            raise ConfigError(f"mru_capacity must be at least 1, got {self.mru_capacity}")
        for name in ("version", "mru_key", "contract_state_key"):
            if not str(getattr(self, name)).strip():
                raise ConfigError(f"{name} must be non-empty")
        if self.mru_key == self.contract_state_key:
            raise ConfigError("mru_key and contract_state_key must differ")

    @classmethod
    def from_env(cls, **overrides: Any) -> ContractConfig:
        """Create configuration from ``ASSETLEDGER_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ASSETLEDGER_VERSION": "version",
            "ASSETLEDGER_NICKNAME": "nickname",
            "ASSETLEDGER_MRU_KEY": "mru_key",
            "ASSETLEDGER_CONTRACT_STATE_KEY": "contract_state_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        capacity_env = env.get("ASSETLEDGER_MRU_CAPACITY")
        if capacity_env is not None and "mru_capacity" not in overrides:
            try:
                config_kwargs["mru_capacity"] = int(capacity_env)
            except ValueError as exc:
                raise ConfigError(f"ASSETLEDGER_MRU_CAPACITY is not an integer: {capacity_env!r}") from exc

        if "log_payloads" not in overrides:
            config_kwargs["log_payloads"] = _env_bool(env.get("ASSETLEDGER_LOG_PAYLOADS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
