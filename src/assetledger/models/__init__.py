"""Data models for ledger-stored documents."""

from assetledger.models._base import LedgerBaseModel, UtcDatetime, ensure_utc
from assetledger.models.asset import AssetState, Geolocation
from assetledger.models.contract import ContractState, InitEvent
from assetledger.models.recency import AssetMruList, AssetUpdatedAt

__all__ = [
    "AssetMruList",
    "AssetState",
    "AssetUpdatedAt",
    "ContractState",
    "Geolocation",
    "InitEvent",
    "LedgerBaseModel",
    "UtcDatetime",
    "ensure_utc",
]
