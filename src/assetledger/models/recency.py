"""Most-recently-updated list models."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from assetledger.models._base import LedgerBaseModel, UtcDatetime


class AssetUpdatedAt(LedgerBaseModel):
    """One entry of the most-recently-updated list."""

    asset_id: str = Field(
        validation_alias=AliasChoices("assetID", "assetId", "asset_id"),
        serialization_alias="assetID",
    )
    updated_at: UtcDatetime


class AssetMruList(LedgerBaseModel):
    """Most-recent-first list of asset writes.

    Ordered by insertion, not by timestamp. The same asset may appear
    more than once.
    """

    mru_list: list[AssetUpdatedAt] = Field(default_factory=list)

    def asset_ids(self) -> list[str]:
        return [entry.asset_id for entry in self.mru_list]
