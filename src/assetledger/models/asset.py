"""Asset state model."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from assetledger.models._base import LedgerBaseModel, UtcDatetime


class Geolocation(LedgerBaseModel):
    """A geographical coordinate.

    Both coordinates are independently optional.
    """

    latitude: float | None = Field(default=None, strict=True)
    longitude: float | None = Field(default=None, strict=True)


class AssetState(LedgerBaseModel):
    """Current (or partial) state of one managed asset.

    The same shape is used for stored records and for incoming patches.
    Every field is optional here; ``None`` means the field is absent.
    Stored records always carry ``asset_id`` and ``updated_at``.

    Parameters
    ----------
    asset_id : str or None
        Primary key. Serialized as ``assetID``; ``assetId`` and
        ``asset_id`` are also accepted on input.
    location : Geolocation or None
        Current asset location.
    temperature : float or None
        Asset temperature in Celsius.
    carrier : str or None
        Transport entity currently in possession of the asset.
    updated_at : datetime or None
        Time of the last write, stamped by the store.
    """

    asset_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("assetID", "assetId", "asset_id"),
        serialization_alias="assetID",
        description="The ID of a managed asset. The resource focal point for a smart contract.",
    )
    location: Geolocation | None = Field(default=None, description="A geographical coordinate")
    temperature: float | None = Field(default=None, strict=True, description="Temperature of the asset in CELSIUS.")
    carrier: str | None = Field(default=None, description="transport entity currently in possession of asset")
    updated_at: UtcDatetime | None = Field(default=None, description="When the asset state was last written.")
