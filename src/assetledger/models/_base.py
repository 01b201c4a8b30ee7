"""Base model for ledger-stored documents.

Every stored document inherits from :class:`LedgerBaseModel` which
provides:

* ``alias_generator=to_camel`` so snake_case attributes serialize to
  the camelCase keys used on the wire.
* ``None`` as the single "absent" marker: :meth:`to_ledger_bytes`
  drops every ``None`` field, so an omitted field never turns into a
  ``null`` placeholder in storage.
* :meth:`from_ledger_bytes` for the reverse direction.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime (naive input is assumed UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated type that normalizes datetimes to timezone-aware UTC."""


class LedgerBaseModel(BaseModel):
    """Base for documents read from and written to the ledger."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )

    def to_ledger_bytes(self) -> bytes:
        """Serialize to the compact JSON stored in the ledger."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    @classmethod
    def from_ledger_bytes(cls, data: str | bytes) -> Self:
        """Parse a stored or caller-supplied JSON document.

        Raises :class:`pydantic.ValidationError` when *data* is not valid
        JSON or does not match the model.
        """
        return cls.model_validate_json(data)
