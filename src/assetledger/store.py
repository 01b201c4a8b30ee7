"""Asset store facade over the ledger.

This is the only component that reads and writes asset records.  Every
call is a fresh get/compute/put cycle; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import ValidationError

from assetledger._logfmt import preview_for_log
from assetledger.config import ContractConfig
from assetledger.exceptions import (
    CorruptRecordError,
    LedgerError,
    MissingIdentifierError,
    NotFoundError,
    StorageWriteFailedError,
)
from assetledger.ledger import Ledger
from assetledger.merge import merge_partial_state
from assetledger.models._base import ensure_utc
from assetledger.models.asset import AssetState
from assetledger.models.recency import AssetMruList
from assetledger.mru import RecencyIndex

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AssetStore:
    """Create/read/update/delete for asset records.

    Parameters
    ----------
    ledger : Ledger
        Backing key-value ledger.
    config : ContractConfig
        Contract configuration (well-known keys, MRU capacity).
    clock : callable
        Source of ``updated_at`` stamps. Defaults to UTC now.
    recency : RecencyIndex or None
        Index maintained on every write. Built from *ledger* and
        *config* when omitted.
    """

    def __init__(
        self,
        ledger: Ledger,
        config: ContractConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
        recency: RecencyIndex | None = None,
    ) -> None:
        self._ledger = ledger
        self._config = config or ContractConfig()
        self._clock = clock
        self._recency = recency or RecencyIndex(ledger, self._config)

    @property
    def recency(self) -> RecencyIndex:
        return self._recency

    def _reserved(self, asset_id: str) -> bool:
        return asset_id in (self._config.mru_key, self._config.contract_state_key)

    def create_or_update(self, patch: AssetState) -> AssetState:
        """Write *patch* as a new record, or merge it into the existing one.

        Returns the record that was written.

        Raises
        ------
        StorageWriteFailedError
            The asset put, or the MRU list update after it, failed.
            ``asset_written`` tells the two apart.
        CorruptRecordError
            The existing record cannot be parsed.
        """
        asset_id = patch.asset_id
        if not asset_id:
            raise MissingIdentifierError("createOrUpdate requires a patch with an assetID")
        if self._reserved(asset_id):
            raise StorageWriteFailedError(f"assetID {asset_id!r} collides with a reserved ledger key", key=asset_id)

        try:
            existing_raw = self._ledger.get(asset_id)
        except LedgerError as exc:
            raise StorageWriteFailedError(f"Unable to get current state of {asset_id!r}: {exc}", key=asset_id) from exc

        if not existing_raw:
            _logger.info("Creating asset %r", asset_id)
            record = patch
        else:
            try:
                existing = AssetState.from_ledger_bytes(existing_raw)
            except ValidationError as exc:
                raise CorruptRecordError(f"Unable to unmarshal stored state of {asset_id!r}", key=asset_id) from exc
            _logger.info("Updating asset %r", asset_id)
            record = merge_partial_state(existing, patch)

        updated_at = ensure_utc(self._clock())
        record = record.model_copy(update={"asset_id": asset_id, "updated_at": updated_at})
        payload = record.to_ledger_bytes()
        if self._config.log_payloads:
            _logger.debug("New state of %r: %s", asset_id, preview_for_log(payload))

        try:
            self._ledger.put(asset_id, payload)
        except LedgerError as exc:
            raise StorageWriteFailedError(f"PUT ledger state failed for {asset_id!r}: {exc}", key=asset_id) from exc

        try:
            self._recency.record(asset_id, updated_at)
        except StorageWriteFailedError as exc:
            _logger.warning("Asset %r written but MRU list update failed: %s", asset_id, exc)
            raise StorageWriteFailedError(
                f"Asset {asset_id!r} was written but the MRU list was not updated: {exc}",
                key=exc.key,
                asset_written=True,
            ) from exc
        return record

    def read(self, asset_id: str) -> bytes:
        """Return the stored record for *asset_id* exactly as stored.

        Raises :class:`NotFoundError` when nothing is stored, when
        *asset_id* is a reserved ledger key, or when the ledger itself
        fails; in the last case the :class:`LedgerError` is chained as
        ``__cause__``.  Raises :class:`CorruptRecordError` when the
        stored value does not parse.
        """
        if self._reserved(asset_id):
            raise NotFoundError(f"Asset {asset_id!r} does not exist", key=asset_id)
        try:
            raw = self._ledger.get(asset_id)
        except LedgerError as exc:
            raise NotFoundError(f"Unable to get asset state for {asset_id!r} from ledger: {exc}", key=asset_id) from exc
        if not raw:
            raise NotFoundError(f"Asset {asset_id!r} does not exist", key=asset_id)

        try:
            AssetState.from_ledger_bytes(raw)
        except ValidationError as exc:
            raise CorruptRecordError(
                f"Unable to unmarshal state data for {asset_id!r} obtained from ledger",
                key=asset_id,
            ) from exc
        return raw

    def get(self, asset_id: str) -> AssetState:
        """Typed variant of :meth:`read`."""
        return AssetState.from_ledger_bytes(self.read(asset_id))

    def delete(self, asset_id: str) -> None:
        """Remove the record for *asset_id*. The MRU list is left untouched."""
        if self._reserved(asset_id):
            raise StorageWriteFailedError(f"assetID {asset_id!r} collides with a reserved ledger key", key=asset_id)
        try:
            self._ledger.delete(asset_id)
        except LedgerError as exc:
            raise StorageWriteFailedError(f"DELSTATE failed for {asset_id!r}: {exc}", key=asset_id) from exc
        _logger.info("Deleted asset %r", asset_id)

    def read_mru_list(self) -> bytes:
        """Return the stored MRU list exactly as stored.

        A ledger fault is reported as :class:`NotFoundError` with the
        :class:`LedgerError` chained as ``__cause__``.
        """
        key = self._config.mru_key
        try:
            raw = self._ledger.get(key)
        except LedgerError as exc:
            raise NotFoundError(f"Unable to get MRU list from ledger: {exc}", key=key) from exc
        if not raw:
            raise NotFoundError("MRU list has not been written yet", key=key)

        try:
            AssetMruList.from_ledger_bytes(raw)
        except ValidationError as exc:
            raise CorruptRecordError("Unable to unmarshal MRU list state data obtained from ledger", key=key) from exc
        return raw
