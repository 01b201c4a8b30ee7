"""Bounded most-recently-updated index.

Every create/update prepends an ``(assetID, updatedAt)`` entry to a list
stored under a single well-known key and truncates it to the configured
capacity.  The list is an activity log: entries are never deduplicated
and are not removed when an asset is deleted.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import ValidationError

from assetledger._logfmt import preview_for_log
from assetledger.config import ContractConfig
from assetledger.exceptions import LedgerError, StorageWriteFailedError
from assetledger.ledger import Ledger
from assetledger.models.recency import AssetMruList, AssetUpdatedAt

_logger = logging.getLogger(__name__)


class RecencyIndex:
    """Read-modify-write access to the most-recently-updated list."""

    def __init__(self, ledger: Ledger, config: ContractConfig) -> None:
        self._ledger = ledger
        self._config = config

    @property
    def key(self) -> str:
        return self._config.mru_key

    @property
    def capacity(self) -> int:
        return self._config.mru_capacity

    def load(self) -> AssetMruList:
        """Return the stored list, or an empty one if nothing was written yet.

        A stored value that fails to parse is reported as
        :class:`StorageWriteFailedError` because it blocks the next write.
        """
        try:
            raw = self._ledger.get(self.key)
        except LedgerError as exc:
            raise StorageWriteFailedError(f"Unable to get MRU list from ledger: {exc}", key=self.key) from exc

        if not raw:
            _logger.debug("No MRU list under %r yet, starting empty", self.key)
            return AssetMruList()

        try:
            return AssetMruList.from_ledger_bytes(raw)
        except ValidationError as exc:
            raise StorageWriteFailedError("Unable to unmarshal JSON data for MRU list", key=self.key) from exc

    def record(self, asset_id: str, timestamp: datetime) -> AssetMruList:
        """Prepend an entry for *asset_id* and write the truncated list back."""
        current = self.load()
        entry = AssetUpdatedAt(asset_id=asset_id, updated_at=timestamp)
        updated = AssetMruList(mru_list=[entry, *current.mru_list][: self.capacity])
        _logger.debug(
            "MRU list length %d -> %d after recording %r",
            len(current.mru_list),
            len(updated.mru_list),
            asset_id,
        )

        payload = updated.to_ledger_bytes()
        if self._config.log_payloads:
            _logger.debug("MRU list JSON: %s", preview_for_log(payload))
        try:
            self._ledger.put(self.key, payload)
        except LedgerError as exc:
            raise StorageWriteFailedError(f"PUT ledger state failed for MRU list: {exc}", key=self.key) from exc
        return updated
