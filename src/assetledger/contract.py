"""Operation surface handed to the host runtime.

Each public method takes the raw argument sequence the host received and
returns ``None`` for commands or the stored bytes for queries.  All
failures are raised as :class:`assetledger.exceptions.AssetLedgerError`
subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from pydantic import ValidationError

from assetledger.config import ContractConfig
from assetledger.exceptions import LedgerError, MalformedPayloadError, StorageWriteFailedError, VersionMismatchError
from assetledger.ledger import Ledger
from assetledger.models.contract import ContractState, InitEvent
from assetledger.schemas import ContractDocuments
from assetledger.store import AssetStore
from assetledger.validation import expect_single_argument, validate_input

_logger = logging.getLogger(__name__)

Args = Sequence[str | bytes]


class AssetContract:
    """CRUD contract for assets on top of a :class:`Ledger`.

    Usage::

        contract = AssetContract(InMemoryLedger())
        contract.init(['{"version": "1.0"}'])
        contract.create_asset(['{"assetID": "A1", "temperature": 20.0}'])
        contract.read_asset(['{"assetID": "A1"}'])
    """

    def __init__(
        self,
        ledger: Ledger,
        config: ContractConfig | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ledger = ledger
        self._config = config or ContractConfig()
        if clock is None:
            self._store = AssetStore(ledger, self._config)
        else:
            self._store = AssetStore(ledger, self._config, clock=clock)
        self._documents = ContractDocuments.build(self._config)

    @property
    def config(self) -> ContractConfig:
        return self._config

    @property
    def store(self) -> AssetStore:
        return self._store

    # ------------------------------------------------------------------
    # Deploy
    # ------------------------------------------------------------------

    def init(self, args: Args) -> None:
        """Check the deployed version and record it in the ledger."""
        raw = expect_single_argument(args, "init")
        try:
            event = InitEvent.from_ledger_bytes(raw)
        except ValidationError as exc:
            raise MalformedPayloadError("Version argument unmarshal failed") from exc

        if event.version != self._config.version:
            raise VersionMismatchError(
                f"Contract version {self._config.version} must match version argument: {event.version}",
                expected=self._config.version,
                received=event.version,
            )

        key = self._config.contract_state_key
        try:
            self._ledger.put(key, ContractState(version=event.version).to_ledger_bytes())
        except LedgerError as exc:
            raise StorageWriteFailedError(f"Contract state failed PUT to ledger: {exc}", key=key) from exc
        _logger.info("Contract %s initialized at version %s", event.nickname, event.version)

    # ------------------------------------------------------------------
    # Invoke
    # ------------------------------------------------------------------

    def create_asset(self, args: Args) -> None:
        patch = validate_input(args, operation="createAsset", log_payloads=self._config.log_payloads)
        self._store.create_or_update(patch)

    def update_asset(self, args: Args) -> None:
        patch = validate_input(args, operation="updateAsset", log_payloads=self._config.log_payloads)
        self._store.create_or_update(patch)

    def delete_asset(self, args: Args) -> None:
        state = validate_input(args, operation="deleteAsset", log_payloads=self._config.log_payloads)
        self._store.delete(state.asset_id or "")

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def read_asset(self, args: Args) -> bytes:
        state = validate_input(args, operation="readAsset", log_payloads=self._config.log_payloads)
        return self._store.read(state.asset_id or "")

    def read_mru_list(self, args: Args = ()) -> bytes:
        return self._store.read_mru_list()

    def read_asset_object_model(self, args: Args = ()) -> bytes:
        return self._documents.object_model

    def read_asset_samples(self, args: Args = ()) -> bytes:
        return self._documents.samples

    def read_asset_schemas(self, args: Args = ()) -> bytes:
        return self._documents.schemas
