"""assetledger - asset record management with partial-update merging on a key-value ledger."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("assetledger")
except PackageNotFoundError:
    __version__ = "0+local"
from assetledger.config import ContractConfig
from assetledger.contract import AssetContract
from assetledger.exceptions import (
    AssetLedgerError,
    ConfigError,
    CorruptRecordError,
    InvalidArgumentCountError,
    LedgerError,
    MalformedPayloadError,
    MissingIdentifierError,
    NotFoundError,
    StorageWriteFailedError,
    UnknownOperationError,
    VersionMismatchError,
)
from assetledger.ledger import InMemoryLedger, JsonFileLedger, Ledger
from assetledger.merge import merge_partial_state
from assetledger.models import (
    AssetMruList,
    AssetState,
    AssetUpdatedAt,
    ContractState,
    Geolocation,
    InitEvent,
)
from assetledger.mru import RecencyIndex
from assetledger.operations import Operation, OperationKind
from assetledger.router import dispatch
from assetledger.store import AssetStore
from assetledger.validation import validate_input

__all__ = [
    "__version__",
    "AssetContract",
    "AssetLedgerError",
    "AssetMruList",
    "AssetState",
    "AssetStore",
    "AssetUpdatedAt",
    "ConfigError",
    "ContractConfig",
    "ContractState",
    "CorruptRecordError",
    "Geolocation",
    "InMemoryLedger",
    "InitEvent",
    "InvalidArgumentCountError",
    "JsonFileLedger",
    "Ledger",
    "LedgerError",
    "MalformedPayloadError",
    "MissingIdentifierError",
    "NotFoundError",
    "Operation",
    "OperationKind",
    "RecencyIndex",
    "StorageWriteFailedError",
    "UnknownOperationError",
    "VersionMismatchError",
    "dispatch",
    "merge_partial_state",
    "validate_input",
]
