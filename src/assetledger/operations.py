"""Closed set of operations exposed to the host dispatcher."""

from __future__ import annotations

from enum import StrEnum


class OperationKind(StrEnum):
    DEPLOY = "deploy"
    INVOKE = "invoke"
    QUERY = "query"


class Operation(StrEnum):
    INIT = "init"
    CREATE_ASSET = "createAsset"
    UPDATE_ASSET = "updateAsset"
    DELETE_ASSET = "deleteAsset"
    READ_ASSET = "readAsset"
    READ_MRU_LIST = "readMruList"
    READ_ASSET_OBJECT_MODEL = "readAssetObjectModel"
    READ_ASSET_SAMPLES = "readAssetSamples"
    READ_ASSET_SCHEMAS = "readAssetSchemas"

    @property
    def kind(self) -> OperationKind:
        return _KINDS[self]

    @property
    def arg_count(self) -> int:
        """Number of JSON arguments the operation takes."""
        return 1 if self in _SINGLE_ARGUMENT else 0

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_KINDS: dict[Operation, OperationKind] = {
    Operation.INIT: OperationKind.DEPLOY,
    Operation.CREATE_ASSET: OperationKind.INVOKE,
    Operation.UPDATE_ASSET: OperationKind.INVOKE,
    Operation.DELETE_ASSET: OperationKind.INVOKE,
    Operation.READ_ASSET: OperationKind.QUERY,
    Operation.READ_MRU_LIST: OperationKind.QUERY,
    Operation.READ_ASSET_OBJECT_MODEL: OperationKind.QUERY,
    Operation.READ_ASSET_SAMPLES: OperationKind.QUERY,
    Operation.READ_ASSET_SCHEMAS: OperationKind.QUERY,
}

_SINGLE_ARGUMENT = frozenset(
    {
        Operation.INIT,
        Operation.CREATE_ASSET,
        Operation.UPDATE_ASSET,
        Operation.DELETE_ASSET,
        Operation.READ_ASSET,
    }
)

_DESCRIPTIONS: dict[Operation, str] = {
    Operation.INIT: "Initializes the contract when started, either by deployment or by peer restart.",
    Operation.CREATE_ASSET: (
        "Create an asset. One argument, a JSON encoded event. AssetID is required with zero or more "
        "writable properties. Establishes an initial asset state."
    ),
    Operation.UPDATE_ASSET: (
        "Update the state of an asset. The one argument is a JSON encoded event. AssetID is required "
        "along with one or more writable properties. Establishes the next asset state."
    ),
    Operation.DELETE_ASSET: "Delete an asset. Argument is a JSON encoded string containing only an assetID.",
    Operation.READ_ASSET: (
        "Returns the state an asset. Argument is a JSON encoded string. AssetID is the only accepted property."
    ),
    Operation.READ_MRU_LIST: "Returns the most recently updated assets with their update times, newest first.",
    Operation.READ_ASSET_OBJECT_MODEL: "Returns an empty asset state object.",
    Operation.READ_ASSET_SAMPLES: "Returns a JSON encoded object containing sample events and states.",
    Operation.READ_ASSET_SCHEMAS: "Returns a JSON encoded object containing the API and object model schemas.",
}
