"""Self-describing documents served by the read-only queries.

Built once per contract from the pydantic models, so the published
schemas cannot drift from what the validator actually accepts.
"""

from __future__ import annotations

import copy
import dataclasses
import json
from typing import Any

from assetledger._constants import SAMPLES
from assetledger.config import ContractConfig
from assetledger.models.asset import AssetState
from assetledger.models.contract import InitEvent
from assetledger.models.recency import AssetMruList
from assetledger.operations import Operation, OperationKind

_ID_ONLY_SCHEMA: dict[str, Any] = {
    "description": "An object containing only an assetID for use as an argument to read or delete.",
    "properties": {
        "assetID": {
            "description": "The ID of a managed asset. The resource focal point for a smart contract.",
            "type": "string",
        }
    },
    "required": ["assetID"],
    "type": "object",
}


def _dumps(document: Any) -> bytes:
    return json.dumps(document, indent=4, sort_keys=True).encode("utf-8")


def state_schema() -> dict[str, Any]:
    """JSON schema of a stored asset state."""
    schema = AssetState.model_json_schema(by_alias=True, mode="serialization")
    schema["description"] = "A set of fields that constitute the complete asset state."
    return schema


def event_schema() -> dict[str, Any]:
    """JSON schema of a create/update argument (a partial state)."""
    schema = AssetState.model_json_schema(by_alias=True, mode="serialization")
    schema.get("properties", {}).pop("updatedAt", None)
    schema["required"] = ["assetID"]
    schema["description"] = (
        "A set of fields that constitute the writable fields in an asset's state. AssetID is mandatory. "
        "In this contract pattern, a partial state is used as an event."
    )
    return schema


def _args_schema(items: dict[str, Any], count: int) -> dict[str, Any]:
    return {
        "description": "args are JSON encoded strings",
        "items": items,
        "maxItems": count,
        "minItems": count,
        "type": "array",
    }


def api_schema(operation: Operation) -> dict[str, Any]:
    """Describe how to call *operation*."""
    items: dict[str, Any]
    if operation in (Operation.CREATE_ASSET, Operation.UPDATE_ASSET):
        items = event_schema()
    elif operation in (Operation.DELETE_ASSET, Operation.READ_ASSET):
        items = copy.deepcopy(_ID_ONLY_SCHEMA)
    elif operation is Operation.INIT:
        items = InitEvent.model_json_schema(by_alias=True)
        items["description"] = "event sent to init on deployment"
    else:
        items = {}

    properties: dict[str, Any] = {
        "args": _args_schema(items, operation.arg_count),
        "function": {
            "description": f"{operation.value} function",
            "enum": [operation.value],
            "type": "string",
        },
        "method": operation.kind.value,
    }
    if operation is Operation.READ_ASSET:
        properties["result"] = state_schema()
    elif operation is Operation.READ_MRU_LIST:
        properties["result"] = AssetMruList.model_json_schema(by_alias=True, mode="serialization")
    elif operation.kind is OperationKind.QUERY:
        properties["result"] = {"description": "JSON encoded object", "type": "string"}

    return {"description": operation.description, "properties": properties, "type": "object"}


def asset_schemas() -> dict[str, Any]:
    return {
        "API": {operation.value: api_schema(operation) for operation in Operation},
        "objectModelSchemas": {
            "event": event_schema(),
            "initEvent": InitEvent.model_json_schema(by_alias=True),
            "mruList": AssetMruList.model_json_schema(by_alias=True, mode="serialization"),
            "state": state_schema(),
        },
    }


def asset_samples(config: ContractConfig) -> dict[str, Any]:
    samples = copy.deepcopy(SAMPLES)
    samples["initEvent"]["nickname"] = config.nickname
    return samples


@dataclasses.dataclass(frozen=True)
class ContractDocuments:
    """Pre-serialized query documents."""

    samples: bytes
    schemas: bytes
    object_model: bytes

    @classmethod
    def build(cls, config: ContractConfig) -> ContractDocuments:
        return cls(
            samples=_dumps(asset_samples(config)),
            schemas=_dumps(asset_schemas()),
            object_model=AssetState().to_ledger_bytes(),
        )
