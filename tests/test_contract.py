from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta

import pytest

from assetledger.config import ContractConfig
from assetledger.contract import AssetContract
from assetledger.exceptions import (
    InvalidArgumentCountError,
    MalformedPayloadError,
    MissingIdentifierError,
    NotFoundError,
    StorageWriteFailedError,
    VersionMismatchError,
)
from assetledger.ledger import InMemoryLedger


class _TickingClock:
    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def _contract(ledger: InMemoryLedger | None = None, **config: object) -> AssetContract:
    return AssetContract(
        ledger if ledger is not None else InMemoryLedger(),
        ContractConfig(**config),  # type: ignore[arg-type]
        clock=_TickingClock(),
    )


# ------------------------------------------------------------------
# init
# ------------------------------------------------------------------


def test_init_records_contract_version() -> None:
    ledger = InMemoryLedger()

    _contract(ledger).init(['{"version": "1.0", "nickname": "SIMPLE"}'])

    assert json.loads(ledger.get("ContractStateKey") or b"") == {"version": "1.0"}


def test_init_with_other_version_fails() -> None:
    ledger = InMemoryLedger()

    with pytest.raises(VersionMismatchError) as exc_info:
        _contract(ledger).init(['{"version": "2.0"}'])

    assert exc_info.value.expected == "1.0"
    assert exc_info.value.received == "2.0"
    assert "ContractStateKey" not in ledger


def test_init_honours_configured_version() -> None:
    ledger = InMemoryLedger()

    _contract(ledger, version="2.0").init(['{"version": "2.0"}'])

    assert json.loads(ledger.get("ContractStateKey") or b"") == {"version": "2.0"}


@pytest.mark.parametrize("payload", ["nope", "{}", '{"version": 1}'])
def test_init_malformed_payload(payload: str) -> None:
    with pytest.raises(MalformedPayloadError):
        _contract().init([payload])


def test_init_requires_exactly_one_argument() -> None:
    with pytest.raises(InvalidArgumentCountError):
        _contract().init([])


# ------------------------------------------------------------------
# CRUD
# ------------------------------------------------------------------


def test_create_update_read_round_trip() -> None:
    contract = _contract()

    assert contract.create_asset(['{"assetID": "A1", "temperature": 20.0}']) is None
    first = json.loads(contract.read_asset(['{"assetID": "A1"}']))
    assert first["assetID"] == "A1"
    assert first["temperature"] == 20.0
    assert "carrier" not in first

    assert contract.update_asset(['{"assetID": "A1", "carrier": "X"}']) is None
    second = json.loads(contract.read_asset(['{"assetID": " A1 "}']))
    assert second["temperature"] == 20.0
    assert second["carrier"] == "X"
    assert datetime.fromisoformat(second["updatedAt"]) > datetime.fromisoformat(first["updatedAt"])


def test_create_and_update_are_interchangeable() -> None:
    contract = _contract()

    contract.update_asset(['{"assetID": "A1", "carrier": "X"}'])
    contract.create_asset(['{"assetID": "A1", "temperature": 4.0}'])

    state = contract.store.get("A1")
    assert state.carrier == "X"
    assert state.temperature == 4.0


def test_non_finite_update_is_rejected_and_keeps_stored_value() -> None:
    contract = _contract()
    contract.create_asset(['{"assetID": "A1", "temperature": 20.0}'])

    with pytest.raises(MalformedPayloadError):
        contract.update_asset(['{"assetID": "A1", "temperature": NaN}'])

    assert json.loads(contract.read_asset(['{"assetID": "A1"}']))["temperature"] == 20.0


def test_reserved_keys_are_not_exposed_as_assets() -> None:
    ledger = InMemoryLedger()
    contract = _contract(ledger)
    contract.create_asset(['{"assetID": "A1", "temperature": 20.0}'])

    with pytest.raises(NotFoundError):
        contract.read_asset(['{"assetID": "_MruListKey"}'])
    with pytest.raises(StorageWriteFailedError):
        contract.delete_asset(['{"assetID": "_MruListKey"}'])

    assert "_MruListKey" in ledger


def test_delete_then_read_raises_not_found() -> None:
    contract = _contract()
    contract.create_asset(['{"assetID": "A1", "temperature": 20.0}'])

    assert contract.delete_asset(['{"assetID": "A1"}']) is None

    with pytest.raises(NotFoundError):
        contract.read_asset(['{"assetID": "A1"}'])
    assert json.loads(contract.read_mru_list())["mruList"][0]["assetID"] == "A1"


def test_read_never_created_asset_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        _contract().read_asset(['{"assetID": "GHOST"}'])


def test_delete_requires_identifier() -> None:
    with pytest.raises(MissingIdentifierError):
        _contract().delete_asset(['{"carrier": "X"}'])


def test_mru_list_after_fifteen_assets() -> None:
    contract = _contract()
    ids = [f"asset-{i:02d}" for i in range(15)]
    for asset_id in ids:
        contract.create_asset([json.dumps({"assetID": asset_id, "temperature": 1.0})])

    entries = json.loads(contract.read_mru_list())["mruList"]
    assert [entry["assetID"] for entry in entries] == list(reversed(ids))[:10]


# ------------------------------------------------------------------
# documents
# ------------------------------------------------------------------


def test_object_model_is_empty_state() -> None:
    assert json.loads(_contract().read_asset_object_model()) == {}


def test_samples_use_configured_nickname() -> None:
    samples = json.loads(_contract(nickname="TRACKER").read_asset_samples())

    assert set(samples) == {"event", "initEvent", "state"}
    assert samples["initEvent"]["nickname"] == "TRACKER"
    assert samples["event"]["location"] == {"latitude": 123.456, "longitude": 123.456}


def test_schemas_describe_every_operation() -> None:
    schemas = json.loads(_contract().read_asset_schemas())

    assert set(schemas["API"]) == {
        "init",
        "createAsset",
        "updateAsset",
        "deleteAsset",
        "readAsset",
        "readMruList",
        "readAssetObjectModel",
        "readAssetSamples",
        "readAssetSchemas",
    }
    create = schemas["API"]["createAsset"]["properties"]
    assert create["method"] == "invoke"
    assert create["args"]["minItems"] == create["args"]["maxItems"] == 1
    assert create["args"]["items"]["required"] == ["assetID"]
    assert "updatedAt" not in create["args"]["items"]["properties"]
    assert schemas["API"]["readAssetSamples"]["properties"]["args"]["maxItems"] == 0
    assert "updatedAt" in schemas["objectModelSchemas"]["state"]["properties"]
