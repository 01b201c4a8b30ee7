"""Internal constants shared across the library."""

from typing import Any

CONTRACT_VERSION = "1.0"
CONTRACT_NICKNAME = "SIMPLE"

# Well-known ledger keys.
CONTRACT_STATE_KEY = "ContractStateKey"
MRU_KEY = "_MruListKey"

MRU_CAPACITY = 10

_ASSET_ID_DESCRIPTION = "The ID of a managed asset. The resource focal point for a smart contract."
_CARRIER_DESCRIPTION = "transport entity currently in possession of asset"

# Example documents returned by ``readAssetSamples``.
SAMPLES: dict[str, Any] = {
    "event": {
        "assetID": _ASSET_ID_DESCRIPTION,
        "carrier": _CARRIER_DESCRIPTION,
        "location": {"latitude": 123.456, "longitude": 123.456},
        "temperature": 123.456,
    },
    "initEvent": {
        "nickname": CONTRACT_NICKNAME,
        "version": "The version of the contract to deploy.",
    },
    "state": {
        "assetID": _ASSET_ID_DESCRIPTION,
        "carrier": _CARRIER_DESCRIPTION,
        "location": {"latitude": 123.456, "longitude": 123.456},
        "temperature": 123.456,
    },
}
