"""Route named host calls to :class:`AssetContract` methods."""

from __future__ import annotations

import logging
from collections.abc import Callable

from assetledger.contract import Args, AssetContract
from assetledger.exceptions import UnknownOperationError
from assetledger.operations import Operation, OperationKind

_logger = logging.getLogger(__name__)

_HANDLERS: dict[Operation, Callable[[AssetContract, Args], bytes | None]] = {
    Operation.INIT: AssetContract.init,
    Operation.CREATE_ASSET: AssetContract.create_asset,
    Operation.UPDATE_ASSET: AssetContract.update_asset,
    Operation.DELETE_ASSET: AssetContract.delete_asset,
    Operation.READ_ASSET: AssetContract.read_asset,
    Operation.READ_MRU_LIST: AssetContract.read_mru_list,
    Operation.READ_ASSET_OBJECT_MODEL: AssetContract.read_asset_object_model,
    Operation.READ_ASSET_SAMPLES: AssetContract.read_asset_samples,
    Operation.READ_ASSET_SCHEMAS: AssetContract.read_asset_schemas,
}


def resolve(function: str, kind: OperationKind | None = None) -> Operation:
    """Map *function* to an :class:`Operation`.

    When *kind* is given the operation must belong to it, so invoke-only
    commands cannot be reached through a query and vice versa.
    """
    try:
        operation = Operation(function)
    except ValueError:
        raise UnknownOperationError(f"Received unknown invocation: {function}", function=function) from None
    if kind is not None and operation.kind is not kind:
        raise UnknownOperationError(
            f"Received unknown {kind.value} invocation: {function}",
            function=function,
        )
    return operation


def dispatch(
    contract: AssetContract,
    function: str,
    args: Args = (),
    kind: OperationKind | None = None,
) -> bytes | None:
    """Run *function* against *contract* and return its result."""
    operation = resolve(function, kind)
    _logger.debug("Dispatching %s (%s) with %d argument(s)", operation.value, operation.kind.value, len(args))
    return _HANDLERS[operation](contract, args)


def invoke(contract: AssetContract, function: str, args: Args = ()) -> bytes | None:
    return dispatch(contract, function, args, OperationKind.INVOKE)


def query(contract: AssetContract, function: str, args: Args = ()) -> bytes | None:
    return dispatch(contract, function, args, OperationKind.QUERY)


def deploy(contract: AssetContract, function: str, args: Args = ()) -> bytes | None:
    return dispatch(contract, function, args, OperationKind.DEPLOY)
