"""Input validation shared by the CRUD operations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from assetledger._logfmt import preview_for_log
from assetledger.exceptions import (
    InvalidArgumentCountError,
    MalformedPayloadError,
    MissingIdentifierError,
)
from assetledger.models.asset import AssetState

_logger = logging.getLogger(__name__)


def expect_single_argument(args: Sequence[str | bytes], operation: str) -> str | bytes:
    """Return the only element of *args* or raise :class:`InvalidArgumentCountError`."""
    if len(args) != 1:
        raise InvalidArgumentCountError(
            f"{operation} expects exactly one argument, a JSON encoded object; got {len(args)}",
            expected=1,
            received=len(args),
        )
    return args[0]


def validate_input(
    args: Sequence[str | bytes],
    *,
    operation: str = "operation",
    log_payloads: bool = False,
) -> AssetState:
    """Parse the single JSON argument into a partial :class:`AssetState`.

    The returned state has ``asset_id`` trimmed of surrounding
    whitespace.  Other writable fields pass through unchanged, so a field
    the caller left out stays ``None`` (absent).  ``updated_at`` is owned
    by the store and is always dropped from the returned patch.
    """
    raw = expect_single_argument(args, operation)
    if log_payloads:
        _logger.debug("%s argument: %s", operation, preview_for_log(raw))

    try:
        state = AssetState.from_ledger_bytes(raw)
    except ValidationError as exc:
        raise MalformedPayloadError(f"{operation}: unable to parse input JSON data: {exc.error_count()} error(s)") from exc

    if state.asset_id is None:
        raise MissingIdentifierError(f"{operation}: assetID is mandatory in the input JSON data")
    asset_id = state.asset_id.strip()
    if not asset_id:
        raise MissingIdentifierError(f"{operation}: assetID must not be blank")

    return state.model_copy(update={"asset_id": asset_id, "updated_at": None})
