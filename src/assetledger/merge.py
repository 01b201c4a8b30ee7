"""Field-level partial state merge.

A patch is a sparse :class:`AssetState`.  For each writable field:

* absent in the patch (``None``): the current value is kept
* present in the patch: it replaces the current value

There is no "clear this field" signal, so a merge can change a field
but never make it absent again.  ``location`` is replaced as a whole.
"""

from __future__ import annotations

from typing import Any

from assetledger.models.asset import AssetState

#: Fields a patch may overwrite. ``asset_id`` is the lookup key and
#: ``updated_at`` is stamped by the store, so neither is listed.
MERGEABLE_FIELDS: tuple[str, ...] = ("location", "temperature", "carrier")


def merge_partial_state(current: AssetState, patch: AssetState) -> AssetState:
    """Return *current* with every field present in *patch* applied."""
    update: dict[str, Any] = {}
    if patch.location is not None:
        update["location"] = patch.location
    if patch.temperature is not None:
        update["temperature"] = patch.temperature
    if patch.carrier is not None:
        update["carrier"] = patch.carrier
    if not update:
        return current
    return current.model_copy(update=update)
