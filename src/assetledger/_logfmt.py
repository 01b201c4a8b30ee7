"""Helpers for safe debug logging.

Stored documents and caller arguments can be arbitrarily large. This
module trims them before they are emitted in DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def preview_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a truncated copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return f"<bytes:{len(value)}b>"

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, Mapping):
        return {str(k): preview_for_log(v, max_string=max_string, _depth=_depth + 1) for k, v in value.items()}

    if isinstance(value, Sequence):
        return [preview_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
