"""Key-value ledger interface and reference implementations."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from assetledger.exceptions import LedgerError

_logger = logging.getLogger(__name__)


class Ledger(Protocol):
    """Structural ledger interface consumed by the store.

    ``get`` returns ``None`` for a key that was never written (or was
    deleted).  Transport faults are raised as :class:`LedgerError` so
    callers can tell "nothing stored" apart from "could not ask".
    """

    def get(self, key: str) -> bytes | None:
        ...

    def put(self, key: str, value: bytes) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class InMemoryLedger:
    """Dict-backed ledger.

    Useful for tests and for hosts that embed the contract without a
    durable backend.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class JsonFileLedger:
    """Ledger persisted to a single JSON file.

    The whole key space is stored as ``{key: value}`` with values kept as
    UTF-8 text.  Every call re-reads the file, so several processes can
    take turns on the same file (no locking is performed).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self, key: str) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LedgerError(f"Cannot read ledger file {self._path}: {exc}", key=key) from exc
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise LedgerError(f"Ledger file {self._path} is not JSON", key=key) from exc
        if not isinstance(data, dict):
            raise LedgerError(f"Ledger file {self._path} does not hold an object", key=key)
        return {str(k): str(v) for k, v in data.items()}

    def _store(self, data: dict[str, str], key: str) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as exc:
            raise LedgerError(f"Cannot write ledger file {self._path}: {exc}", key=key) from exc

    def get(self, key: str) -> bytes | None:
        value = self._load(key).get(key)
        return None if value is None else value.encode("utf-8")

    def put(self, key: str, value: bytes) -> None:
        try:
            text = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LedgerError(f"Value for {key!r} is not UTF-8", key=key) from exc
        data = self._load(key)
        data[key] = text
        self._store(data, key)
        _logger.debug("Wrote %d bytes under %r to %s", len(value), key, self._path)

    def delete(self, key: str) -> None:
        data = self._load(key)
        if data.pop(key, None) is not None:
            self._store(data, key)
