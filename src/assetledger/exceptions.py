"""Custom exception hierarchy for assetledger."""

from __future__ import annotations


class AssetLedgerError(Exception):
    """Base exception for all assetledger errors."""


class ConfigError(AssetLedgerError):
    """Invalid or missing configuration."""


class LedgerError(AssetLedgerError):
    """The underlying ledger failed to serve a get/put/delete.

    Raised by :class:`assetledger.ledger.Ledger` implementations for
    transport-level faults.  A key that simply does not exist is *not*
    a ledger error; ``get`` returns ``None`` for that case.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class InvalidArgumentCountError(AssetLedgerError):
    """Operation did not receive the expected number of arguments."""

    def __init__(self, message: str, *, expected: int = 1, received: int = 0) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)


class MalformedPayloadError(AssetLedgerError):
    """Argument could not be parsed into the expected shape."""


class MissingIdentifierError(AssetLedgerError):
    """``assetID`` is absent or blank."""


class NotFoundError(AssetLedgerError):
    """No value (or an empty value) is stored under the requested key."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class CorruptRecordError(AssetLedgerError):
    """A stored value exists but cannot be parsed."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class StorageWriteFailedError(AssetLedgerError):
    """A write-path step against the ledger failed.

    ``asset_written`` is ``True`` when the asset record itself was
    already put before the failure (i.e. the recency index write failed
    afterwards).  Callers should treat that as a partial failure: the
    asset is updated but the index does not reflect it.
    """

    def __init__(self, message: str, *, key: str = "", asset_written: bool = False) -> None:
        self.key = key
        self.asset_written = asset_written
        super().__init__(message)


class VersionMismatchError(AssetLedgerError):
    """initialize was called with a version other than the compiled-in one."""

    def __init__(self, message: str, *, expected: str = "", received: str = "") -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)


class UnknownOperationError(AssetLedgerError):
    """The dispatcher received an operation name it does not route."""

    def __init__(self, message: str, *, function: str = "") -> None:
        self.function = function
        super().__init__(message)
