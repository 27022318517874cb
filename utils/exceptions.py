from __future__ import annotations

"""Shared exception types for cross-module use."""

from typing import Iterable


class RecordStoreError(RuntimeError):
    """Raised when the record store cannot read or persist data."""


class UnknownRecordError(RecordStoreError, KeyError):
    """Raised when a player or game id is not present in the store."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Unknown {kind}: {record_id}")

    def __str__(self) -> str:
        return f"Unknown {self.kind}: {self.record_id}"


class AuthorizationError(PermissionError):
    """Raised when a destructive store action is attempted without clearance."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin password required to {action}.")


class LegacyImportError(ValueError):
    """Raised when a legacy stats sheet cannot be interpreted."""

    def __init__(self, message: str, missing: Iterable[str] | None = None):
        self.missing = list(missing or [])
        if self.missing:
            message += " Missing columns: " + ", ".join(self.missing)
        super().__init__(message)


__all__ = [
    "AuthorizationError",
    "LegacyImportError",
    "RecordStoreError",
    "UnknownRecordError",
]
