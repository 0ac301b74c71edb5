from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for the service and repository layers."""


class StorageError(DomainError):
    """Raised when the storage backend fails unexpectedly (I/O, connection, timeout)."""


class DuplicateKeyError(DomainError):
    """Raised by repositories when an insert/update violates a unique index.

    ``key`` is the name of the violated index as reported by storage (may be
    unknown); ``field`` is the payload field it guards, when known.
    """

    def __init__(self, key: Optional[str] = None, *, field: Optional[str] = None):
        super().__init__(f"duplicate key: {key or 'unknown'}")
        self.key = key
        self.field = field
