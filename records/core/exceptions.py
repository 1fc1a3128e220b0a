# /academic-records/records/core/exceptions.py

"""
Error kinds raised by the record store.

Each failure mode has its own exception class so callers can catch exactly
what they expect. All of them carry an `ErrorKind`, which the service facade
copies into the `OperationResult` it hands to the CLI.
"""

from enum import Enum


class ErrorKind(str, Enum):
    CAPACITY_EXCEEDED = "capacity_exceeded"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    PERMISSION_DENIED = "permission_denied"
    FULL = "full"
    NO_CHANGE = "no_change"


class RecordStoreError(Exception):
    """Base class for every recoverable record store failure."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CapacityExceededError(RecordStoreError):
    kind = ErrorKind.CAPACITY_EXCEEDED


class DuplicateKeyError(RecordStoreError):
    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(RecordStoreError):
    kind = ErrorKind.NOT_FOUND


class InvalidInputError(RecordStoreError):
    kind = ErrorKind.INVALID_INPUT


class PermissionDeniedError(RecordStoreError):
    kind = ErrorKind.PERMISSION_DENIED


class ClassFullError(RecordStoreError):
    kind = ErrorKind.FULL


class NoChangeError(RecordStoreError):
    kind = ErrorKind.NO_CHANGE
