# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error taxonomy shared by the services and the HTTP layer.

    ValidationError  malformed query input          -> 400
    NotFoundError    lookup or delete target absent -> 404 (listings) / 500 (delete)
    StorageError     driver or connection failure   -> 500
"""

from typing import Optional


class CrimeApiError(Exception):
    """Base class for every error raised by the query and mutation engine."""


class ValidationError(CrimeApiError):
    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for '{key}': {reason}")


class NotFoundError(CrimeApiError):
    pass


class StorageError(CrimeApiError):
    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage {operation} failed{detail}")
