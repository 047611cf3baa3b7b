"""
Storage exception hierarchy

- StorageError: base for every upload failure
- ValidationError: required input missing or malformed
- NotAFileError: server path does not resolve to a regular file
- ClientTransportError: storage client failed or returned a non-200 response
"""


class StorageError(Exception):
    """Base exception for upload failures"""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(StorageError):
    """Raised when a required upload option is missing"""


class NotAFileError(StorageError):
    """Raised when a server path is not a regular file"""


class ClientTransportError(StorageError):
    """Raised when the storage client fails or answers with a non-200 status"""
