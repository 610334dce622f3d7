"""Storage error hierarchy."""


class StorageFailure(Exception):
    """Base class for errors raised by the company store."""


class StorageUnavailable(StorageFailure):
    """Raised when the database cannot be opened or the schema cannot be created."""


class StorageOperationFailed(StorageFailure):
    """Raised when a read against an open store fails."""
