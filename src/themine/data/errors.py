"""Custom exceptions for the persistence layer."""


class DataError(Exception):
    """Base exception for the data layer."""


class ScoreStoreError(DataError):
    """Raised when the score list cannot be read or written."""
