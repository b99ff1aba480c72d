"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ExplorerError(AppError):
    """
    Raised by explorer providers on a failed lookup.

    Covers non-success status, network errors, timeouts and malformed payloads.
    Callers recover from it locally.
    """

    def __init__(self, message: str):
        super().__init__(message, code="EXPLORER_ERROR")


class AggregationError(AppError):
    """Raised when an aggregation run fails as a whole."""

    def __init__(self, message: str, code: str = "AGGREGATION_ERROR"):
        super().__init__(message, code=code)


class AddressSourceError(AggregationError):
    """Raised when the tracked address list cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Cannot read address list {source}: {reason}", code="ADDRESS_SOURCE_ERROR")


class CacheWriteError(AggregationError):
    """Raised when the balance cache cannot be persisted."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"Cannot write balance cache {target}: {reason}", code="CACHE_WRITE_ERROR")
