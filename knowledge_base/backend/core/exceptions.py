"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every note operation fails with one of these; the command dispatcher
renders them as text and the REST layer renders them as error envelopes.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotConnectedError(ApplicationError):
    """Raised when no document store client is held."""

    def __init__(self, message: str = "Database is not connected") -> None:
        super().__init__(message, code="DB_NOT_CONNECTED")


class InvalidIdError(ApplicationError):
    """Raised when a note id does not parse into an ObjectId."""

    def __init__(self, message: str = "Invalid note id format") -> None:
        super().__init__(message, code="VAL_INVALID_ID")


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Note not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class StoreError(ApplicationError):
    """Raised when a document store operation fails."""

    def __init__(self, detail: str = "Store operation failed") -> None:
        self.detail = detail
        super().__init__(detail, code="SYS_STORE_ERROR")


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class CommandNotFoundError(ApplicationError):
    """Raised when a command name is not registered."""

    def __init__(self, message: str = "Unknown command") -> None:
        super().__init__(message, code="CMD_NOT_FOUND")
