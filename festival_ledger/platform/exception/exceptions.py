from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500, reason: Optional[str] = None) -> None:
        self.message = message
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, reason: Optional[str] = None) -> None:
        super().__init__(message, 404, reason)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, reason: Optional[str] = None) -> None:
        super().__init__(message, 409, reason)


class ValidationRejectedError(CustomBaseError):
    """Raised by the HTTP layer when a use case returns a validation rejection."""

    def __init__(
        self, message: str, fields: tuple[str, ...] = (), reason: Optional[str] = None
    ) -> None:
        super().__init__(message, 422, reason)
        self.fields = fields


class PersistenceError(CustomBaseError):
    """Snapshot document could not be read, decoded or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500, 'PERSISTENCE_FAILURE')
