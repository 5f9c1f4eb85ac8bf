# portfolio/core/exceptions.py
"""
Error taxonomy shared by the service, repository and HTTP layers.

Every error carries the HTTP status it maps to, so the exception handlers in
``portfolio.main`` can render the response envelope without inspecting
messages.
"""

from typing import Optional


class PortfolioError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ValidationError(PortfolioError):
    """A request violated a field rule. Only the first violation is reported."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(PortfolioError):
    """No row with the requested id (or no profile row at all)."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Optional[int] = None):
        super().__init__(f"{entity.capitalize()} not found")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(PortfolioError):
    """The database rejected or failed a statement.

    The message is generic: driver text is logged, never returned.
    """

    status_code = 500

    def __init__(self, operation: str):
        super().__init__("Internal server error")
        self.operation = operation


class AuthError(PortfolioError):
    """Bad credentials, missing session, or duplicate registration."""

    status_code = 401


class UploadError(PortfolioError):
    """An uploaded file was too large or of a disallowed type."""

    status_code = 400
