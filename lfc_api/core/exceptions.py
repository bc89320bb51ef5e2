"""Custom exceptions for the LFC API.

Services raise these; the REST error handlers and the GraphQL resolvers
translate them into responses.
"""

from typing import Any


class LFCError(Exception):
    """Base exception for LFC API errors."""

    pass


class DocumentValidationError(LFCError):
    """Exception raised when a document fails field validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class BusinessLogicError(LFCError):
    """Exception raised when a write breaks a cross-document rule."""

    pass


class InvalidReferenceError(LFCError):
    """Exception raised when a document points at a missing document."""

    def __init__(self, field: str, value: Any):
        super().__init__(f"{field} {value} does not exist")
        self.field = field
        self.value = value


class ResourceNotFoundError(LFCError):
    """Exception raised when a document or embedded item does not exist."""

    def __init__(self, resource: str, identifier: Any = None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(LFCError):
    """Exception raised for unique-value clashes and still-referenced deletes."""

    pass


class InvalidQueryError(LFCError):
    """Exception raised for unsupported sort fields or pagination values."""

    pass
