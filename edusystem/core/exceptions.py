"""
Domain error taxonomy.

Repositories raise these; services let them propagate unchanged and the
exception handlers in ``edusystem.main`` turn them into HTTP responses.
"""


class EducationalSystemError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(EducationalSystemError):
    """A test, material, question, user, review or result lookup missed."""


class InvalidReferenceError(NotFoundError):
    """An operation referenced a material or user that does not exist."""


class ValidationFailureError(EducationalSystemError):
    """Input is well-formed but violates a business rule."""


class ConflictError(EducationalSystemError):
    """The operation conflicts with existing state (restricted delete, duplicates)."""
