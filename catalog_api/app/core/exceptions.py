"""
Domain errors raised by stores and services.

Services signal outcomes with these exceptions and never deal with
HTTP status codes; the API layer maps each kind to a response in
``catalog_api.app.api.error_handlers``.
"""


class CatalogError(Exception):
    """Base class for all catalog errors.  ``message`` is client-facing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """The requested id does not reference a stored record."""


class ConflictError(CatalogError):
    """A name is already used by another record of the same kind."""


class ValidationFailure(CatalogError):
    """A field violates its constraint."""


class CategoryReferenceError(CatalogError):
    """A product references a category that does not exist."""


class InternalError(CatalogError):
    """Unexpected failure, including lookups that should have succeeded."""
