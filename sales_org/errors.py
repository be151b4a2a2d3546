"""Errors raised by the sales rule services.

Each error carries a stable ``code`` that the API returns next to the
human-readable message, so admin UI clients can branch on it.
"""

NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"


class DomainError(Exception):
    """Base class for sales rule errors surfaced to API callers."""

    code: str = VALIDATION_ERROR


class NotFoundError(DomainError):
    """No sales rule matches the given id, or no rule matches a lookup."""

    code = NOT_FOUND


class DuplicateResourceError(DomainError):
    """A create or update would leave two sales rules with the same (country, region)."""

    code = DUPLICATE_RESOURCE


class DomainValidationError(DomainError):
    """Request data breaks a business rule, e.g. a lookup without a country code."""

    code = VALIDATION_ERROR
