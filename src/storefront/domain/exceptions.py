"""Domain-level exceptions.

Every rejected input or broken invariant in the storefront surfaces as a
subclass of DomainException, so the CLI can report it in one place.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected or an invariant would be violated."""


class EntityNotFoundError(DomainException):
    """A requested product, cart line or catalog entry does not exist."""
