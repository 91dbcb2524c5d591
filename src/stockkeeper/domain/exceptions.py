"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display operator messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidNumberError(ValidationError):
    """Text that should hold a whole number does not."""


class NegativeQuantityError(ValidationError):
    """A stock quantity below zero was supplied."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateEntityError(DomainException):
    """An entity with the same identity already exists."""


class PersistenceError(DomainException):
    """Stored inventory could not be read or written."""


class CorruptInventoryFileError(PersistenceError):
    """The inventory file exists but does not hold a valid mapping."""
