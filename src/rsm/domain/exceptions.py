"""Domain-level exceptions.

Every rule violation is a subclass of DomainError so the CLI layer can
catch them uniformly and display user-friendly messages.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """A value is malformed (negative money, zero quantity, blank name...)."""


class BusinessRuleError(DomainError):
    """An invariant or a state precondition was violated."""


class InvalidStatusError(ValidationError):
    """A raw value does not name a known order status."""


class InvalidTransitionError(BusinessRuleError):
    """The requested status change is not an edge of the lifecycle."""


class EntityNotFoundError(DomainError):
    """A requested entity does not exist."""
