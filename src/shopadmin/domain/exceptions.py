"""Domain-level exceptions.

Every failure the core reports is a subclass of DomainException so the
CLI layer can catch them uniformly and show a single human-readable
message. Nothing is retried automatically.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A form field or business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested shop or product does not exist."""


class PreconditionFailedError(DomainException):
    """The collaborator refused a mutation, e.g. deleting a shop with products."""


class FetchFailedError(DomainException):
    """A call to the catalog store did not succeed."""
