"""Domain-level exceptions.

Every failure a use case can report is a subclass of DomainException so the
CLI layer can catch them uniformly and map each kind to a stable exit code.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist or is not owned by the caller."""


class RenderError(DomainException):
    """The document engine failed to produce a document."""


class InternalError(DomainException):
    """The storage backend failed unexpectedly."""


class AuthenticationError(DomainException):
    """Credentials or a bearer token could not be verified."""
