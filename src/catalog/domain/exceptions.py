"""Domain-level exceptions.

Business rule violations are expressed as subclasses of DomainException.
The product store catches them at its boundary and reports a plain
boolean, so callers of ``add`` never see these directly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
