"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object invariant was violated."""


class MalformedContextError(ValidationError):
    """A filter context could not be built from the given selections."""


class InvalidDimensionError(DomainException):
    """An attribute facet was requested for a dimension the catalog does not know."""


class CatalogLoadError(DomainException):
    """The catalog snapshot could not be read."""


class ConfigurationError(DomainException):
    """Settings from the environment could not be parsed."""
