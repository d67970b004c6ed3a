"""Exception types raised by the k-medoids engine."""


class MedoidSearchError(Exception):
    """Base class for all errors raised by medoidsearch."""


class EmptyConfigurationError(MedoidSearchError, ValueError):
    """An operation that needs at least one cluster (or element) got none."""


class InvalidArgumentError(MedoidSearchError, ValueError):
    """A caller-supplied argument is outside its valid range."""
