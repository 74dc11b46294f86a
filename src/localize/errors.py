"""Error taxonomy for the localize package."""


class LocalizeError(Exception):
    """Base class for every error raised by localize."""
    pass


class IdentifierError(LocalizeError, ValueError):
    """Raised when a destination variable name is rejected."""

    def __init__(self, name, message):
        super().__init__(message)
        self.name = name


class InvalidIdentifierError(IdentifierError):
    """The name does not follow the script identifier grammar."""
    pass


class ReservedKeywordError(IdentifierError):
    """The name collides with a reserved word."""
    pass


class EmptyKeyError(LocalizeError, ValueError):
    """Raised when a container operation is given an empty key."""
    pass


class NilValueError(LocalizeError, ValueError):
    """Raised when None is added to a container."""
    pass


class UnsupportedValueError(LocalizeError, TypeError):
    """Raised when a value cannot be represented in the value model."""
    pass


class LoadError(LocalizeError, ValueError):
    """Raised when a YAML/JSON document does not describe a localized map."""
    pass
