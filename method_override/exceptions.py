class MethodOverrideError(Exception):
    """Base class for all method override errors."""


class UnsupportedMethod(MethodOverrideError, ValueError):
    """Raised when a URL is requested for a method that cannot be used as an override."""
