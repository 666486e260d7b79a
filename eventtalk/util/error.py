"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error.

    Raised when the container cannot be assembled, e.g. a component has no
    implementation for the requested mode.
    """

    pass
