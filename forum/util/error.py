"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a provider component cannot be resolved."""

    pass
