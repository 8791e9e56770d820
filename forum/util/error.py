"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are unusable for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be selected or wired."""

    pass
