"""Custom exceptions for Castscore."""


class CastscoreError(Exception):
    """Base exception for all Castscore errors."""

    pass


class ConfigError(CastscoreError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class CatalogError(CastscoreError):
    """Channel/episode catalog errors."""

    pass


class SnapshotLoadError(CatalogError):
    """Catalog snapshot could not be read or validated."""

    pass


class ChannelNotFoundError(CatalogError):
    """Channel not present in the catalog snapshot."""

    pass


class ValidationError(CastscoreError):
    """User input failed validation.

    Carries an optional suggestion shown underneath the error message.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion
