"""Exceptions raised while loading configuration and presets.

List operations themselves never raise: empty or duplicate input is a no-op.
"""


class ListError(Exception):
    """Base class for black/white list errors."""
    pass


class PresetError(ListError):
    """Raised when the preset catalog is malformed."""
    pass


class ConfigError(ListError):
    """Raised when a config file has values of the wrong type."""
    pass
