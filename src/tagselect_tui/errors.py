"""Custom exceptions for tagselect-tui."""


class TagSelectError(Exception):
    """Base class for all tagselect-tui errors."""


class ConfigurationError(TagSelectError):
    """Raised when a tag selector cannot be constructed from its host or options."""
