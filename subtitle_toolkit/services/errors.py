"""Custom exceptions for subtitle toolkit operations."""


class SubtitleToolkitError(Exception):
    """Base class for every error raised by the toolkit."""


class ValidationError(SubtitleToolkitError, ValueError):
    """Raised when required input is missing or SRT content is malformed."""


class NotFoundError(SubtitleToolkitError, FileNotFoundError):
    """Raised when the folder to resolve files from does not exist."""


class FormatError(SubtitleToolkitError, ValueError):
    """Raised when a timestamp does not match ``HH:MM:SS,mmm``."""


class ConfigError(SubtitleToolkitError):
    """Raised when the YAML configuration file cannot be loaded."""
