class TopWordsError(Exception):
    """Base class for all errors raised by the word cloud streaming package."""


class ConfigurationError(TopWordsError, ValueError):
    """Raised when a tracker or pipeline is built with invalid parameters."""


class IgnoreListIOError(TopWordsError, OSError):
    """Raised when an ignore-list file cannot be read."""


class OutputSinkError(TopWordsError):
    """Raised when an output sink can no longer deliver updates (e.g. broken pipe)."""
