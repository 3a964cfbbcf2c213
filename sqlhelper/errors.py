"""Exceptions raised by sqlhelper.

Driver failures (``sqlalchemy.exc.*``) are never wrapped; only problems
detected by the library itself before any I/O use these classes.
"""


class SqlHelperError(Exception):
    """Base exception for sqlhelper errors."""
    pass


class ConfigurationError(SqlHelperError):
    """Raised when a builder or connection is missing required configuration."""
    pass


class UnsupportedTypeError(SqlHelperError):
    """Raised when a column type has no SQL keyword."""
    pass
