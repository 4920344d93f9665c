"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when a path cannot be read, written or listed."""

    pass


class LineRangeError(BaseAppError):
    """Exception raised when a line number, range or position is out of bounds."""

    pass


class PatternError(BaseAppError):
    """Exception raised when a regular expression or its flags are invalid."""

    pass


class InvalidArgumentsError(BaseAppError):
    """Exception raised when tool arguments do not match the tool contract."""

    pass


class UnknownToolError(BaseAppError, ValueError):
    """Exception raised when a tool name is not handled."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
