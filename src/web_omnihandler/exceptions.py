"""Web OmniHandler exceptions.

This module defines all custom exceptions used throughout the web-omnihandler package.
"""

from typing import Optional


class OmniHandlerError(Exception):
    """Base exception for all web-omnihandler errors.

    All custom exceptions in this package inherit from this class,
    allowing users to catch all package-specific errors with a single except clause.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            cause: Optional underlying exception that caused this error.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class ConfigurationError(OmniHandlerError):
    """Raised when there is a configuration error.

    This includes invalid option values and dispatching a request
    before a normalized handler was attached.
    """

    pass


class FrameworkAdapterError(OmniHandlerError):
    """Raised when a framework adapter misbehaves.

    This includes a ``check`` that raises on foreign input and
    requests or responses an adapter cannot translate.
    """

    def __init__(
        self,
        message: str,
        framework: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.framework = framework
