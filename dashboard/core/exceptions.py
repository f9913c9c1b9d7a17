"""Custom exceptions for the dashboard application."""


class DashboardException(Exception):
    """Base exception for the dashboard application."""
    
    pass


class DatabaseError(DashboardException):
    """Raised when a database operation fails."""
    
    pass


class ConfigurationError(DashboardException):
    """Raised when configuration is invalid."""
    
    pass


class AuthError(DashboardException):
    """Raised by the credentials provider when a sign-in attempt fails.

    ``type`` is one of :class:`dashboard.core.enums.AuthErrorType`. Any cause
    is kept on ``__cause__`` for diagnostics and never shown to the caller.
    """

    def __init__(self, type: str, message: str | None = None) -> None:
        super().__init__(message or type)
        self.type = type
