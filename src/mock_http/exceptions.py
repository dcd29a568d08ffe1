"""
Custom exception hierarchy for the mock HTTP server.

Each exception carries a context dict for structured logging.
"""


class MockServerError(Exception):
    """Base exception for all mock server errors."""

    def __init__(self, message: str, context: dict = None):
        self.context = context or {}
        super().__init__(message)


class ServerStartupError(MockServerError):
    """Base exception for failures before the server accepts requests."""
    pass


class BindError(ServerStartupError):
    """Raised when the listening socket cannot be bound."""
    pass


class ConfigurationError(MockServerError):
    """Raised when configuration is invalid."""
    pass
