"""Custom exception hierarchy for the Entity Manager tool."""


class EntityManagerError(Exception):
    """Base exception for Entity Manager.

    This is the root exception class for all tool-specific errors.
    The command loop reports these at the dispatch boundary instead of
    terminating the session.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class AuthConfigError(EntityManagerError):
    """Authentication configuration errors.

    Raised when the client-credentials inputs (tenant, client id,
    client secret) are missing at startup.
    """


class ConfigurationError(EntityManagerError):
    """Configuration required by a single command is missing.

    Raised when a command path needs an optional setting, such as the
    extension application id, that was not provided.
    """

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        details: str | None = None,
    ):
        """Initialize the configuration error.

        Args:
            message: The main error message
            variable: The environment variable that is missing
            details: Optional additional details about the error
        """
        self.variable = variable
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with variable context."""
        parts = [self.message]

        if self.variable:
            parts.append(f"Variable: {self.variable}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)
