"""Custom exceptions used throughout the amida package."""

from typing import Any, Optional


class AmidaError(Exception):
    """Base exception for all amida errors.

    All package-specific exceptions should inherit from this class.
    This allows catching all amida errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(AmidaError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing or malformed configuration section
    - YAML syntax errors in a configuration file
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class ParseError(AmidaError):
    """Raised when puzzle text cannot be turned into a board.

    Examples:
    - Empty input
    - Wrong number of fields on the header or a rung line
    - A token that is not an integer
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if line_number is not None:
            details = details or {}
            details["line_number"] = line_number
            if line is not None:
                details["line"] = line
            message = f"line {line_number}: {message}"

        super().__init__(message=message, details=details)
        self.line_number = line_number
        self.line = line


class InvariantViolation(AmidaError):
    """Raised when a caller breaks a board precondition.

    These are contract violations, not recoverable input errors. Boards only
    raise them while invariant checking is enabled.
    """


class LaneOutOfRangeError(InvariantViolation):
    """Raised when a path is requested for a lane the board does not have."""

    def __init__(
        self,
        lane: int,
        lane_count: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["lane"] = lane
        details["lane_count"] = lane_count
        message = f"Lane {lane} out of range for a board with {lane_count} lanes"
        super().__init__(message=message, details=details)
        self.lane = lane
        self.lane_count = lane_count
