"""Custom exceptions used throughout the blackbox package."""

from typing import Any, Optional


class BlackboxError(Exception):
    """Base exception for all blackbox errors.

    All package-specific exceptions inherit from this class, so callers can
    catch every simulator failure with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(BlackboxError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing required configuration
    - Configuration validation failures
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


class InvalidRayError(BlackboxError):
    """Raised when a ray identifier is outside the perimeter numbering.

    Valid ids run from 1 to 4 * size. An invalid id is a caller error; no
    trajectory is produced.
    """

    def __init__(
        self,
        ray_id: object,
        ray_count: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["ray_id"] = ray_id
        details["valid_range"] = (1, ray_count)
        message = f"Invalid ray id {ray_id!r}: expected an integer in [1, {ray_count}]"
        super().__init__(message=message, details=details)
        self.ray_id = ray_id
        self.ray_count = ray_count


class InternalInvariantViolation(BlackboxError):
    """Raised when a ray fails to terminate within the iteration cap.

    This points at a broken interaction table or a board whose invariants
    were bypassed, never at a caller mistake.
    """

    def __init__(
        self,
        message: str,
        ray_id: Optional[int] = None,
        steps: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        if ray_id is not None:
            details["ray_id"] = ray_id
        if steps is not None:
            details["steps"] = steps
        super().__init__(message=message, details=details)
        self.ray_id = ray_id
        self.steps = steps


class BoardError(BlackboxError):
    """Raised when a board cannot be built.

    Examples:
    - Atom placed on the border ring or outside the grid
    - Grid rows of the wrong length
    - More atoms requested than interior cells
    """

    def __init__(
        self,
        message: str,
        position: Optional[tuple[int, int]] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if position is not None:
            details = details or {}
            details["position"] = position

        super().__init__(message=message, details=details)
        self.position = position
