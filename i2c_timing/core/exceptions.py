"""Custom exceptions used throughout the i2c_timing package."""

from typing import Any, Optional


class TimingError(Exception):
    """Base exception for all timing calculator errors.

    All package-specific exceptions should inherit from this class.
    This allows catching all calculator errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(TimingError):
    """Raised when the speed characteristics table is invalid.

    This includes:
    - Unreadable or malformed YAML
    - Missing speed mode or characteristic
    - Values that violate the table's consistency rules
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


class InvalidArgumentError(TimingError):
    """Raised for malformed or out-of-range user input."""


class NoMatchingSpeedModeError(TimingError):
    """Raised when a bus frequency falls outside every speed mode window."""

    def __init__(self, frequency: int, details: Optional[dict[str, Any]] = None):
        details = details or {}
        details["frequency"] = frequency
        message = f"No I2C speed mode matches a bus frequency of {frequency} Hz"
        super().__init__(message=message, details=details)
        self.frequency = frequency


class NoValidTimingError(TimingError):
    """Raised when no SCL low/high pair satisfies the timing constraints."""

    def __init__(
        self,
        clock_src_freq: int,
        speed: str,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["clock_src_freq"] = clock_src_freq
        details["speed"] = speed
        message = (
            f"No valid timing found for a {clock_src_freq} Hz source clock "
            f"in {speed} mode"
        )
        super().__init__(message=message, details=details)
        self.clock_src_freq = clock_src_freq
        self.speed = speed


class FieldRangeError(TimingError, ValueError):
    """Raised when a register field value does not fit its bit width.

    Examples:
    - prescaler of 16 for the 4-bit PRESC field
    - negative SCL low period
    """

    def __init__(
        self,
        field: str,
        value: int,
        width: int,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Value {value} out of range for {width}-bit field {field}"
        super().__init__(message=message, details=details)
        self.field = field
        self.value = value
        self.width = width
