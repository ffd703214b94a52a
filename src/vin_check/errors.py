"""
Exceptions for the outer surfaces of vin_check.

The core checksum/validation/extraction functions never raise; these are
used by configuration loading and the command line interface only.
"""

from typing import Any, Dict, Optional


class VINCheckError(Exception):
    """
    Base exception for vin_check errors.

    Provides structured error information with error codes for programmatic handling.
    """

    def __init__(self, message: str, error_code: str = "VIN_CHECK_ERROR", context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(VINCheckError):
    """Raised when configuration is missing, malformed or invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None, expected: Optional[str] = None):
        super().__init__(
            message=f"Configuration error: {message}",
            error_code="CONFIG_ERROR",
            context={"config_key": config_key, "expected": expected}
        )
        self.config_key = config_key
        self.expected = expected


class InputReadError(VINCheckError):
    """Raised when an input text file cannot be read."""

    def __init__(self, file_path: str, reason: str = "Unknown error"):
        super().__init__(
            message=f"Failed to read input: {file_path}. Reason: {reason}",
            error_code="INPUT_READ_ERROR",
            context={"file_path": file_path, "reason": reason}
        )
        self.file_path = file_path
        self.reason = reason
