"""
Custom exception classes for the ECS node handlers and services.
"""
from typing import Optional, Dict, Any


class AwsApiError(Exception):
    """Exception raised when an AWS API request fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize AWS API error.

        Args:
            message: Error message
            status_code: HTTP status code, None for transport failures
            error_type: AWS error code, e.g. ClusterNotFoundException
            response_data: Decoded error body if available
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.response_data = response_data


class AwsCredentialsError(Exception):
    """Exception raised when no AWS credentials can be resolved."""


class ValidationError(Exception):
    """Exception raised for validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation if available
            value: Invalid value if available
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class NodeParameterError(ValidationError):
    """Raised for a missing, unknown or malformed node parameter."""
