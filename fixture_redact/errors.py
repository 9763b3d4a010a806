"""Error types for fixture redaction.

The replacement engine itself raises nothing under normal operation; these
errors cover the surrounding layers (credential resolution, input selection
and profile loading).
"""


class RedactionError(Exception):
    """Base exception for all fixture redaction errors.

    Provides structured error information for logging.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        """Initialize the redaction error.

        Args:
            message: Human-readable error message.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(
        self,
    ) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class UnexpectedSecurityValueError(RedactionError):
    """Security configuration carries no credential value to resolve."""

    def __init__(self, security_id: str) -> None:
        """Initialize the error.

        Args:
            security_id: Identifier of the offending security scheme.
        """
        self.security_id = security_id
        super().__init__(
            f"Unexpected security value for scheme '{security_id}'",
            details={"security_id": security_id},
        )


class InputValueError(RedactionError):
    """Input property selected for hiding is missing or not primitive."""

    def __init__(self, message: str, accessor: str) -> None:
        """Initialize the error.

        Args:
            message: Error message.
            accessor: Dotted accessor that failed.
        """
        self.accessor = accessor
        super().__init__(message, details={"accessor": accessor})


class ProfileValidationError(RedactionError):
    """Raised when a redaction profile fails to load or validate."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the profile that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(
            f"Validation failed for {file_path}: {len(errors)} errors",
            details={"file_path": file_path, "error_count": len(errors)},
        )
