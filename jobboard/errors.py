"""
Exception hierarchy for the job board.

Filtering and formatting are total functions and never raise; these
exceptions cover the boundaries around them (form input, lookups,
authentication and the job repository).
"""

from typing import Dict, Optional


class JobBoardError(Exception):
    """Base class for all job board errors."""

    status_code = 500

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {"error": type(self).__name__, "message": str(self)}


class FormValidationError(JobBoardError):
    """
    Raised when submitted post-job form data is invalid.

    Attributes:
        field_errors: Mapping of form field name to a human-readable message
    """

    status_code = 400

    def __init__(self, field_errors: Dict[str, str]):
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid job posting: {fields}")

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["fields"] = self.field_errors
        return data


class JobNotFoundError(JobBoardError):
    """Raised when a job id does not resolve to a posting."""

    status_code = 404

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Job not found: {job_id}")


class AuthenticationError(JobBoardError):
    """Raised by an auth provider when credentials are rejected."""

    status_code = 401


class RepositoryError(JobBoardError):
    """Raised when the job repository cannot complete an operation."""

    status_code = 500

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)
