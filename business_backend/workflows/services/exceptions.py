# workflows/services/exceptions.py

"""
WORKFLOW SERVICE ERRORS

Centralized domain errors for the status-transition engine.

Every error carries:
- code: stable machine-readable identifier for UI layers
- http_status: the status the API layer responds with
"""

from rest_framework import status


class WorkflowError(Exception):
    """Base exception for all transition engine failures."""

    code = "WORKFLOW_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST


class RecordNotFoundError(WorkflowError):
    """Raised when the record does not exist for the given store."""

    code = "RECORD_NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND


class IllegalTransitionError(WorkflowError):
    """Raised when the requested status is not reachable from the current one."""

    code = "ILLEGAL_TRANSITION"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Cannot transition from {from_status} to {to_status}")


class NoChangesError(WorkflowError):
    """Raised when an update carries neither a status nor field edits."""

    code = "NO_CHANGES"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "No changes supplied"):
        super().__init__(message)


class StorageError(WorkflowError):
    """Raised when loading or writing the record fails."""

    code = "STORAGE_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
