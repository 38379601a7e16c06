# workflows/api/errors.py

from django.conf import settings
from rest_framework.response import Response

from workflows.services.exceptions import StorageError, WorkflowError

GENERIC_STORAGE_MESSAGE = "The record could not be saved. Please try again later."


def error_response(*, code: str, message: str, http_status: int):
    """
    Canonical API error response.
    """
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def workflow_error_response(exc: WorkflowError):
    message = str(exc)
    if isinstance(exc, StorageError) and not getattr(
        settings, "WORKFLOW_EXPOSE_STORAGE_ERRORS", True
    ):
        message = GENERIC_STORAGE_MESSAGE

    return error_response(
        code=exc.code,
        message=message,
        http_status=exc.http_status,
    )
