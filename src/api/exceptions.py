"""
API error handling.

Domain errors are turned into inline error payloads of the form
{"error": "<code>", "message": "<text>"} instead of server errors.
"""

import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from src.accounts.exceptions import DuplicateUser, InvalidCredentials, UserNotFound
from src.compositions.exceptions import CompositionNotFound
from src.generation.exceptions import GenerationFailed, MissingCredential
from src.store.exceptions import StoreCorrupt

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DuplicateUser: ("duplicate_user", status.HTTP_409_CONFLICT),
    InvalidCredentials: ("invalid_credentials", status.HTTP_401_UNAUTHORIZED),
    UserNotFound: ("user_not_found", status.HTTP_404_NOT_FOUND),
    CompositionNotFound: ("not_found", status.HTTP_404_NOT_FOUND),
    MissingCredential: ("missing_credential", status.HTTP_503_SERVICE_UNAVAILABLE),
    GenerationFailed: ("generation_failed", status.HTTP_502_BAD_GATEWAY),
    StoreCorrupt: ("store_corrupt", status.HTTP_500_INTERNAL_SERVER_ERROR),
}


def error_response(code: str, message: str, status_code: int) -> Response:
    return Response({"error": code, "message": message}, status=status_code)


def api_exception_handler(exc, context):
    """DRF exception handler that also understands domain errors."""
    if isinstance(exc, ValidationError):
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return Response(
            {"error": "validation_error", "message": "Invalid request", "fields": errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    for exc_type, (code, status_code) in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            if status_code >= 500:
                logger.error(f"{type(exc).__name__}: {exc}")
            return error_response(code, str(exc), status_code)

    return exception_handler(exc, context)
