"""Exception handlers mapping application errors onto HTTP responses."""

import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import ErrorKind, NoteVaultError
from ..core.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_CREDENTIAL_MESSAGE = "Invalid or expired token"
GENERIC_INTERNAL_MESSAGE = "Something went wrong"

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.MISSING_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MALFORMED_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_SIGNATURE_OR_MALFORMED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.WRONG_ISSUER: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ACCOUNT_NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_LOGIN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND_OR_FORBIDDEN: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_unmapped = set(ErrorKind) - STATUS_BY_KIND.keys()
if _unmapped:
    raise RuntimeError(f"No HTTP status for error kinds: {sorted(k.value for k in _unmapped)}")

ERROR_LABELS: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Validation Error",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}

# Credential failures whose own message is safe to show the caller
_VERBATIM_CREDENTIAL_KINDS = frozenset(
    {ErrorKind.MISSING_CREDENTIAL, ErrorKind.MALFORMED_CREDENTIAL, ErrorKind.INVALID_LOGIN}
)


def public_message(exc: NoteVaultError) -> str:
    """Message shown to the caller for an application error."""
    if exc.kind is ErrorKind.INTERNAL:
        return GENERIC_INTERNAL_MESSAGE
    if exc.is_credential_error and exc.kind not in _VERBATIM_CREDENTIAL_KINDS:
        # never tell the caller whether signature, issuer, expiry or account failed
        return GENERIC_CREDENTIAL_MESSAGE
    return exc.message


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def handle_notevault_error(request: Request, exc: NoteVaultError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    if exc.kind is ErrorKind.INTERNAL:
        logger.error(f"Internal error on {request.url.path}: {exc.message}", exc_info=exc)

    body = ErrorResponse(
        error=ERROR_LABELS[status_code],
        message=public_message(exc),
        details=exc.details if exc.kind is ErrorKind.VALIDATION_ERROR else None,
    )
    return _error_response(status_code, body)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    message = fields[0]["message"] if fields else "Invalid request"
    body = ErrorResponse(
        error=ERROR_LABELS[status.HTTP_400_BAD_REQUEST],
        message=message,
        details={"fields": fields},
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}", exc_info=exc
    )
    body = ErrorResponse(
        error=ERROR_LABELS[status.HTTP_500_INTERNAL_SERVER_ERROR],
        message=GENERIC_INTERNAL_MESSAGE,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoteVaultError, handle_notevault_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
