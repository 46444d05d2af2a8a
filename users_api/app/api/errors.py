"""
Translation of failures into HTTP responses.

``ERROR_STATUS`` maps each service error kind to a status code.  Field
validation failures, whether reported by ``core.validation`` or by
FastAPI's own request parsing (malformed dates, non-UUID ids, invalid
JSON), are client errors and map to 400.

Every failure is answered with an ``ErrorMessageResponse`` and logged
at WARNING level.
"""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.app.core.exceptions import ErrorKind, RequestValidationFailed, UserServiceError
from users_api.app.schemas.error import ErrorMessageResponse, FieldViolation

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.AGE_RESTRICTION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

# Location prefixes FastAPI puts in front of the offending field name.
_LOCATION_SOURCES = {"body", "query", "path"}


def error_response(
    request: Request,
    status_code: int,
    message: str,
    violations: Optional[List[FieldViolation]] = None,
) -> JSONResponse:
    body = ErrorMessageResponse(
        error=message,
        path=request.url.path,
        method=request.method,
        violations=violations or [],
    )
    logger.warning("%s", body)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_user_service_error(request: Request, exc: UserServiceError) -> JSONResponse:
    return error_response(request, ERROR_STATUS[exc.kind], exc.message)


async def handle_request_validation_failed(
    request: Request, exc: RequestValidationFailed
) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, str(exc), exc.violations)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report parser errors in the same shape as field violations."""
    violations = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATION_SOURCES]
        violations.append(FieldViolation(field=".".join(loc) or "request", message=err.get("msg", "")))
    message = "; ".join(f"{v.field}: {v.message}" for v in violations) or "Invalid request"
    return error_response(request, status.HTTP_400_BAD_REQUEST, message, violations)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserServiceError, handle_user_service_error)
    app.add_exception_handler(RequestValidationFailed, handle_request_validation_failed)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
