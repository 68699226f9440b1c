"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.errors import (
    NOT_FOUND,
    UNRESOLVED_PROFILE,
    VALIDATION_ERROR,
    DomainValidationError,
    NotFoundError,
    UnresolvedProfileError,
)
from app.schemas.error import ErrorResponse, UnresolvedProfileErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        VALIDATION_ERROR,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def unresolved_profile_error_handler(
    _request: Request, exc: UnresolvedProfileError
) -> JSONResponse:
    # Installed languages without any profile: server-side state, not a bad request
    logger.error(str(exc))
    body = UnresolvedProfileErrorResponse(
        detail=str(exc),
        code=UNRESOLVED_PROFILE,
        languages=exc.language_keys,
        project=exc.project_key,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump()
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnresolvedProfileError, unresolved_profile_error_handler)
