"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from campus.domain.error import (
    ConcurrentUpdateError,
    DomainError,
    DuplicateCommentError,
    DuplicateReportError,
    MissingReasonError,
    NotAuthorizedError,
    NotFoundError,
    SelfReportError,
    StoreUnavailableError,
    UnauthenticatedError,
    UserBannedError,
    ValidationError,
)

# Most specific classes first; the first isinstance match wins
ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED, "unauthenticated"),
    (UserBannedError, status.HTTP_403_FORBIDDEN, "user_banned"),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN, "not_authorized"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (DuplicateCommentError, status.HTTP_409_CONFLICT, "duplicate_comment"),
    (DuplicateReportError, status.HTTP_409_CONFLICT, "duplicate_report"),
    (SelfReportError, status.HTTP_409_CONFLICT, "self_report"),
    (MissingReasonError, status.HTTP_422_UNPROCESSABLE_ENTITY, "missing_reason"),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error"),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE, "store_unavailable"),
    (ConcurrentUpdateError, status.HTTP_503_SERVICE_UNAVAILABLE, "store_unavailable"),
]


def status_for(error: DomainError) -> tuple[int, str]:
    """Return the HTTP status and error code for a domain error."""
    for error_class, status_code, code in ERROR_STATUS:
        if isinstance(error, error_class):
            return status_code, code
    return status.HTTP_400_BAD_REQUEST, "domain_error"


def install_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on the application."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code, code = status_for(exc)
        if status_code >= 500:
            logfire.error(
                "Request failed", path=request.url.path, error=code, detail=str(exc)
            )
        else:
            logfire.info(
                "Request rejected", path=request.url.path, error=code, detail=str(exc)
            )
        return JSONResponse(
            status_code=status_code, content={"detail": str(exc), "error": code}
        )
