"""Exception handlers that turn failures into JSON error responses."""

from typing import Dict, Type

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from loan_decision.domain.exceptions import (
    DomainException,
    NoValidLoanException,
    PersonalCodeParseException,
)
from loan_decision.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

PARSE_ERROR_MESSAGE = "An unexpected error occurred while reading the personal code."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."

# Most specific first; anything else derived from DomainException is a 400
STATUS_BY_EXCEPTION: Dict[Type[DomainException], int] = {
    NoValidLoanException: 404,
    PersonalCodeParseException: 500,
    DomainException: 400,
}


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponseSchema(error=code, message=message, request_id=get_request_id())
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Map a domain exception to its status code."""
    status_code = next(
        status
        for exc_type, status in STATUS_BY_EXCEPTION.items()
        if isinstance(exc, exc_type)
    )

    if isinstance(exc, PersonalCodeParseException):
        # The code suffix stays in the logs and out of the response
        logger.error("personal_code_parse_error", code=exc.code, message=exc.message)
        return _error_response(status_code, exc.code, PARSE_ERROR_MESSAGE)

    logger.info("domain_rejection", code=exc.code, message=exc.message, status_code=status_code)
    return _error_response(status_code, exc.code, exc.message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("unhandled_exception", error_type=type(exc).__name__)
    return _error_response(500, "INTERNAL_ERROR", INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the exception handlers with the FastAPI app."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
