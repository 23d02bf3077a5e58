"""Rendering of application, validation and storage errors into JSON responses"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cashcard.errors.base import ApplicationError
from cashcard.errors.common import InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


def application_exception_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    c = {
        "error_code": exc.error_code,
        "error": exc.error,
    }
    logger.error(c)
    # Only print full traceback when in debug logging
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return JSONResponse(status_code=exc.http_code or 418, content=c)


def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # malformed bodies, query and path parameters share the envelope of ValidationError
    fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    c = {
        "error_code": ValidationError.error_code,
        "error": f"{ValidationError.error}: {', '.join(fields)}",
    }
    logger.info(c)
    return JSONResponse(status_code=ValidationError.http_code, content=c)


def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(exc)
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return JSONResponse(
        status_code=InfrastructureError.http_code,
        content={
            "error_code": InfrastructureError.error_code,
            "error": InfrastructureError.error,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)  # type: ignore[arg-type]
