from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MissingFieldError(ValueError):
    """A required text field was absent or blank; reported to the client as 400."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


async def missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
    logger.info("Rejected %s %s: %s (field=%s)", request.method, request.url.path, exc.message, exc.field)
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed body on %s %s", request.method, request.url.path)
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": details})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingFieldError, missing_field_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
