# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Error Taxonomy and Global Error Handler
Defines the render error classes and converts them into structured
JSON error responses. Registered on the FastAPI app in main.py.

  ValidationError         malformed request body               → 422
  ClientSafetyError       item/height ceilings, unsafe URLs     → 422
  TransientResourceError  one image failed; never reaches here
  InternalRenderError     anything else, generic message        → 500
"""

from __future__ import annotations

import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from tierlist.utils.logger import get_logger

log = get_logger(__name__)

GENERIC_INTERNAL_MESSAGE = "An internal error occurred while generating the tier list."


class ClientSafetyError(ValueError):
    """Caller-correctable safety violation. The message is safe to return."""
    code = "CLIENT_SAFETY_ERROR"


class TooManyItemsError(ClientSafetyError):
    code = "TOO_MANY_ITEMS"


class CanvasTooTallError(ClientSafetyError):
    code = "CANVAS_TOO_TALL"


class UnsafeResourceError(ClientSafetyError):
    """Raised when an image URL points somewhere the renderer must not fetch."""
    code = "UNSAFE_RESOURCE"

    def __init__(self, message: str, address: Optional[str] = None) -> None:
        super().__init__(message)
        self.address = address


class InvalidUrlSchemeError(UnsafeResourceError):
    code = "INVALID_URL_SCHEME"


class TransientResourceError(RuntimeError):
    """One image could not be resolved, fetched or decoded. Item-level only."""


class InternalRenderError(RuntimeError):
    """Raised when rendering fails for a reason the caller cannot fix."""


def _error_body(code: str, message: str, detail: str | None = None) -> dict:
    body = {"error": {"code": code, "message": message}}
    if detail:
        body["error"]["detail"] = detail
    return body


def register_error_handlers(app: FastAPI) -> None:
    """
    Register all global exception handlers on the FastAPI application.
    Call this in main.py after creating the app instance.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        req: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Rejected input, not a system fault
        log.info("request_validation_error", path=str(req.url), error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                code="VALIDATION_ERROR",
                message=f"Validation Error: {exc}",
            ),
        )

    @app.exception_handler(ValidationError)
    async def model_validation_handler(
        req: Request, exc: ValidationError
    ) -> JSONResponse:
        log.info("model_validation_error", path=str(req.url), error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                code="VALIDATION_ERROR",
                message=f"Validation Error: {exc}",
            ),
        )

    @app.exception_handler(ClientSafetyError)
    async def client_safety_handler(
        req: Request, exc: ClientSafetyError
    ) -> JSONResponse:
        log.warning(
            "client_error",
            path=str(req.url),
            code=exc.code,
            error=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(code=exc.code, message=str(exc)),
        )

    @app.exception_handler(InternalRenderError)
    async def internal_render_handler(
        req: Request, exc: InternalRenderError
    ) -> JSONResponse:
        # Full detail was already logged by the pipeline
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                code="INTERNAL_ERROR",
                message=GENERIC_INTERNAL_MESSAGE,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_handler(req: Request, exc: Exception) -> JSONResponse:
        tb = traceback.format_exc()
        log.error(
            "unhandled_exception",
            path=str(req.url),
            error=str(exc),
            exc_type=type(exc).__name__,
            traceback=tb,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                code="INTERNAL_ERROR",
                message=GENERIC_INTERNAL_MESSAGE,
            ),
        )
