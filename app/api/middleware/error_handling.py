# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation): 
# This file catches errors that happen in CigarMap and turns them into friendly, consistent error
# messages, like translating technical problems into helpful responses.
# 🧪 Purpose (Technical Summary): 
# Exception handlers rendering every failure as {"error": {code, message, details, timestamp,
# request_id}}: CigarMap domain exceptions, request and model validation errors, HTTP errors and
# unhandled exceptions.
# 🔗 Dependencies: 
# FastAPI, pydantic, app.shared.core.exceptions, app.shared.config.settings
# 🔄 Connected Modules / Calls From: 
# app.main.py (exception handler registration)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import CigarMapException

logger = logging.getLogger(__name__)


def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None
) -> JSONResponse:
    """
    Create a standardized error response
    
    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID
        
    Returns:
        JSON error response
    """
    response = JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": error_code,
                "message": message,
                "details": details or {},
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": request_id,
            }
        }
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    response.headers["X-Error-Code"] = error_code
    return response


def handle_validation_error(exc, request_id: Optional[str] = None) -> JSONResponse:
    """
    Handle request and model validation errors
    
    Args:
        exc: FastAPI RequestValidationError or pydantic ValidationError
        request_id: Request correlation ID
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        }
        for error in exc.errors()
    ]
    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details={"validation_errors": validation_errors},
        request_id=request_id
    )


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""

    @app.exception_handler(CigarMapException)
    async def cigarmap_exception_handler(request: Request, exc: CigarMapException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", extra={"details": exc.details})
        else:
            logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return create_error_response(
            exc.error_code, exc.message, exc.status_code, exc.details, _request_id(request)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return handle_validation_error(exc, _request_id(request))

    @app.exception_handler(PydanticValidationError)
    async def model_validation_handler(request: Request, exc: PydanticValidationError) -> JSONResponse:
        return handle_validation_error(exc, _request_id(request))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return create_error_response(
                "NOT_FOUND",
                "The requested resource was not found",
                404,
                {"path": request.url.path},
                _request_id(request)
            )
        return create_error_response(
            f"HTTP_{exc.status_code}", str(exc.detail), exc.status_code, None, _request_id(request)
        )

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return create_error_response(
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            500,
            {"error_type": type(exc).__name__} if get_settings().DEBUG else {},
            _request_id(request)
        )
