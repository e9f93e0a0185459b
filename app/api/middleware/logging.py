# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation): 
# This file keeps a diary of every request made to CigarMap, recording what was asked for,
# how long it took to respond, and if there were any problems.
# 🧪 Purpose (Technical Summary): 
# Request logging middleware: assigns or propagates an X-Request-ID, binds it to the logging
# context for the whole request, and writes structured request/response/error records with timing.
# 🔗 Dependencies: 
# FastAPI, starlette, app.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From: 
# app.main.py (middleware registration)

import logging
import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context
from . import should_exclude_path

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request id correlation (header in, header out, log context)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)

        if should_exclude_path("logging", request.url.path):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        start_time = time.time()
        with log_context(request_id=request_id):
            logger.info(
                f"{request.method} {request.url.path}",
                extra={"event_type": "http_request", **self._request_data(request)}
            )
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} failed: {e}",
                    exc_info=True,
                    extra={
                        "event_type": "http_error",
                        "processing_time_ms": self._elapsed_ms(start_time),
                        "error_type": type(e).__name__,
                    }
                )
                raise

            elapsed_ms = self._elapsed_ms(start_time)
            level = logging.WARNING if elapsed_ms / 1000 > self.slow_request_threshold else logging.INFO
            logger.log(
                level,
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)",
                extra={
                    "event_type": "http_response",
                    "status_code": response.status_code,
                    "processing_time_ms": elapsed_ms,
                }
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            return request_id

        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    @staticmethod
    def _request_data(request: Request) -> Dict[str, Any]:
        return {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
            "user_agent": request.headers.get("user-agent", ""),
        }

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.time() - start_time) * 1000, 2)
