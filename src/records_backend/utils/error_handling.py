"""
Centralized error handling and logging
Every request gets a trace id; errors are logged as structured JSON entries
and answered with plain text, except request validation errors which carry
a JSON list of field problems.
"""

import json
import logging
import traceback
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-ID"


class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'key', 'secret', 'authorization',
        'auth', 'bearer', 'credential', 'cookie'
    ]
    MAX_BODY_LOG_SIZE = 5000

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Any) -> Any:
        """Recursively redact sensitive keys and truncate large strings"""
        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(key) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        return data


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[BaseException] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log a structured error entry and return its trace id"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            headers = dict(request.headers)
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "headers": ErrorHandlingConfig.sanitize_data(headers),
                "client_ip": request.client.host if request.client else None,
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
            }
            if exception.__cause__ is not None:
                log_entry["exception"]["cause"] = repr(exception.__cause__)
            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assign a trace id to every request and echo it in the response"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response


def _captured_body(exc: Exception) -> Optional[Any]:
    body = getattr(exc, "body", None)
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return "DECODE_ERROR"
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Answer HTTP exceptions with their detail as plain text"""
    if exc.status_code >= 500:
        StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            extra_context={"status_code": exc.status_code},
        )
    else:
        logger.info(f"HTTP {exc.status_code} {request.method} {request.url.path}: {exc.detail}")

    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body and parameter validation errors (HTTP 422)"""
    validation_details = []
    for error in exc.errors():
        validation_details.append({
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown"),
        })

    trace_id = StructuredLogger.log_error(
        "validation_error_422",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        exception=exc,
        extra_context={
            "validation_errors": validation_details,
            "request_body": _captured_body(exc),
        },
        include_traceback=False
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation Error",
            "message": "Request validation failed",
            "detail": validation_details,
            "error_count": len(validation_details),
            "trace_id": trace_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle everything the routes did not turn into an HTTP error"""
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {exc}",
        request=request,
        exception=exc,
        include_traceback=True
    )

    return PlainTextResponse(
        "Internal Server Error",
        status_code=500,
        headers={TRACE_HEADER: trace_id}
    )


def setup_error_handling(app):
    """Install the trace-id middleware and the exception handlers"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")
