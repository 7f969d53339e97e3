"""
Custom middleware and exception handlers for request processing
"""
import time
import uuid
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import structlog

from hrportal.core.exceptions import PortalException, error_body

logger = structlog.get_logger()

INTERNAL_ERROR_BODY = {
    "success": False,
    "message": "Internal server error",
    "error": {"type": "InternalServerError", "details": {}},
}


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Add correlation ID to requests for tracing"""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests and responses"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=time.time() - start_time,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=process_time,
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Last-resort handler for exceptions that escaped the routers"""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except PortalException as e:
            return JSONResponse(status_code=e.status_code, content=error_body(e))
        except Exception as e:
            logger.exception("unhandled_exception", error=str(e))
            return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers"""

    @app.exception_handler(PortalException)
    async def portal_exception_handler(request: Request, exc: PortalException):
        logger.warning(
            "request_rejected",
            type=exc.__class__.__name__,
            message=exc.message,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("database_error", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)
