"""
HR Recruitment Portal - Main FastAPI application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from hrportal.core.config import settings
from hrportal.core.database import init_db
from hrportal.core.logging_config import configure_logging
from hrportal.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    setup_exception_handlers,
)
from hrportal.auth.router import router as auth_router
from hrportal.users.router import router as users_router
from hrportal.demands.router import router as demands_router
from hrportal.candidates.router import router as candidates_router

# Configure logging
configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    logger.info("application_starting", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)

    try:
        init_db()
    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    yield

    logger.info("application_shutting_down")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Candidate search, demand tracking and user administration for HR teams",
    docs_url="/api-docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

# Add middleware
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "OK",
        "message": "Server is healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api-docs",
    }


# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(demands_router)
app.include_router(candidates_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hrportal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
