"""
FastAPI application entry point for the Excel AI service
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging

from excel_ai.core.config import settings
from excel_ai.core.exceptions import ExcelServiceError
from excel_ai.core.logging_config import init_logging
from excel_ai.api import router as api_router
from excel_ai.api.error_handlers import (
    excel_service_error_handler,
    validation_error_handler,
    generic_error_handler,
)
from excel_ai.api.v1.health import SERVICE_NAME, SERVICE_VERSION

init_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events
    """
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})")
    if not (settings.OPENAI_API_KEY or settings.OPENROUTER_API_KEY):
        logger.warning("No model API key configured; /excel/generate will fail until one is set")

    yield

    logger.info(f"{settings.APP_NAME} stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Natural-language (Sinhala/English) to styled Excel workbook service",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Generation-Id"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)

app.add_exception_handler(ExcelServiceError, excel_service_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, generic_error_handler)


@app.get("/health")
async def health_check():
    """Health check endpoint for Docker and monitoring"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
