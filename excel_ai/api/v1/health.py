"""
Health check endpoints
"""
from fastapi import APIRouter
import psutil
import platform
from datetime import datetime

from ...core.config import settings

router = APIRouter()

SERVICE_NAME = "excel-ai-service"
SERVICE_VERSION = "1.0.0"


@router.get("/status")
async def health_status():
    """Basic health check"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "environment": settings.ENVIRONMENT
    }


@router.get("/detailed")
async def detailed_health():
    """Detailed health check with system info"""
    model_configured = bool(settings.OPENAI_API_KEY or settings.OPENROUTER_API_KEY)

    memory = psutil.virtual_memory()

    return {
        "status": "healthy" if model_configured else "degraded",
        "timestamp": datetime.utcnow().isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "environment": settings.ENVIRONMENT,
        "components": {
            "schema_generator": "configured" if model_configured else "not configured",
            "model": settings.OPENAI_MODEL,
            "transcription_model": settings.TRANSCRIPTION_MODEL,
        },
        "system": {
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "cpu_usage_percent": psutil.cpu_percent(interval=None),
            "memory": {
                "total_mb": round(memory.total / 1024 / 1024),
                "available_mb": round(memory.available / 1024 / 1024),
                "percent": memory.percent,
            },
        },
    }
