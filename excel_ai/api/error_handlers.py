"""
Standardized error handling for the API
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from datetime import datetime
import traceback
from typing import Dict, Any, Optional
import logging

from ..core.exceptions import ExcelServiceError, ErrorCategory

logger = logging.getLogger(__name__)


CATEGORY_STATUS = {
    ErrorCategory.GENERATION: status.HTTP_502_BAD_GATEWAY,
    ErrorCategory.RENDER: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCategory.DELIVERY: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCategory.TRANSCRIPTION: status.HTTP_502_BAD_GATEWAY,
}

CODE_STATUS = {
    "EMPTY_PROMPT": status.HTTP_400_BAD_REQUEST,
    "EMPTY_AUDIO": status.HTTP_400_BAD_REQUEST,
    "AUDIO_TOO_LARGE": status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    "MODEL_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    kind: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Create standardized error response."""
    error_response = {
        "error": {
            "code": error_code,
            "kind": kind,
            "message": message,
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "details": details or {}
        }
    }
    return JSONResponse(status_code=status_code, content=error_response)


async def excel_service_error_handler(request: Request, exc: ExcelServiceError) -> JSONResponse:
    """Handle generation, render, delivery and transcription errors."""
    status_code = CODE_STATUS.get(exc.code, CATEGORY_STATUS.get(exc.category, 500))
    logger.error(f"{exc.category.value} error [{exc.code}] on {request.url.path}: {exc.message}")

    details = dict(exc.details)
    details["reason"] = exc.message
    return create_error_response(
        error_code=exc.code,
        message=exc.user_message,
        status_code=status_code,
        kind=exc.category.value,
        details=details,
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors."""
    errors = exc.errors() if hasattr(exc, "errors") else []
    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Invalid request data",
        status_code=status.HTTP_400_BAD_REQUEST,
        kind="validation",
        details={"errors": [
            {"loc": list(error.get("loc", [])), "msg": error.get("msg")} for error in errors
        ]},
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors."""
    logger.error(f"Unhandled error: {str(exc)}\n{traceback.format_exc()}")

    if request.app.debug:
        message = str(exc)
        details = {"traceback": traceback.format_exc()}
    else:
        message = "Internal server error"
        details = {}

    return create_error_response(
        error_code="INTERNAL_ERROR",
        message=message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        kind="internal",
        details=details,
    )
