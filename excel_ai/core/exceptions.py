"""
Custom exceptions for the Excel generation service
"""
from typing import Optional, Dict, Any
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels"""
    CRITICAL = "critical"    # no artifact can be produced
    HIGH = "high"            # request failed
    MEDIUM = "medium"        # part of the artifact lost
    WARNING = "warning"      # recovered locally


class ErrorCategory(Enum):
    """Which pipeline stage failed"""
    GENERATION = "generation"        # could not understand the request
    RENDER = "render"                # could not build the file
    DELIVERY = "delivery"            # could not save the file
    TRANSCRIPTION = "transcription"  # could not transcribe audio


class ExcelServiceError(Exception):
    """Base exception for the Excel generation service"""
    def __init__(
        self,
        message: str,
        code: str = None,
        details: dict = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        category: ErrorCategory = ErrorCategory.RENDER,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "GENERIC_ERROR"
        self.details = details or {}
        self.severity = severity
        self.category = category
        self.user_message = user_message or self._generate_user_message()

    def _generate_user_message(self) -> str:
        """User-facing message for the error category"""
        user_messages = {
            ErrorCategory.GENERATION: "Could not understand the request. Please rephrase it and try again.",
            ErrorCategory.RENDER: "Could not build the Excel file from the generated structure.",
            ErrorCategory.DELIVERY: "Could not save the Excel file. Please try downloading it again.",
            ErrorCategory.TRANSCRIPTION: "Could not transcribe the recording. Please try again or type your request.",
        }
        return user_messages.get(self.category, "Something went wrong while creating the Excel file.")

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable form used by the API error handlers"""
        return {
            "code": self.code,
            "kind": self.category.value,
            "message": self.user_message,
            "detail": self.message,
            "severity": self.severity.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class GenerationError(ExcelServiceError):
    """The schema generator produced no usable document"""
    def __init__(self, message: str, code: str = "GENERATION_FAILED", details: dict = None):
        super().__init__(
            message,
            code=code,
            details=details,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.GENERATION,
        )


class RenderError(ExcelServiceError):
    """A workbook could not be produced from the document"""
    def __init__(self, message: str, code: str = "RENDER_FAILED", details: dict = None):
        super().__init__(
            message,
            code=code,
            details=details,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.RENDER,
        )


class DeliveryError(ExcelServiceError):
    """The rendered workbook could not be handed to the user"""
    def __init__(self, message: str, code: str = "DELIVERY_FAILED", details: dict = None):
        super().__init__(
            message,
            code=code,
            details=details,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.DELIVERY,
        )


class TranscriptionError(ExcelServiceError):
    """Speech could not be turned into prompt text"""
    def __init__(self, message: str, code: str = "TRANSCRIPTION_FAILED", details: dict = None):
        super().__init__(
            message,
            code=code,
            details=details,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.TRANSCRIPTION,
        )
