"""
Application configuration using Pydantic settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    APP_NAME: str = Field(default="Sinhala Excel AI")

    # API Configuration
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_PREFIX: str = Field(default="/api/v1")

    # OpenAI Configuration (schema generation + speech transcription)
    OPENAI_API_KEY: Optional[str] = Field(default=None)
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OPENAI_BASE_URL: Optional[str] = Field(default=None)
    OPENAI_TIMEOUT: float = Field(default=120.0)  # seconds

    # OpenRouter Configuration (used when no OpenAI key is set)
    OPENROUTER_API_KEY: Optional[str] = Field(default=None)
    OPENROUTER_BASE_URL: str = Field(default="https://openrouter.ai/api/v1")

    # CORS
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "*"]
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: Optional[str] = Field(default=None)

    # AI Processing
    MAX_TOKENS: int = Field(default=8000)
    TEMPERATURE: float = Field(default=0.4)

    # Speech transcription
    TRANSCRIPTION_MODEL: str = Field(default="whisper-1")
    TRANSCRIPTION_LANGUAGE: Optional[str] = Field(default="si")
    MAX_AUDIO_UPLOAD_SIZE: int = Field(default=26214400)  # 25MB

    # Workbook rendering
    WORKBOOK_CREATOR: str = Field(default="Sinhala Excel AI")
    DASHBOARD_ZOOM: int = Field(default=90)
    DEFAULT_COLUMN_WIDTH: float = Field(default=20.0)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()
