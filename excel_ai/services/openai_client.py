"""
OpenAI client construction
OpenAI directly, or any OpenAI-compatible endpoint such as OpenRouter
"""

import logging
from typing import Optional

import openai

from ..core.config import settings

logger = logging.getLogger(__name__)


def create_openai_client() -> Optional[openai.AsyncOpenAI]:
    """Build an async client from settings, or None without credentials"""
    if settings.OPENAI_API_KEY:
        logger.info("OpenAI client initialized")
        return openai.AsyncOpenAI(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.OPENAI_TIMEOUT,
            max_retries=0,
        )

    if settings.OPENROUTER_API_KEY:
        logger.info("OpenRouter client initialized")
        return openai.AsyncOpenAI(
            api_key=settings.OPENROUTER_API_KEY,
            base_url=settings.OPENROUTER_BASE_URL,
            timeout=settings.OPENAI_TIMEOUT,
            max_retries=0,
            default_headers={"X-Title": settings.APP_NAME},
        )

    logger.warning("No OpenAI or OpenRouter API key configured")
    return None
