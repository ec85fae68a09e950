"""
Schema generator for creating Excel structures from natural language
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import openai
from pydantic import ValidationError

from ..core.config import settings
from ..core.exceptions import GenerationError
from ..core.logging_config import log_performance_metrics
from ..structure.excel_schema import ExcelSchema
from .openai_client import create_openai_client
from .prompts import SYSTEM_PROMPT, RESPONSE_FORMAT

logger = logging.getLogger(__name__)


class SchemaGenerator(ABC):
    """Turns a user prompt into a schema document"""

    @abstractmethod
    async def generate(self, prompt: str) -> ExcelSchema:
        """Return a document or raise GenerationError"""
        pass


class OpenAISchemaGenerator(SchemaGenerator):
    """Schema generation through the OpenAI chat completions API"""

    def __init__(
        self,
        client: Optional[openai.AsyncOpenAI] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self._client = client
        self.model = model or settings.OPENAI_MODEL
        self.temperature = temperature if temperature is not None else settings.TEMPERATURE
        self.max_tokens = max_tokens or settings.MAX_TOKENS

    @property
    def client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            self._client = create_openai_client()
        if self._client is None:
            raise GenerationError(
                "No model API credential is configured",
                code="MODEL_NOT_CONFIGURED",
            )
        return self._client

    async def generate(self, prompt: str) -> ExcelSchema:
        if not prompt or not prompt.strip():
            raise GenerationError("Prompt is empty", code="EMPTY_PROMPT")

        logger.info(f"Schema generation request: {prompt[:100]}...")
        start_time = time.time()

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format=RESPONSE_FORMAT,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            logger.error(f"Model call failed: {str(e)}")
            raise GenerationError(f"Model call failed: {e}", code="MODEL_UNAVAILABLE") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise GenerationError("Model returned no content", code="EMPTY_RESPONSE")

        if response.choices[0].finish_reason == "length":
            logger.warning("Model output was truncated at the token limit")

        try:
            schema = ExcelSchema.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Failed to parse model response: {content[:500]}")
            raise GenerationError(
                f"Model returned a malformed document: {e.error_count()} validation error(s)",
                code="MALFORMED_RESPONSE",
                details={"errors": [error["msg"] for error in e.errors()][:10]},
            ) from e

        log_performance_metrics(
            operation="generate_schema",
            duration=time.time() - start_time,
            model=self.model,
            sheets=len(schema.sheets),
        )
        return schema
