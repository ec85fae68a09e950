"""
Excel generation pipeline
Coordinates generate -> render -> deliver for one request
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fastapi.responses import StreamingResponse

from ..core.logging_config import log_performance_metrics
from ..rendering.renderer import RenderedWorkbook, SpreadsheetRenderer
from ..structure.excel_schema import ExcelSchema
from .delivery import DownloadDelivery
from .schema_generator import OpenAISchemaGenerator, SchemaGenerator

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Schema produced for a prompt and the workbook rendered from it"""

    generation_id: str
    schema: ExcelSchema
    workbook: RenderedWorkbook


class ExcelPipeline:
    """Sequential three-stage pipeline; nothing is cached between requests"""

    def __init__(
        self,
        generator: Optional[SchemaGenerator] = None,
        renderer: Optional[SpreadsheetRenderer] = None,
        delivery: Optional[DownloadDelivery] = None,
    ):
        self.generator = generator or OpenAISchemaGenerator()
        self.renderer = renderer or SpreadsheetRenderer()
        self.delivery = delivery or DownloadDelivery()

    async def generate(self, prompt: str) -> GenerationResult:
        """Generate a schema for the prompt and render it"""
        start_time = datetime.now()
        generation_id = f"gen_{start_time.strftime('%Y%m%d_%H%M%S_%f')}"
        logger.info(f"Starting generation {generation_id}")

        schema = await self.generator.generate(prompt)
        logger.info(f"Generation {generation_id}: {len(schema.sheets)} sheet(s) designed")

        # openpyxl rendering is blocking; keep it off the event loop
        loop = asyncio.get_running_loop()
        workbook = await loop.run_in_executor(None, self.render, schema)

        duration = (datetime.now() - start_time).total_seconds()
        log_performance_metrics(
            operation="generate_workbook",
            duration=duration,
            generation_id=generation_id,
            sheets=len(workbook.sheet_names),
        )
        logger.info(f"Generation {generation_id} completed in {duration:.2f}s")
        return GenerationResult(generation_id=generation_id, schema=schema, workbook=workbook)

    def render(self, schema: ExcelSchema) -> RenderedWorkbook:
        """Render an already generated schema; used for repeat downloads"""
        start_time = time.time()
        workbook = self.renderer.render(schema)

        if workbook.warnings:
            logger.warning(f"{len(workbook.warnings)} merge range(s) skipped in {workbook.filename}")
        if workbook.failed_sheets:
            logger.warning(f"{len(workbook.failed_sheets)} sheet(s) left out of {workbook.filename}")

        logger.info(f"Rendered {workbook.filename} in {time.time() - start_time:.3f}s")
        return workbook

    def deliver(self, workbook: RenderedWorkbook) -> StreamingResponse:
        return self.delivery.deliver_workbook(workbook)
