"""
Natural-language Excel generation endpoints
"""

import base64
import logging
from functools import lru_cache
from typing import Dict, Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from ...services.excel_pipeline import ExcelPipeline
from ...services.speech_service import OpenAITranscriber, SpeechTranscriber, append_transcript
from ...structure.excel_schema import ExcelSchema

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateRequest(BaseModel):
    """Natural-language request model"""
    prompt: str = Field(..., min_length=1, description="Request in Sinhala or English")


@lru_cache(maxsize=1)
def get_pipeline() -> ExcelPipeline:
    return ExcelPipeline()


@lru_cache(maxsize=1)
def get_transcriber() -> SpeechTranscriber:
    return OpenAITranscriber()


@router.post("/generate")
async def generate_excel(
    request: GenerateRequest,
    pipeline: ExcelPipeline = Depends(get_pipeline),
) -> Dict[str, Any]:
    """
    Generate a workbook from a natural-language request

    The response carries the schema so the client can ask for the file
    again through /render without another model call.
    """
    result = await pipeline.generate(request.prompt)
    workbook = result.workbook

    return {
        "status": "success",
        "generation_id": result.generation_id,
        "filename": workbook.filename,
        "summary": result.schema.summary,
        "schema": result.schema.to_response(),
        "sheets": workbook.sheet_names,
        "warnings": [warning.to_dict() for warning in workbook.warnings],
        "failed_sheets": workbook.failed_sheets,
        "media_type": workbook.media_type,
        "size": workbook.size,
        "file_content": base64.b64encode(workbook.content).decode("ascii"),
    }


@router.post("/generate/download")
async def generate_and_download_excel(
    request: GenerateRequest,
    pipeline: ExcelPipeline = Depends(get_pipeline),
) -> StreamingResponse:
    """Generate a workbook and return it directly as a download"""
    result = await pipeline.generate(request.prompt)
    response = pipeline.deliver(result.workbook)
    response.headers["X-Generation-Id"] = result.generation_id
    return response


@router.post("/render")
def render_excel(
    schema: ExcelSchema,
    pipeline: ExcelPipeline = Depends(get_pipeline),
) -> StreamingResponse:
    """
    Render a previously generated schema again (download again)

    Sync handler: FastAPI runs it in the threadpool.
    """
    workbook = pipeline.render(schema)
    return pipeline.deliver(workbook)


@router.post("/transcribe")
async def transcribe_prompt(
    file: UploadFile = File(...),
    existing_text: Optional[str] = Form(default=None),
    transcriber: SpeechTranscriber = Depends(get_transcriber),
) -> Dict[str, Any]:
    """Turn a voice recording into prompt text"""
    audio = await file.read()
    text = await transcriber.transcribe(audio, file.filename, file.content_type)
    return {
        "text": text,
        "prompt": append_transcript(existing_text, text),
    }
