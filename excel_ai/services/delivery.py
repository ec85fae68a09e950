"""
Delivery of rendered workbooks as browser downloads
"""

import logging
from io import BytesIO
from urllib.parse import quote

from fastapi.responses import StreamingResponse

from ..core.exceptions import DeliveryError
from ..rendering.filenames import XLSX_MEDIA_TYPE, normalize_filename
from ..rendering.renderer import RenderedWorkbook

logger = logging.getLogger(__name__)


def content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names use the RFC 5987 form"""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


class DownloadDelivery:
    """Hands workbook bytes to the client as a file download"""

    def deliver(self, content: bytes, filename: str, media_type: str = XLSX_MEDIA_TYPE) -> StreamingResponse:
        if not content:
            raise DeliveryError("Workbook payload is empty", code="EMPTY_PAYLOAD")

        name = normalize_filename(filename)
        try:
            headers = {
                "Content-Disposition": content_disposition(name),
                "Content-Length": str(len(content)),
            }
            response = StreamingResponse(BytesIO(content), media_type=media_type, headers=headers)
        except (TypeError, ValueError, UnicodeError) as e:
            raise DeliveryError(f"Could not prepare download for {name!r}: {e}") from e

        logger.info(f"Delivering {name} ({len(content)} bytes)")
        return response

    def deliver_workbook(self, workbook: RenderedWorkbook) -> StreamingResponse:
        return self.deliver(workbook.content, workbook.filename, workbook.media_type)
