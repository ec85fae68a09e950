"""
Workbook renderer
Turns a schema document into a styled .xlsx workbook in memory
"""

import logging
import re
import time
from dataclasses import dataclass, field
from datetime import datetime
from io import BytesIO
from typing import Dict, List, Optional

from openpyxl import Workbook
from openpyxl.cell.cell import MergedCell, ILLEGAL_CHARACTERS_RE, TYPE_STRING
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..core.config import settings
from ..core.exceptions import RenderError
from ..core.logging_config import log_performance_metrics
from ..structure.excel_schema import ExcelSchema, SheetSchema, SheetType
from .cell_values import classify_cell_text
from .configs import AlternateRowConfig
from .filenames import XLSX_MEDIA_TYPE, normalize_filename
from .merge_handler import MergeHandler, MergeOutcome, MergeRangeWarning
from .style_builder import StyleBuilder
from .style_manager import StyleManager

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 31
_INVALID_TITLE_CHARS = re.compile(r"[\\*?:/\[\]]")


@dataclass
class RenderedWorkbook:
    """Binary workbook plus what happened while building it"""

    content: bytes
    filename: str
    sheet_names: List[str]
    warnings: List[MergeRangeWarning] = field(default_factory=list)
    failed_sheets: List[Dict[str, str]] = field(default_factory=list)
    media_type: str = XLSX_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


class SpreadsheetRenderer:
    """Deterministic schema document -> styled workbook mapping"""

    def __init__(
        self,
        style_manager: Optional[StyleManager] = None,
        creator: Optional[str] = None,
        dashboard_zoom: Optional[int] = None,
        default_column_width: Optional[float] = None,
    ):
        self.styles = style_manager or StyleManager()
        self.style_builder = StyleBuilder()
        self.merge_handler = MergeHandler()
        self.creator = creator or settings.WORKBOOK_CREATOR
        self.dashboard_zoom = dashboard_zoom or settings.DASHBOARD_ZOOM
        self.default_column_width = default_column_width or settings.DEFAULT_COLUMN_WIDTH

    def render(self, schema: ExcelSchema) -> RenderedWorkbook:
        """Build every sheet in document order and serialise the workbook"""
        start_time = time.time()

        workbook = Workbook()
        workbook.remove(workbook.active)
        workbook.properties.creator = self.creator
        workbook.properties.created = datetime.now()

        warnings: List[MergeRangeWarning] = []
        failed_sheets: List[Dict[str, str]] = []
        sheet_names: List[str] = []

        for index, sheet in enumerate(schema.sheets, 1):
            title = self._sheet_title(sheet.name, index)
            worksheet = workbook.create_sheet(title=title)
            if worksheet.title != title:
                logger.warning(
                    f"Sheet name {sheet.name!r} collides with an existing sheet; renamed to {worksheet.title!r}"
                )
            try:
                outcomes = self._build_sheet(worksheet, sheet)
            except Exception as e:
                logger.error(f"Failed to render sheet '{sheet.name}': {e}", exc_info=True)
                workbook.remove(worksheet)
                failed_sheets.append({"sheet": sheet.name, "error": str(e)})
                continue

            warnings.extend(outcome.warning for outcome in outcomes if outcome.warning)
            sheet_names.append(worksheet.title)

        if not sheet_names:
            raise RenderError(
                f"None of the {len(schema.sheets)} sheet(s) could be rendered",
                details={"failed_sheets": failed_sheets},
            )

        buffer = BytesIO()
        try:
            workbook.save(buffer)
        except Exception as e:
            raise RenderError(f"Failed to serialise workbook: {e}") from e
        finally:
            workbook.close()

        rendered = RenderedWorkbook(
            content=buffer.getvalue(),
            filename=normalize_filename(schema.filename),
            sheet_names=sheet_names,
            warnings=warnings,
            failed_sheets=failed_sheets,
        )

        log_performance_metrics(
            operation="render_workbook",
            duration=time.time() - start_time,
            sheets=len(sheet_names),
            failed_sheets=len(failed_sheets),
            merge_warnings=len(warnings),
            size_bytes=rendered.size,
        )
        return rendered

    def _sheet_title(self, name: str, index: int) -> str:
        title = _INVALID_TITLE_CHARS.sub("", name).strip().strip("'")[:MAX_TITLE_LENGTH]
        if not title:
            title = f"Sheet{index}"
        if title != name:
            logger.info(f"Sheet name {name!r} adjusted to {title!r}")
        return title

    def _build_sheet(self, worksheet: Worksheet, sheet: SheetSchema) -> List[MergeOutcome]:
        is_dashboard = sheet.type == SheetType.DASHBOARD

        self._setup_view(worksheet, is_dashboard)
        self._write_columns(worksheet, sheet)
        self._write_rows(worksheet, sheet)

        outcomes = self.merge_handler.apply(worksheet, sheet.merge_cells)

        if is_dashboard:
            self._style_dashboard(worksheet)
        else:
            self._style_data(worksheet, sheet)

        return outcomes

    def _setup_view(self, worksheet: Worksheet, is_dashboard: bool) -> None:
        if is_dashboard:
            worksheet.sheet_view.showGridLines = False
            worksheet.sheet_view.zoomScale = self.dashboard_zoom
        else:
            worksheet.sheet_view.showGridLines = True
            worksheet.freeze_panes = "A2"

    def _write_columns(self, worksheet: Worksheet, sheet: SheetSchema) -> None:
        for col_idx, column in enumerate(sheet.columns, 1):
            letter = get_column_letter(col_idx)
            worksheet.column_dimensions[letter].width = column.width or self.default_column_width
            if column.header:
                cell = worksheet.cell(row=1, column=col_idx, value=_clean_text(column.header))
                # headers are labels even when they look like formulas
                cell.data_type = TYPE_STRING

    def _write_rows(self, worksheet: Worksheet, sheet: SheetSchema) -> None:
        for row_idx, row in enumerate(sheet.data, 2):
            for col_idx, text in enumerate(row, 1):
                value = classify_cell_text(text).to_excel()
                if value is None:
                    continue
                if isinstance(value, str):
                    value = _clean_text(value)
                worksheet.cell(row=row_idx, column=col_idx, value=value)

    def _style_data(self, worksheet: Worksheet, sheet: SheetSchema) -> None:
        width = max([len(sheet.columns)] + [len(row) for row in sheet.data] + [1])

        header_style = self.styles.data_header()
        for col_idx in range(1, width + 1):
            self.style_builder.apply_cell_style(worksheet.cell(row=1, column=col_idx), header_style)
        worksheet.row_dimensions[1].height = self.styles.header_height

        last_row = len(sheet.data) + 1
        if last_row >= 2:
            self.style_builder.apply_alternate_rows(
                worksheet,
                AlternateRowConfig(
                    start_row=2,
                    end_row=last_row,
                    start_col=1,
                    end_col=width,
                    fill=self.styles.zebra_fill(),
                    border=self.styles.row_separator(),
                ),
            )

    def _style_dashboard(self, worksheet: Worksheet) -> None:
        title_style = self.styles.dashboard_title()
        value_style = self.styles.card_value()
        label_style = self.styles.card_label()

        for row in worksheet.iter_rows():
            for cell in row:
                if isinstance(cell, MergedCell) or cell.value in (None, ""):
                    continue
                if cell.row == 1:
                    config = title_style
                elif classify_cell_text(str(cell.value)).is_value:
                    config = value_style
                else:
                    config = label_style
                self.style_builder.apply_cell_style(cell, config)

        card_border = self.styles.card_border()
        for merged_range in worksheet.merged_cells.ranges:
            anchor = worksheet.cell(row=merged_range.min_row, column=merged_range.min_col)
            if anchor.row > 1 and anchor.value not in (None, ""):
                self.style_builder.frame_range(worksheet, merged_range, card_border)


def _clean_text(value: str) -> str:
    return ILLEGAL_CHARACTERS_RE.sub("", value)
