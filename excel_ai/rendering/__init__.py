"""
Workbook rendering
Schema document in, styled .xlsx bytes out
"""

from .cell_values import CellValue, Formula, Number, Text, classify_cell_text
from .filenames import XLSX_MEDIA_TYPE, normalize_filename
from .merge_handler import MergeHandler, MergeOutcome, MergeRangeWarning
from .renderer import RenderedWorkbook, SpreadsheetRenderer
from .style_manager import ColorScheme, StyleManager

__all__ = [
    'CellValue',
    'Formula',
    'Number',
    'Text',
    'classify_cell_text',
    'XLSX_MEDIA_TYPE',
    'normalize_filename',
    'MergeHandler',
    'MergeOutcome',
    'MergeRangeWarning',
    'RenderedWorkbook',
    'SpreadsheetRenderer',
    'ColorScheme',
    'StyleManager',
]
