"""
Merge range handling
Each declared range is merged or skipped on its own; a bad range never
aborts the sheet.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Iterable, List, Optional

from openpyxl.utils.cell import range_boundaries, get_column_letter
from openpyxl.worksheet.cell_range import CellRange
from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)

MAX_ROW = 1048576
MAX_COLUMN = 16384


@dataclass
class MergeRangeWarning:
    """Non-fatal record of a range that could not be merged"""

    sheet: str
    cell_range: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MergeOutcome:
    """Result of one merge attempt"""

    cell_range: str
    applied: bool
    warning: Optional[MergeRangeWarning] = None


def parse_merge_range(raw: str) -> CellRange:
    """Parse a range reference, normalizing reversed corners"""
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError("Empty range reference")

    text = raw.strip().replace("$", "").upper()
    min_col, min_row, max_col, max_row = range_boundaries(text)
    if None in (min_col, min_row, max_col, max_row):
        raise ValueError("Whole-row or whole-column ranges cannot be merged")

    min_col, max_col = sorted((min_col, max_col))
    min_row, max_row = sorted((min_row, max_row))
    if min_col < 1 or min_row < 1 or max_col > MAX_COLUMN or max_row > MAX_ROW:
        raise ValueError("Range exceeds the worksheet limits")
    if min_col == max_col and min_row == max_row:
        raise ValueError("Range covers a single cell")

    return CellRange(
        f"{get_column_letter(min_col)}{min_row}:{get_column_letter(max_col)}{max_row}"
    )


class MergeHandler:
    """Applies merge ranges as a result-collecting fold"""

    def apply(self, worksheet: Worksheet, ranges: Optional[Iterable[Any]]) -> List[MergeOutcome]:
        outcomes = []
        for raw in ranges or []:
            outcomes.append(self._merge_one(worksheet, raw))
        return outcomes

    def _merge_one(self, worksheet: Worksheet, raw: Any) -> MergeOutcome:
        try:
            cell_range = parse_merge_range(raw)
            for existing in worksheet.merged_cells.ranges:
                if not existing.isdisjoint(cell_range):
                    raise ValueError(f"Range overlaps merged range {existing.coord}")
            worksheet.merge_cells(cell_range.coord)
        except (ValueError, TypeError) as e:
            logger.warning(f"Failed to merge range {raw!r} on sheet '{worksheet.title}': {e}")
            warning = MergeRangeWarning(sheet=worksheet.title, cell_range=str(raw), reason=str(e))
            return MergeOutcome(cell_range=str(raw), applied=False, warning=warning)

        return MergeOutcome(cell_range=cell_range.coord, applied=True)
