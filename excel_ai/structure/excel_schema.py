"""
Pydantic models for the Excel schema document
The contract between the schema generator and the workbook renderer
"""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class SheetType(str, Enum):
    """Sheet kinds; drives every styling decision"""

    DATA = "data"
    DASHBOARD = "dashboard"


class ColumnDefinition(BaseModel):
    """Definition for a single column"""

    header: str = Field(..., description="Column header text")
    key: str = Field(..., description="Binding identifier for the column")
    width: Optional[float] = Field(None, description="Column width in character units")

    @field_validator("width")
    @classmethod
    def validate_width(cls, v):
        # out-of-range widths fall back to the renderer default
        if v is not None and (v <= 0 or v > 255):
            return None
        return v


def _cell_to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    raise ValueError(f"Unsupported cell value: {value!r}")


class SheetSchema(BaseModel):
    """Schema for a single worksheet"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Worksheet tab name")
    type: SheetType = Field(..., description="'dashboard' for the overview sheet, 'data' for raw input sheets")
    columns: List[ColumnDefinition] = Field(default_factory=list)
    data: List[List[str]] = Field(default_factory=list, description="Row-major raw cell text")
    # entries are not validated here; the renderer skips bad ones with a warning
    merge_cells: Optional[List[Any]] = Field(
        None, alias="mergeCells", description="Ranges to merge for layout, e.g. 'A1:E1'"
    )

    @field_validator("data", mode="before")
    @classmethod
    def normalize_cells(cls, v):
        """Model output is untrusted: keep every cell as text"""
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        rows = []
        for row in v:
            if row is None:
                rows.append([])
            elif isinstance(row, list):
                rows.append([_cell_to_text(cell) for cell in row])
            else:
                rows.append(row)
        return rows

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]


class ExcelSchema(BaseModel):
    """Complete document: one workbook description"""

    filename: str = Field(..., description="Target file name, e.g. Budget_Dashboard.xlsx")
    summary: str = Field("", description="Short human readable explanation")
    sheets: List[SheetSchema] = Field(..., min_length=1)

    @field_validator("sheets")
    @classmethod
    def validate_unique_sheet_names(cls, v):
        seen = set()
        for sheet in v:
            lowered = sheet.name.strip().lower()
            if lowered in seen:
                raise ValueError(f"Duplicate sheet name: {sheet.name}")
            seen.add(lowered)
        return v

    def to_response(self) -> Dict[str, Any]:
        """JSON-ready dict using the wire field names"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
