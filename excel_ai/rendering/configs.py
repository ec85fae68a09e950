"""
Configuration objects for styling operations
Groups the openpyxl style parts applied to one cell
"""

from dataclasses import dataclass
from typing import Optional
from openpyxl.styles import Font, PatternFill, Border, Alignment


@dataclass
class CellStyleConfig:
    """Configuration for cell styling"""

    font: Optional[Font] = None
    fill: Optional[PatternFill] = None
    alignment: Optional[Alignment] = None
    border: Optional[Border] = None
    number_format: Optional[str] = None


@dataclass
class AlternateRowConfig:
    """Configuration for alternate row colouring"""

    start_row: int
    end_row: int
    start_col: int
    end_col: int
    fill: PatternFill
    border: Optional[Border] = None
