"""
Style builder - applies style presets to worksheet cells
"""

from openpyxl.worksheet.worksheet import Worksheet
from openpyxl.worksheet.cell_range import CellRange
from openpyxl.styles import Border

from .configs import CellStyleConfig, AlternateRowConfig


class StyleBuilder:
    """Specialized builder for styling operations"""

    def apply_cell_style(self, cell, config: CellStyleConfig) -> None:
        """Apply multiple styles to a cell"""
        if config.font:
            cell.font = config.font
        if config.fill:
            cell.fill = config.fill
        if config.alignment:
            cell.alignment = config.alignment
        if config.border:
            cell.border = config.border
        if config.number_format:
            cell.number_format = config.number_format

    def apply_alternate_rows(self, worksheet: Worksheet, config: AlternateRowConfig) -> None:
        """Shade even rows and separate every row with a bottom border"""
        for row in range(config.start_row, config.end_row + 1):
            for col in range(config.start_col, config.end_col + 1):
                cell = worksheet.cell(row=row, column=col)
                if row % 2 == 0:
                    cell.fill = config.fill
                if config.border:
                    cell.border = config.border

    def frame_range(self, worksheet: Worksheet, cell_range: CellRange, border: Border) -> None:
        """Draw ``border`` along the outer edges of a (merged) range"""
        for row in range(cell_range.min_row, cell_range.max_row + 1):
            for col in range(cell_range.min_col, cell_range.max_col + 1):
                sides = {}
                if row == cell_range.min_row:
                    sides["top"] = border.top
                if row == cell_range.max_row:
                    sides["bottom"] = border.bottom
                if col == cell_range.min_col:
                    sides["left"] = border.left
                if col == cell_range.max_col:
                    sides["right"] = border.right
                if sides:
                    worksheet.cell(row=row, column=col).border = Border(**sides)
