"""
Schema document contract
"""

from .excel_schema import ExcelSchema, SheetSchema, ColumnDefinition, SheetType

__all__ = [
    'ExcelSchema',
    'SheetSchema',
    'ColumnDefinition',
    'SheetType',
]
