"""
Shared fixtures
"""

from io import BytesIO

import openpyxl
import pytest

from excel_ai.structure.excel_schema import ExcelSchema

INCOME_AMOUNTS = [
    "12,500", "45,000", "8,750", "150,000", "22,300",
    "9,999", "61,250", "3,400", "78,000", "1,250,000",
]


@pytest.fixture
def dashboard_schema_dict():
    """Dashboard + Income document in wire format"""
    income_rows = [
        [f"2024-01-{day:02d}", f"Sale {day} - Colombo", amount]
        for day, amount in enumerate(INCOME_AMOUNTS, 1)
    ]
    return {
        "filename": "Budget_Dashboard",
        "summary": "ආදායම් සහ වියදම් සාරාංශය",
        "sheets": [
            {
                "name": "Dashboard",
                "type": "dashboard",
                "columns": [
                    {"header": "Financial Overview", "key": "title", "width": 18},
                    {"header": "", "key": "b"},
                    {"header": "", "key": "c"},
                ],
                "data": [
                    [""],
                    ["Total Income"],
                    ["=SUM(Income!C:C)"],
                ],
                "mergeCells": ["A1:C1", "A3:C3", "A4:C5"],
            },
            {
                "name": "Income",
                "type": "data",
                "columns": [
                    {"header": "Date", "key": "date", "width": 14},
                    {"header": "Description", "key": "description", "width": 30},
                    {"header": "Amount", "key": "amount"},
                ],
                "data": income_rows,
            },
        ],
    }


@pytest.fixture
def dashboard_schema(dashboard_schema_dict):
    return ExcelSchema.model_validate(dashboard_schema_dict)


def load_rendered(content: bytes):
    """Open rendered workbook bytes with openpyxl"""
    return openpyxl.load_workbook(BytesIO(content))
