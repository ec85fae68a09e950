"""
Schema document contract tests
"""

import pytest
from pydantic import ValidationError

from excel_ai.structure.excel_schema import ExcelSchema, SheetSchema, SheetType


def _sheet(**overrides):
    sheet = {
        "name": "Data",
        "type": "data",
        "columns": [{"header": "A", "key": "a"}],
        "data": [["1"]],
    }
    sheet.update(overrides)
    return sheet


class TestSheetSchema:

    def test_wire_field_names(self):
        sheet = SheetSchema.model_validate(_sheet(mergeCells=["A1:B1"]))

        assert sheet.type is SheetType.DATA
        assert sheet.merge_cells == ["A1:B1"]
        assert sheet.headers == ["A"]

    def test_malformed_merge_entries_are_kept_for_the_renderer(self):
        sheet = SheetSchema.model_validate(_sheet(mergeCells=["A1:C1", 5, None]))
        assert sheet.merge_cells == ["A1:C1", 5, None]

    def test_unknown_sheet_type_rejected(self):
        with pytest.raises(ValidationError):
            SheetSchema.model_validate(_sheet(type="chart"))

    def test_non_text_cells_become_text(self):
        sheet = SheetSchema.model_validate(_sheet(data=[[12500, 3.5, None, True, "x"], None]))

        assert sheet.data == [["12500", "3.5", "", "TRUE", "x"], []]

    def test_nested_cell_rejected(self):
        with pytest.raises(ValidationError):
            SheetSchema.model_validate(_sheet(data=[[{"v": 1}]]))

    @pytest.mark.parametrize("width, expected", [(30, 30), (0, None), (-5, None), (400, None), (None, None)])
    def test_width(self, width, expected):
        sheet = SheetSchema.model_validate(_sheet(columns=[{"header": "A", "key": "a", "width": width}]))
        assert sheet.columns[0].width == expected


class TestExcelSchema:

    def test_requires_sheets(self):
        with pytest.raises(ValidationError):
            ExcelSchema.model_validate({"filename": "x", "summary": "", "sheets": []})

    def test_duplicate_sheet_names_rejected(self):
        with pytest.raises(ValidationError):
            ExcelSchema.model_validate({
                "filename": "x",
                "summary": "",
                "sheets": [_sheet(name="Income"), _sheet(name="income")],
            })

    def test_to_response_round_trips_wire_names(self, dashboard_schema_dict):
        schema = ExcelSchema.model_validate(dashboard_schema_dict)
        payload = schema.to_response()

        assert payload["sheets"][0]["mergeCells"] == ["A1:C1", "A3:C3", "A4:C5"]
        assert payload["sheets"][0]["type"] == "dashboard"
        assert "mergeCells" not in payload["sheets"][1]
        assert ExcelSchema.model_validate(payload) == schema
