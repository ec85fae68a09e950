"""
Merge range handling tests
"""

import pytest
from openpyxl import Workbook

from excel_ai.rendering.merge_handler import MergeHandler, parse_merge_range


@pytest.fixture
def worksheet():
    workbook = Workbook()
    ws = workbook.active
    ws.title = "Layout"
    return ws


class TestParseMergeRange:

    def test_plain_range(self):
        assert parse_merge_range("A1:E1").coord == "A1:E1"

    def test_reversed_corners_are_normalized(self):
        assert parse_merge_range("c5:a3").coord == "A3:C5"

    def test_absolute_references(self):
        assert parse_merge_range("$B$3:$D$5").coord == "B3:D5"

    @pytest.mark.parametrize("raw", [
        "ZZZ1:AAA2",
        "not a range",
        "",
        "A1",
        "A1:A1",
        "A:C",
        "1:3",
        "A0:B2",
    ])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_merge_range(raw)


class TestMergeHandler:

    def test_all_ranges_applied(self, worksheet):
        outcomes = MergeHandler().apply(worksheet, ["A1:E1", "A3:B5"])

        assert [outcome.applied for outcome in outcomes] == [True, True]
        assert sorted(str(r) for r in worksheet.merged_cells.ranges) == ["A1:E1", "A3:B5"]

    def test_none_means_nothing_to_merge(self, worksheet):
        assert MergeHandler().apply(worksheet, None) == []

    def test_bad_range_does_not_stop_the_rest(self, worksheet, caplog):
        outcomes = MergeHandler().apply(
            worksheet, ["ZZZ1:AAA2", "A1:E1", "garbage", "B3:C4"]
        )

        assert [outcome.applied for outcome in outcomes] == [False, True, False, True]
        assert sorted(str(r) for r in worksheet.merged_cells.ranges) == ["A1:E1", "B3:C4"]

        warnings = [outcome.warning for outcome in outcomes if outcome.warning]
        assert [w.cell_range for w in warnings] == ["ZZZ1:AAA2", "garbage"]
        assert all(w.sheet == "Layout" for w in warnings)
        assert "Failed to merge range" in caplog.text

    def test_overlapping_range_is_skipped(self, worksheet):
        outcomes = MergeHandler().apply(worksheet, ["A3:C5", "B4:D6", "A3:C5"])

        assert [outcome.applied for outcome in outcomes] == [True, False, False]
        assert "overlaps" in outcomes[1].warning.reason
        assert [str(r) for r in worksheet.merged_cells.ranges] == ["A3:C5"]

    def test_non_string_range(self, worksheet):
        outcomes = MergeHandler().apply(worksheet, [None])
        assert not outcomes[0].applied
