"""
Cell text classification
One heuristic shared by value coercion and dashboard card styling
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class Formula:
    """Formula cell; ``expression`` has no leading '='"""

    expression: str
    is_value = True

    def to_excel(self) -> str:
        return f"={self.expression}"


@dataclass(frozen=True)
class Number:
    """Numeric literal"""

    value: Union[int, float]
    is_value = True

    def to_excel(self) -> Union[int, float]:
        return self.value


@dataclass(frozen=True)
class Text:
    """Verbatim text; the empty string is a blank cell"""

    text: str
    is_value = False

    def to_excel(self) -> Optional[str]:
        return self.text if self.text != "" else None


CellValue = Union[Formula, Number, Text]


def parse_number(text: str) -> Optional[Union[int, float]]:
    """Parse a decimal numeral, ignoring thousands separators"""
    candidate = text.strip().replace(",", "")
    if not candidate:
        return None
    if _INTEGER_RE.match(candidate):
        return int(candidate)
    if _DECIMAL_RE.match(candidate):
        value = float(candidate)
        return None if math.isinf(value) else value
    return None


def classify_cell_text(text: str) -> CellValue:
    """
    Decide how raw cell text is written to the sheet.

    Formula detection wins over numeric detection, which wins over text.
    """
    trimmed = text.strip()
    if trimmed.startswith("="):
        return Formula(trimmed[1:])
    if trimmed:
        number = parse_number(trimmed)
        if number is not None:
            return Number(number)
    return Text(text)
