"""
Output file naming
"""

import re

XLSX_EXTENSION = ".xlsx"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DEFAULT_FILENAME = "spreadsheet"

_PATH_SEPARATORS = re.compile(r"[\\/]+")


def normalize_filename(name: str) -> str:
    """Append the .xlsx extension when it is missing"""
    cleaned = _PATH_SEPARATORS.sub("_", (name or "").strip())
    if not cleaned or cleaned.lower() == XLSX_EXTENSION:
        cleaned = DEFAULT_FILENAME
    if cleaned.lower().endswith(XLSX_EXTENSION):
        return cleaned
    return f"{cleaned}{XLSX_EXTENSION}"
