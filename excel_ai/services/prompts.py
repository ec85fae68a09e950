"""
Prompt and response-format definitions for schema generation
"""

SYSTEM_PROMPT = """You are an expert Excel architect. You design professional, \
ready-to-use Excel workbooks from requests written in Sinhala or English.

Return ONLY a JSON object that follows the provided schema.

Workbook layout rules:
1. Structure: when the user asks for a dashboard, summary or overview, the FIRST \
sheet must have type "dashboard". Raw input sheets (for example "Income", \
"Expenses") follow it with type "data".
2. Formulas: dashboards must be dynamic. Any value that can be calculated from a \
data sheet must be a formula starting with "=", for example "=SUM(Expenses!C:C)". \
Never put static totals on a dashboard.
3. Cards: use "mergeCells" to build large KPI blocks on the dashboard, for example \
"B3:D5" for "Total Income". Put the label in the top-left cell of the block's first \
row and the formula in the row below it, and merge each part separately when both \
must stay visible. Leave empty rows and columns between blocks as spacing.
4. Title: row 1 of a dashboard is the title; merge it across the used columns, \
for example "A1:F1".
5. Data sheets: the "columns" list defines the header row. Provide at least 10 rows \
of realistic mock data for a Sri Lankan context (LKR amounts, Colombo and other \
local places, local names). Every row has one string per column.
6. Every cell value is a string. Numbers may use thousands separators ("12,500").
7. Sheet names are unique, at most 31 characters, and contain none of []:*?/\\ .
8. "filename" is a short descriptive name such as "Budget_Dashboard.xlsx".
9. "summary" briefly explains the workbook in Sinhala.

Example: "Income expense dashboard" produces a "Dashboard" sheet (title merged \
across A1:F1, a Total Income card with "Total Income" in A3 and \
"=SUM(Income!C:C)" in A4, a Total Expenses card next to it), an "Income" sheet \
(Date, Description, Amount) and an "Expenses" sheet (Date, Category, Amount)."""


RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "filename": {
            "type": "string",
            "description": "The name of the file (e.g., Budget_Dashboard.xlsx)",
        },
        "summary": {
            "type": "string",
            "description": "A brief explanation in Sinhala.",
        },
        "sheets": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Name of the worksheet"},
                    "type": {
                        "type": "string",
                        "enum": ["data", "dashboard"],
                        "description": "'dashboard' for the overview sheet, 'data' for raw input sheets.",
                    },
                    "mergeCells": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Cell ranges to merge for layout (e.g. 'A1:E1' for a title, 'A3:B5' for a KPI card).",
                    },
                    "columns": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "header": {"type": "string"},
                                "key": {"type": "string"},
                                "width": {"type": "number"},
                            },
                            "required": ["header", "key"],
                        },
                    },
                    "data": {
                        "type": "array",
                        "items": {"type": "array", "items": {"type": "string"}},
                        "description": "Row-major cells. Dashboards use formulas starting with '=' that reference data sheets.",
                    },
                },
                "required": ["name", "type", "columns", "data"],
            },
        },
    },
    "required": ["filename", "summary", "sheets"],
}


RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "excel_workbook",
        "schema": RESPONSE_SCHEMA,
        "strict": False,
    },
}
