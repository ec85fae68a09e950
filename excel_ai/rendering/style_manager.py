"""
Centralized style management for generated workbooks
One place for the data-sheet and dashboard-card themes
"""

from dataclasses import dataclass
from openpyxl.styles import Font, PatternFill, Border, Side, Alignment

from .configs import CellStyleConfig

NUMBER_FORMAT = "#,##0.00"


@dataclass
class ColorScheme:
    """ARGB colours for the workbook theme"""
    header_fill: str = "FF2563EB"
    header_text: str = "FFFFFFFF"
    zebra_fill: str = "FFF8FAFC"
    row_border: str = "FFE2E8F0"
    title_text: str = "FF1E293B"
    card_fill: str = "FFFFFFFF"
    card_edge: str = "FFCBD5E1"
    card_shadow: str = "FF94A3B8"
    value_text: str = "FF0F172A"
    label_text: str = "FF64748B"


class StyleManager:
    """Builds the style presets used by the renderer"""

    header_height = 30
    title_font_name = "Segoe UI"

    def __init__(self, color_scheme: ColorScheme = None):
        self.colors = color_scheme or ColorScheme()

    def _solid(self, color: str) -> PatternFill:
        return PatternFill(start_color=color, end_color=color, fill_type="solid")

    # Data sheets

    def data_header(self) -> CellStyleConfig:
        return CellStyleConfig(
            font=Font(bold=True, size=11, color=self.colors.header_text),
            fill=self._solid(self.colors.header_fill),
            alignment=Alignment(horizontal="center", vertical="center"),
        )

    def zebra_fill(self) -> PatternFill:
        return self._solid(self.colors.zebra_fill)

    def row_separator(self) -> Border:
        return Border(bottom=Side(style="thin", color=self.colors.row_border))

    # Dashboard sheets

    def card_alignment(self) -> Alignment:
        return Alignment(horizontal="center", vertical="center", wrap_text=True)

    def dashboard_title(self) -> CellStyleConfig:
        return CellStyleConfig(
            font=Font(name=self.title_font_name, bold=True, size=24, color=self.colors.title_text),
            fill=PatternFill(fill_type=None),
            alignment=self.card_alignment(),
        )

    def card_border(self) -> Border:
        """Light top/left edges, heavier bottom/right edges for elevation"""
        edge = Side(style="thin", color=self.colors.card_edge)
        shadow = Side(style="medium", color=self.colors.card_shadow)
        return Border(top=edge, left=edge, bottom=shadow, right=shadow)

    def card_value(self) -> CellStyleConfig:
        return CellStyleConfig(
            font=Font(bold=True, size=20, color=self.colors.value_text),
            fill=self._solid(self.colors.card_fill),
            alignment=self.card_alignment(),
            border=self.card_border(),
            number_format=NUMBER_FORMAT,
        )

    def card_label(self) -> CellStyleConfig:
        return CellStyleConfig(
            font=Font(bold=True, size=12, color=self.colors.label_text),
            fill=self._solid(self.colors.card_fill),
            alignment=self.card_alignment(),
            border=self.card_border(),
        )
