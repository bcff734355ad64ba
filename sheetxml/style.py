"""High-level cell style description and its conversion to style elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from sheetxml.xml_style_elements import (
    XlsxBorder,
    XlsxColor,
    XlsxFill,
    XlsxFont,
    XlsxLine,
    XlsxPatternFill,
    XlsxVal,
    XlsxXf,
)

# Popular font names.
HELVETICA = "Helvetica"
BASKERVILLE = "Baskerville Old Face"
TIMES_NEW_ROMAN = "Times New Roman"
BODONI = "Bodoni MT"
GILL_SANS = "Gill Sans MT"
COURIER = "Courier"

RGB_LIGHT_GREEN = "FFC6EFCE"
RGB_DARK_GREEN = "FF006100"
RGB_LIGHT_RED = "FFFFC7CE"
RGB_DARK_RED = "FF9C0006"
RGB_WHITE = "FFFFFFFF"
RGB_BLACK = "00000000"

SOLID_CELL_FILL = "solid"


def _format_float(value: float) -> str:
    """Shortest plain decimal text for a float, without exponent."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


@dataclass
class Border:
    left: str = ""
    left_color: str = ""
    right: str = ""
    right_color: str = ""
    top: str = ""
    top_color: str = ""
    bottom: str = ""
    bottom_color: str = ""


@dataclass
class Fill:
    pattern_type: str = ""
    fg_color: str = ""
    bg_color: str = ""


@dataclass
class Font:
    size: float = 0.0
    name: str = ""
    family: int = 0
    charset: int = 0
    color: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False


@dataclass
class Alignment:
    horizontal: str = ""
    indent: int = 0
    shrink_to_fit: bool = False
    text_rotation: int = 0
    vertical: str = ""
    wrap_text: bool = False


@dataclass
class _FontDefaults:
    size: float = 12.0
    name: str = "Verdana"


_FONT_DEFAULTS = _FontDefaults()


@dataclass
class Style:
    border: Border = field(default_factory=Border)
    fill: Fill = field(default_factory=Fill)
    font: Font = field(default_factory=Font)
    apply_border: bool = False
    apply_fill: bool = False
    apply_font: bool = False
    apply_alignment: bool = False
    alignment: Alignment = field(default_factory=Alignment)
    named_style_index: int | None = None

    def make_xlsx_style_elements(self) -> tuple[XlsxFont, XlsxFill, XlsxBorder, XlsxXf]:
        """Build the font, fill, border and cell xf elements for this style."""
        font = self.font
        x_font = XlsxFont(
            sz=XlsxVal(_format_float(font.size)),
            name=XlsxVal(font.name),
            family=XlsxVal(str(font.family)),
            charset=XlsxVal(str(font.charset)),
            color=XlsxColor(rgb=font.color),
            b=XlsxVal() if font.bold else None,
            i=XlsxVal() if font.italic else None,
            u=XlsxVal() if font.underline else None,
            strike=XlsxVal() if font.strike else None,
        )
        x_fill = XlsxFill(
            XlsxPatternFill(
                pattern_type=self.fill.pattern_type,
                fg_color=XlsxColor(rgb=self.fill.fg_color),
                bg_color=XlsxColor(rgb=self.fill.bg_color),
            )
        )
        border = self.border
        x_border = XlsxBorder(
            left=XlsxLine(border.left, XlsxColor(rgb=border.left_color)),
            right=XlsxLine(border.right, XlsxColor(rgb=border.right_color)),
            top=XlsxLine(border.top, XlsxColor(rgb=border.top_color)),
            bottom=XlsxLine(border.bottom, XlsxColor(rgb=border.bottom_color)),
        )
        x_xf = make_cell_xf()
        x_xf.apply_border = self.apply_border
        x_xf.apply_fill = self.apply_fill
        x_xf.apply_font = self.apply_font
        x_xf.apply_alignment = self.apply_alignment
        if self.named_style_index is not None:
            x_xf.xf_id = self.named_style_index
        return x_font, x_fill, x_border, x_xf


def make_cell_xf() -> XlsxXf:
    """Return a blank cell xf using the general number format."""
    return XlsxXf(num_fmt_id=0)


def set_default_font(size: float, name: str) -> None:
    """Change the font that new styles start with."""
    _FONT_DEFAULTS.size = float(size)
    _FONT_DEFAULTS.name = name


def default_font() -> Font:
    return Font(size=_FONT_DEFAULTS.size, name=_FONT_DEFAULTS.name)


def default_fill() -> Fill:
    return Fill(pattern_type="none", fg_color="", bg_color="")


def default_border() -> Border:
    return Border(left="none", right="none", top="none", bottom="none")


def default_alignment() -> Alignment:
    return Alignment(horizontal="general", vertical="bottom")


def new_style() -> Style:
    """Return a style initialised with the default font, fill, border and alignment."""
    return Style(
        alignment=default_alignment(),
        border=default_border(),
        fill=default_fill(),
        font=default_font(),
    )