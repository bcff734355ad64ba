"""Element-level building blocks of the spreadsheet styles part."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

DEFAULT_THEME = 1

# Built-in number formats all have an id below 164.
BUILTIN_NUM_FMTS_COUNT = 163

BUILTIN_NUM_FMT: dict[int, str] = {
    0: "general",
    1: "0",
    2: "0.00",
    3: "#,##0",
    4: "#,##0.00",
    9: "0%",
    10: "0.00%",
    11: "0.00e+00",
    12: "# ?/?",
    13: "# ??/??",
    14: "mm-dd-yy",
    15: "d-mmm-yy",
    16: "d-mmm",
    17: "mmm-yy",
    18: "h:mm am/pm",
    19: "h:mm:ss am/pm",
    20: "h:mm",
    21: "h:mm:ss",
    22: "m/d/yy h:mm",
    37: "#,##0 ;(#,##0)",
    38: "#,##0 ;[red](#,##0)",
    39: "#,##0.00;(#,##0.00)",
    40: "#,##0.00;[red](#,##0.00)",
    41: '_(* #,##0_);_(* \\(#,##0\\);_(* "-"_);_(@_)',
    42: '_("$"* #,##0_);_("$* \\(#,##0\\);_("$"* "-"_);_(@_)',
    43: '_(* #,##0.00_);_(* \\(#,##0.00\\);_(* "-"??_);_(@_)',
    44: '_("$"* #,##0.00_);_("$"* \\(#,##0.00\\);_("$"* "-"??_);_(@_)',
    45: "mm:ss",
    46: "[h]:mm:ss",
    47: "mmss.0",
    48: "##0.0e+0",
    49: "@",
}

BUILTIN_NUM_FMT_INV: dict[str, int] = {code: num for num, code in BUILTIN_NUM_FMT.items()}

# Colour annotations that may appear in number format codes.
NUM_FMT_COLOR_CODES = (
    "[red]",
    "[black]",
    "[green]",
    "[white]",
    "[blue]",
    "[magenta]",
    "[yellow]",
    "[cyan]",
)


class BuiltinNumFmtIndex(IntEnum):
    GENERAL = 0
    INT = 1
    FLOAT = 2
    DATE = 14
    STRING = 49


INDEXED_COLORS = (
    "FF000000", "FFFFFFFF", "FFFF0000", "FF00FF00", "FF0000FF", "FFFFFF00",
    "FFFF00FF", "FF00FFFF", "FF000000", "FFFFFFFF", "FFFF0000", "FF00FF00",
    "FF0000FF", "FFFFFF00", "FFFF00FF", "FF00FFFF", "FF800000", "FF008000",
    "FF000080", "FF808000", "FF800080", "FF008080", "FFC0C0C0", "FF808080",
    "FF9999FF", "FF993366", "FFFFFFCC", "FFCCFFFF", "FF660066", "FFFF8080",
    "FF0066CC", "FFCCCCFF", "FF000080", "FFFF00FF", "FFFFFF00", "FF00FFFF",
    "FF800080", "FF800000", "FF008080", "FF0000FF", "FF00CCFF", "FFCCFFFF",
    "FFCCFFCC", "FFFFFF99", "FF99CCFF", "FFFF99CC", "FFCC99FF", "FFFFCC99",
    "FF3366FF", "FF33CCCC", "FF99CC00", "FFFFCC00", "FFFF9900", "FFFF6600",
    "FF666699", "FF969696", "FF003366", "FF339966", "FF003300", "FF333300",
    "FF993300", "FF993366", "FF333399", "FF333333",
)

_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def builtin_number_format(num_fmt_id: int) -> str:
    """Return the built-in format code for an id, or "" if there is none."""
    return BUILTIN_NUM_FMT.get(num_fmt_id, "")


@dataclass
class XlsxVal:
    val: str = ""

    def matches(self, other: XlsxVal) -> bool:
        return self.val == other.val


@dataclass
class XlsxColor:
    rgb: str = ""
    theme: int | None = None
    tint: float = 0.0
    indexed: int | None = None

    def matches(self, other: XlsxColor) -> bool:
        return self.rgb == other.rgb


@dataclass
class XlsxLine:
    style: str = ""
    color: XlsxColor = field(default_factory=XlsxColor)

    def matches(self, other: XlsxLine) -> bool:
        return self.style == other.style and self.color.matches(other.color)

    def _to_xml(self, name: str) -> str:
        if not self.style:
            return f"<{name}/>"
        parts = f'<{name} style="{_escape(self.style)}">'
        if self.color.rgb:
            parts += f'<color rgb="{_escape(self.color.rgb)}"/>'
        return parts + f"</{name}>"


@dataclass
class XlsxBorder:
    left: XlsxLine = field(default_factory=XlsxLine)
    right: XlsxLine = field(default_factory=XlsxLine)
    top: XlsxLine = field(default_factory=XlsxLine)
    bottom: XlsxLine = field(default_factory=XlsxLine)

    def matches(self, other: XlsxBorder) -> bool:
        return (
            self.left.matches(other.left)
            and self.right.matches(other.right)
            and self.top.matches(other.top)
            and self.bottom.matches(other.bottom)
        )

    def to_xml(self) -> str:
        # Excel needs every side present, even when empty.
        sides = (
            self.left._to_xml("left")
            + self.right._to_xml("right")
            + self.top._to_xml("top")
            + self.bottom._to_xml("bottom")
        )
        return f"<border>{sides}</border>"


@dataclass
class XlsxPatternFill:
    pattern_type: str = ""
    fg_color: XlsxColor = field(default_factory=XlsxColor)
    bg_color: XlsxColor = field(default_factory=XlsxColor)

    def matches(self, other: XlsxPatternFill) -> bool:
        return (
            self.pattern_type == other.pattern_type
            and self.fg_color.matches(other.fg_color)
            and self.bg_color.matches(other.bg_color)
        )

    def to_xml(self) -> str:
        head = f'<patternFill patternType="{_escape(self.pattern_type)}"'
        children = ""
        if self.fg_color.rgb:
            children += f'<fgColor rgb="{_escape(self.fg_color.rgb)}"/>'
        if self.bg_color.rgb:
            children += f'<bgColor rgb="{_escape(self.bg_color.rgb)}"/>'
        if not children:
            return head + "/>"
        return f"{head}>{children}</patternFill>"


@dataclass
class XlsxFill:
    pattern_fill: XlsxPatternFill = field(default_factory=XlsxPatternFill)

    def matches(self, other: XlsxFill) -> bool:
        return self.pattern_fill.matches(other.pattern_fill)

    def to_xml(self) -> str:
        if not self.pattern_fill.pattern_type:
            return ""
        return f"<fill>{self.pattern_fill.to_xml()}</fill>"


@dataclass
class XlsxFont:
    sz: XlsxVal = field(default_factory=XlsxVal)
    name: XlsxVal = field(default_factory=XlsxVal)
    family: XlsxVal = field(default_factory=XlsxVal)
    charset: XlsxVal = field(default_factory=XlsxVal)
    color: XlsxColor = field(default_factory=XlsxColor)
    b: XlsxVal | None = None
    i: XlsxVal | None = None
    u: XlsxVal | None = None
    scheme: XlsxVal | None = None
    strike: XlsxVal | None = None

    def matches(self, other: XlsxFont) -> bool:
        for mine, theirs in ((self.b, other.b), (self.i, other.i), (self.u, other.u)):
            if (mine is None) != (theirs is None):
                return False
        return (
            self.sz.matches(other.sz)
            and self.name.matches(other.name)
            and self.family.matches(other.family)
            and self.charset.matches(other.charset)
            and self.color.matches(other.color)
        )

    def to_xml(self) -> str:
        parts = ["<font>"]
        for tag, value in (
            ("sz", self.sz),
            ("name", self.name),
            ("family", self.family),
            ("charset", self.charset),
        ):
            if value.val:
                parts.append(f'<{tag} val="{_escape(value.val)}"/>')
        if self.color.rgb:
            parts.append(f'<color rgb="{_escape(self.color.rgb)}"/>')
        if self.color.theme is not None:
            parts.append(f'<color theme="{self.color.theme}" />')
        if self.scheme is not None and self.scheme.val:
            parts.append(f'<scheme val="{_escape(self.scheme.val)}"/>')
        for tag, value in (("b", self.b), ("i", self.i), ("u", self.u), ("strike", self.strike)):
            if value is not None:
                parts.append(f"<{tag}/>")
        parts.append("</font>")
        return "".join(parts)


@dataclass
class XlsxAlignment:
    horizontal: str = ""
    indent: int = 0
    shrink_to_fit: bool = False
    text_rotation: int = 0
    vertical: str = ""
    wrap_text: bool = False

    def matches(self, other: XlsxAlignment) -> bool:
        return (
            self.horizontal == other.horizontal
            and self.indent == other.indent
            and self.shrink_to_fit == other.shrink_to_fit
            and self.text_rotation == other.text_rotation
            and self.vertical == other.vertical
            and self.wrap_text == other.wrap_text
        )

    def to_xml(self) -> str:
        horizontal = self.horizontal or "general"
        vertical = self.vertical or "bottom"
        return (
            f'<alignment horizontal="{_escape(horizontal)}" indent="{self.indent}" '
            f'shrinkToFit="{int(bool(self.shrink_to_fit))}" textRotation="{self.text_rotation}" '
            f'vertical="{_escape(vertical)}" wrapText="{int(bool(self.wrap_text))}"/>'
        )


@dataclass
class XlsxXf:
    apply_alignment: bool = False
    apply_border: bool = False
    apply_font: bool = False
    apply_fill: bool = False
    apply_number_format: bool = False
    apply_protection: bool = False
    border_id: int = 0
    fill_id: int = 0
    font_id: int = 0
    num_fmt_id: int = 0
    xf_id: int | None = None
    alignment: XlsxAlignment = field(default_factory=XlsxAlignment)

    def matches(self, other: XlsxXf) -> bool:
        return (
            self.apply_alignment == other.apply_alignment
            and self.apply_border == other.apply_border
            and self.apply_font == other.apply_font
            and self.apply_fill == other.apply_fill
            and self.apply_protection == other.apply_protection
            and self.border_id == other.border_id
            and self.fill_id == other.fill_id
            and self.font_id == other.font_id
            and self.num_fmt_id == other.num_fmt_id
            and self.xf_id == other.xf_id
            and self.alignment.matches(other.alignment)
        )

    def to_xml(self, border_map: dict[int, int], fill_map: dict[int, int],
               font_map: dict[int, int]) -> str:
        flags = {
            "applyAlignment": self.apply_alignment,
            "applyBorder": self.apply_border,
            "applyFont": self.apply_font,
            "applyFill": self.apply_fill,
            "applyNumberFormat": self.apply_number_format,
            "applyProtection": self.apply_protection,
        }
        attrs = [f'{name}="{int(bool(value))}"' for name, value in flags.items()]
        attrs.append(f'borderId="{border_map.get(self.border_id, 0)}"')
        attrs.append(f'fillId="{fill_map.get(self.fill_id, 0)}"')
        attrs.append(f'fontId="{font_map.get(self.font_id, 0)}"')
        attrs.append(f'numFmtId="{self.num_fmt_id}"')
        if self.xf_id is not None:
            attrs.append(f'xfId="{self.xf_id}"')
        return f"<xf {' '.join(attrs)}>{self.alignment.to_xml()}</xf>"


@dataclass
class XlsxNumFmt:
    num_fmt_id: int = 0
    format_code: str = ""

    def to_xml(self) -> str:
        return f'<numFmt numFmtId="{self.num_fmt_id}" formatCode="{_escape(self.format_code)}"/>'


@dataclass
class XlsxCellStyle:
    name: str = ""
    xf_id: int = 0
    built_in_id: int | None = None
    custom_built_in: bool | None = None
    hidden: bool | None = None
    i_level: bool | None = None

    def to_xml(self) -> str:
        attrs = []
        if self.built_in_id is not None:
            attrs.append(f'builtInId="{self.built_in_id}"')
        for attr, value in (
            ("customBuiltIn", self.custom_built_in),
            ("hidden", self.hidden),
            ("iLevel", self.i_level),
        ):
            if value is not None:
                attrs.append(f'{attr}="{"true" if value else "false"}"')
        attrs.append(f'name="{_escape(self.name)}"')
        attrs.append(f'xfId="{self.xf_id}"')
        return f"<cellStyle {' '.join(attrs)}></cellStyle>"


@dataclass
class XlsxColors:
    indexed_colors: list[str] | None = None
    mru_colors: list[XlsxColor] | None = None

    def indexed_color(self, index: int) -> str:
        """Resolve a 1-based indexed colour to its ARGB value."""
        if self.indexed_colors is not None:
            if index < 1:
                raise IndexError(f"indexed colour out of range: {index}")
            return self.indexed_colors[index - 1]
        if index < 1 or index > len(INDEXED_COLORS):
            return ""
        return INDEXED_COLORS[index - 1]