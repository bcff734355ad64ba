"""The styles part of a workbook: fonts, fills, borders, cell formats."""

from __future__ import annotations

from sheetxml.style import Style
from sheetxml.theme import Theme
from sheetxml.xml_style_elements import (
    BUILTIN_NUM_FMT_INV,
    BUILTIN_NUM_FMTS_COUNT,
    DEFAULT_THEME,
    XlsxBorder,
    XlsxCellStyle,
    XlsxColor,
    XlsxColors,
    XlsxFill,
    XlsxFont,
    XlsxLine,
    XlsxNumFmt,
    XlsxPatternFill,
    XlsxVal,
    XlsxXf,
)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
_NAMESPACE = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _same_format(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def _is_set(value: XlsxVal | None) -> bool:
    return value is not None and value.val != "0"


class StyleSheet:
    """Collections of style elements, with lookup and de-duplicating insertion."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme
        self.fonts: list[XlsxFont] = []
        self.fills: list[XlsxFill] = []
        self.borders: list[XlsxBorder] = []
        self.colors: XlsxColors | None = None
        self.cell_styles: list[XlsxCellStyle] | None = None
        self.cell_style_xfs: list[XlsxXf] | None = None
        self.cell_xfs: list[XlsxXf] = []
        self.num_fmts: list[XlsxNumFmt] | None = None
        self.dxfs_count = 0
        self._style_cache: dict[int, Style] = {}
        self._num_fmt_ref: dict[int, XlsxNumFmt] | None = None

    def reset(self) -> None:
        """Replace the contents with the minimal set that spreadsheets expect."""
        self.fonts = []
        self.fills = []
        self.borders = []
        self.add_font(
            XlsxFont(
                sz=XlsxVal("11"),
                family=XlsxVal("2"),
                color=XlsxColor(theme=DEFAULT_THEME),
                name=XlsxVal("Arial"),
                scheme=XlsxVal("minor"),
            )
        )
        self.add_fill(XlsxFill(XlsxPatternFill(pattern_type="none")))
        self.add_fill(XlsxFill(XlsxPatternFill(pattern_type="gray125")))
        self.add_border(XlsxBorder(XlsxLine(), XlsxLine(), XlsxLine(), XlsxLine()))
        self.cell_style_xfs = [XlsxXf()]
        self.cell_xfs = [XlsxXf()]
        self.num_fmts = []
        self._num_fmt_ref = None

    def populate_style_from_xf(self, style: Style, xf: XlsxXf) -> None:
        """Copy the settings an xf refers to into a style."""
        style.apply_border = xf.apply_border
        style.apply_fill = xf.apply_fill
        style.apply_font = xf.apply_font
        style.apply_alignment = xf.apply_alignment

        if 0 <= xf.border_id < len(self.borders):
            border = self.borders[xf.border_id]
            style.border.left = border.left.style
            style.border.left_color = border.left.color.rgb
            style.border.right = border.right.style
            style.border.right_color = border.right.color.rgb
            style.border.top = border.top.style
            style.border.top_color = border.top.color.rgb
            style.border.bottom = border.bottom.style
            style.border.bottom_color = border.bottom.color.rgb

        if 0 <= xf.fill_id < len(self.fills):
            pattern = self.fills[xf.fill_id].pattern_fill
            style.fill.pattern_type = pattern.pattern_type
            style.fill.fg_color = self.argb_value(pattern.fg_color)
            style.fill.bg_color = self.argb_value(pattern.bg_color)

        if 0 <= xf.font_id < len(self.fonts):
            x_font = self.fonts[xf.font_id]
            style.font.size = _parse_float(x_font.sz.val)
            style.font.name = x_font.name.val
            style.font.family = _parse_int(x_font.family.val)
            style.font.charset = _parse_int(x_font.charset.val)
            style.font.color = self.argb_value(x_font.color)
            if _is_set(x_font.b):
                style.font.bold = True
            if _is_set(x_font.i):
                style.font.italic = True
            if _is_set(x_font.u):
                style.font.underline = True
            if _is_set(x_font.strike):
                style.font.strike = True

        alignment = xf.alignment
        if alignment.horizontal:
            style.alignment.horizontal = alignment.horizontal
        if alignment.vertical:
            style.alignment.vertical = alignment.vertical
        style.alignment.shrink_to_fit = alignment.shrink_to_fit
        style.alignment.wrap_text = alignment.wrap_text
        style.alignment.text_rotation = alignment.text_rotation
        if alignment.indent != 0:
            style.alignment.indent = alignment.indent

    def get_style(self, style_index: int) -> Style:
        """Return the style for a cell xf index, cached once resolved."""
        cached = self._style_cache.get(style_index)
        if cached is not None:
            return cached
        style = Style()
        if 0 <= style_index < len(self.cell_xfs):
            xf = self.cell_xfs[style_index]
            self.populate_style_from_xf(style, xf)
            if (
                xf.xf_id is not None
                and self.cell_style_xfs is not None
                and xf.xf_id < len(self.cell_style_xfs)
            ):
                style.named_style_index = xf.xf_id
                named = self.cell_style_xfs[xf.xf_id]
                style.apply_border = style.apply_border or named.apply_border
                style.apply_fill = style.apply_fill or named.apply_fill
                style.apply_font = style.apply_font or named.apply_font
                style.apply_alignment = style.apply_alignment or named.apply_alignment
            if xf.alignment.vertical:
                style.alignment.vertical = xf.alignment.vertical
            style.alignment.wrap_text = xf.alignment.wrap_text
            style.alignment.text_rotation = xf.alignment.text_rotation
            self._style_cache[style_index] = style
        return style

    def argb_value(self, color: XlsxColor) -> str:
        """Resolve a colour reference to an ARGB string."""
        if color.theme is not None and self.theme is not None:
            return self.theme.theme_color(color.theme, color.tint)
        if color.indexed is not None and self.colors is not None:
            return self.colors.indexed_color(color.indexed)
        return color.rgb

    def add_font(self, font: XlsxFont) -> int:
        if not font.name.val:
            return 0
        for index, existing in enumerate(self.fonts):
            if existing.matches(font):
                return index
        self.fonts.append(font)
        return len(self.fonts) - 1

    def add_fill(self, fill: XlsxFill) -> int:
        for index, existing in enumerate(self.fills):
            if existing.matches(fill):
                return index
        self.fills.append(fill)
        return len(self.fills) - 1

    def add_border(self, border: XlsxBorder) -> int:
        for index, existing in enumerate(self.borders):
            if existing.matches(border):
                return index
        self.borders.append(border)
        return len(self.borders) - 1

    def add_cell_style_xf(self, xf: XlsxXf) -> int:
        if self.cell_style_xfs is None:
            self.cell_style_xfs = []
        for index, existing in enumerate(self.cell_style_xfs):
            if existing.matches(xf):
                return index
        self.cell_style_xfs.append(xf)
        return len(self.cell_style_xfs) - 1

    def add_cell_xf(self, xf: XlsxXf) -> int:
        for index, existing in enumerate(self.cell_xfs):
            if existing.matches(xf):
                return index
        self.cell_xfs.append(xf)
        return len(self.cell_xfs) - 1

    def new_num_fmt(self, format_code: str) -> XlsxNumFmt:
        """Return the number format for a code, registering a custom one if needed."""
        if _same_format(format_code, "general"):
            return XlsxNumFmt(0, "general")
        builtin_id = BUILTIN_NUM_FMT_INV.get(format_code)
        if builtin_id is not None:
            return XlsxNumFmt(builtin_id, format_code)
        for existing in self.num_fmts or ():
            if existing.format_code == format_code:
                return existing
        num_fmt_id = BUILTIN_NUM_FMTS_COUNT + 1
        taken = self._num_fmt_ref or {}
        while num_fmt_id in taken:
            num_fmt_id += 1
        self.add_num_fmt(XlsxNumFmt(num_fmt_id, format_code))
        return XlsxNumFmt(num_fmt_id, format_code)

    def add_num_fmt(self, num_fmt: XlsxNumFmt) -> None:
        """Register a custom number format; built-in ids and known ids are ignored."""
        if num_fmt.num_fmt_id <= BUILTIN_NUM_FMTS_COUNT:
            return
        if self._num_fmt_ref is None:
            self._num_fmt_ref = {}
        if num_fmt.num_fmt_id in self._num_fmt_ref:
            return
        if self.num_fmts is None:
            self.num_fmts = []
        self.num_fmts.append(num_fmt)
        self._num_fmt_ref[num_fmt.num_fmt_id] = num_fmt

    def marshal(self) -> str:
        """Serialise the style sheet to its XML text."""
        parts = [XML_HEADER, f'<styleSheet xmlns="{_NAMESPACE}">']

        if self.num_fmts:
            parts.append(f'<numFmts count="{len(self.num_fmts)}">')
            parts.extend(fmt.to_xml() for fmt in self.num_fmts)
            parts.append("</numFmts>")

        font_map: dict[int, int] = {}
        parts.append(self._section("fonts", self.fonts, font_map))
        fill_map: dict[int, int] = {}
        parts.append(self._section("fills", self.fills, fill_map))
        border_map: dict[int, int] = {}
        parts.append(self._section("borders", self.borders, border_map))

        for tag, xfs in (("cellStyleXfs", self.cell_style_xfs), ("cellXfs", self.cell_xfs)):
            if xfs:
                parts.append(f'<{tag} count="{len(xfs)}">')
                parts.extend(xf.to_xml(border_map, fill_map, font_map) for xf in xfs)
                parts.append(f"</{tag}>")

        if self.cell_styles is not None and self.cell_style_xfs is not None:
            max_xf_id = len(self.cell_style_xfs) - 1
            kept = [cs for cs in self.cell_styles if cs.xf_id <= max_xf_id]
            if kept:
                parts.append(f'<cellStyles count="{len(kept)}">')
                parts.extend(cs.to_xml() for cs in kept)
                parts.append("</cellStyles>")

        parts.append("</styleSheet>")
        return "".join(parts)

    @staticmethod
    def _section(tag: str, items: list, output_map: dict[int, int]) -> str:
        emitted: list[str] = []
        for index, item in enumerate(items):
            text = item.to_xml()
            if text:
                output_map[index] = len(emitted)
                emitted.append(text)
        if not emitted:
            return ""
        return f'<{tag} count="{len(emitted)}">{"".join(emitted)}</{tag}>'