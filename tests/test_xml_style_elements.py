import pytest

from sheetxml.xml_style_elements import (
    XlsxAlignment,
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
    builtin_number_format,
)


def test_indexed_color_uninitialised():
    assert XlsxColors().indexed_color(1) == "FF000000"


def test_indexed_color_initialised():
    colors = XlsxColors(indexed_colors=["00FF00FF"])
    assert colors.indexed_color(1) == "00FF00FF"


@pytest.mark.parametrize("index", [0, 65])
def test_indexed_color_out_of_range_default(index):
    assert XlsxColors().indexed_color(index) == ""


def test_indexed_color_initialised_zero_index():
    with pytest.raises(IndexError):
        XlsxColors(indexed_colors=["00FF00FF"]).indexed_color(0)


def test_builtin_number_format():
    assert builtin_number_format(14) == "mm-dd-yy"
    assert builtin_number_format(49) == "@"
    assert builtin_number_format(99) == ""


def test_font_to_xml():
    font = XlsxFont(sz=XlsxVal("10"), name=XlsxVal("Andale Mono"),
                    b=XlsxVal(), i=XlsxVal(), u=XlsxVal(), strike=XlsxVal())
    assert font.to_xml() == (
        '<font><sz val="10"/><name val="Andale Mono"/><b/><i/><u/><strike/></font>'
    )


def test_font_to_xml_theme_color_and_scheme():
    font = XlsxFont(sz=XlsxVal("11"), name=XlsxVal("Arial"), family=XlsxVal("2"),
                    color=XlsxColor(theme=1), scheme=XlsxVal("minor"))
    assert font.to_xml() == (
        '<font><sz val="11"/><name val="Arial"/><family val="2"/>'
        '<color theme="1" /><scheme val="minor"/></font>'
    )


def test_fill_to_xml():
    fill = XlsxFill(XlsxPatternFill("solid", XlsxColor(rgb="#FFFFFF"), XlsxColor(rgb="#000000")))
    assert fill.to_xml() == (
        '<fill><patternFill patternType="solid"><fgColor rgb="#FFFFFF"/>'
        '<bgColor rgb="#000000"/></patternFill></fill>'
    )


def test_fill_without_colors_and_empty_fill():
    assert XlsxFill(XlsxPatternFill("none")).to_xml() == (
        '<fill><patternFill patternType="none"/></fill>'
    )
    assert XlsxFill().to_xml() == ""


def test_border_to_xml():
    border = XlsxBorder(left=XlsxLine(style="solid"))
    assert border.to_xml() == '<border><left style="solid"></left><right/><top/><bottom/></border>'


def test_border_to_xml_with_color():
    border = XlsxBorder(top=XlsxLine("thin", XlsxColor(rgb="FF000000")))
    assert border.to_xml() == (
        '<border><left/><right/><top style="thin"><color rgb="FF000000"/></top><bottom/></border>'
    )


def test_xf_to_xml():
    xf = XlsxXf(apply_alignment=True, apply_border=True, apply_font=True, apply_fill=True,
                apply_protection=True,
                alignment=XlsxAlignment("left", 1, True, 0, "middle", False))
    assert xf.to_xml({}, {}, {}) == (
        '<xf applyAlignment="1" applyBorder="1" applyFont="1" applyFill="1" '
        'applyNumberFormat="0" applyProtection="1" borderId="0" fillId="0" fontId="0" '
        'numFmtId="0"><alignment horizontal="left" indent="1" shrinkToFit="1" '
        'textRotation="0" vertical="middle" wrapText="0"/></xf>'
    )


def test_xf_to_xml_remaps_ids_and_xf_id():
    xf = XlsxXf(border_id=2, fill_id=3, font_id=4, num_fmt_id=164, xf_id=0)
    out = xf.to_xml({2: 1}, {3: 2}, {4: 0})
    assert 'borderId="1" fillId="2" fontId="0" numFmtId="164" xfId="0">' in out


def test_alignment_defaults():
    assert XlsxAlignment().to_xml() == (
        '<alignment horizontal="general" indent="0" shrinkToFit="0" '
        'textRotation="0" vertical="bottom" wrapText="0"/>'
    )


def test_num_fmt_to_xml():
    assert XlsxNumFmt(164, "GENERAL").to_xml() == '<numFmt numFmtId="164" formatCode="GENERAL"/>'


def test_num_fmt_escapes_quotes():
    assert XlsxNumFmt(165, '"$"0').to_xml() == (
        '<numFmt numFmtId="165" formatCode="&#34;$&#34;0"/>'
    )


def test_cell_style_to_xml():
    style = XlsxCellStyle(name="Bob", xf_id=0, built_in_id=31)
    assert style.to_xml() == '<cellStyle builtInId="31" name="Bob" xfId="0"></cellStyle>'


def _font():
    return XlsxFont(sz=XlsxVal("11"), color=XlsxColor(rgb="FFFF0000"), name=XlsxVal("Calibri"),
                    family=XlsxVal("2"), b=XlsxVal(), i=XlsxVal(), u=XlsxVal())


def test_font_matches():
    font_a = _font()
    font_b = _font()
    assert font_a.matches(font_b)
    font_b.sz.val = "12"
    assert not font_a.matches(font_b)
    font_b.sz.val = "11"
    font_b.color.rgb = "12345678"
    assert not font_a.matches(font_b)
    font_b.color.rgb = "FFFF0000"
    font_b.name.val = "Arial"
    assert not font_a.matches(font_b)
    font_b.name.val = "Calibri"
    font_b.family.val = "1"
    assert not font_a.matches(font_b)
    font_b.family.val = "2"
    font_b.b = None
    assert not font_a.matches(font_b)
    font_b.b = XlsxVal()
    font_b.i = None
    assert not font_a.matches(font_b)
    font_b.i = XlsxVal()
    font_b.u = None
    assert not font_a.matches(font_b)
    font_b.u = XlsxVal()
    assert font_a.matches(font_b)


def _fill():
    return XlsxFill(XlsxPatternFill("solid", XlsxColor(rgb="FFFF0000"), XlsxColor(rgb="0000FFFF")))


def test_fill_matches():
    fill_a = _fill()
    fill_b = _fill()
    assert fill_a.matches(fill_b)
    fill_b.pattern_fill.pattern_type = "gray125"
    assert not fill_a.matches(fill_b)
    fill_b.pattern_fill.pattern_type = "solid"
    fill_b.pattern_fill.fg_color.rgb = "00FF00FF"
    assert not fill_a.matches(fill_b)
    fill_b.pattern_fill.fg_color.rgb = "FFFF0000"
    fill_b.pattern_fill.bg_color.rgb = "12456789"
    assert not fill_a.matches(fill_b)
    fill_b.pattern_fill.bg_color.rgb = "0000FFFF"
    assert fill_a.matches(fill_b)


def _border():
    return XlsxBorder(XlsxLine("none"), XlsxLine("none"), XlsxLine("none"), XlsxLine("none"))


@pytest.mark.parametrize("side", ["left", "right", "top", "bottom"])
def test_border_matches(side):
    border_a = _border()
    border_b = _border()
    assert border_a.matches(border_b)
    getattr(border_b, side).style = "thin"
    assert not border_a.matches(border_b)
    getattr(border_b, side).style = "none"
    assert border_a.matches(border_b)


def _xf():
    return XlsxXf(apply_alignment=True, apply_border=True, apply_font=True, apply_fill=True,
                  apply_protection=True)


@pytest.mark.parametrize(
    "attr,value",
    [
        ("apply_alignment", False),
        ("apply_border", False),
        ("apply_font", False),
        ("apply_fill", False),
        ("apply_protection", False),
        ("border_id", 1),
        ("fill_id", 1),
        ("font_id", 1),
        ("num_fmt_id", 1),
    ],
)
def test_xf_matches_field(attr, value):
    xf_a = _xf()
    xf_b = _xf()
    assert xf_a.matches(xf_b)
    setattr(xf_b, attr, value)
    assert not xf_a.matches(xf_b)


def test_xf_matches_xf_id():
    xf_a = _xf()
    xf_b = _xf()
    xf_a.xf_id = 1
    assert not xf_a.matches(xf_b)
    xf_b.xf_id = 1
    assert xf_a.matches(xf_b)
    xf_b.xf_id = 2
    assert not xf_a.matches(xf_b)


def test_xf_matches_ignores_apply_number_format():
    xf_a = _xf()
    xf_b = _xf()
    xf_b.apply_number_format = True
    assert xf_a.matches(xf_b)