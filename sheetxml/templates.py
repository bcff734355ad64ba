"""Fixed XML parts written into every workbook package."""

from __future__ import annotations

from typing import Union
from xml.sax.saxutils import escape

_Node = tuple  # (tag, attrs, children)
_Child = Union[_Node, str]

_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_DECLARATION_STANDALONE = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

_DRAWING_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
_PKG_RELS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
_DOC_RELS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"


def _e(tag: str, *children: _Child, **attrs: str) -> _Node:
    return (tag, attrs, list(children))


def _a(tag: str, *children: _Child, **attrs: str) -> _Node:
    return _e(f"a:{tag}", *children, **attrs)


def _render(node: _Node, depth: int = 0) -> list[str]:
    tag, attrs, children = node
    pad = "  " * depth
    attr_text = "".join(
        f' {name}="{escape(str(value), {chr(34): "&quot;"})}"' for name, value in attrs.items()
    )
    if not children:
        return [f"{pad}<{tag}{attr_text}/>"]
    if all(isinstance(child, str) for child in children):
        text = escape("".join(children))
        return [f"{pad}<{tag}{attr_text}>{text}</{tag}>"]
    lines = [f"{pad}<{tag}{attr_text}>"]
    for child in children:
        lines.extend(_render(child, depth + 1))
    lines.append(f"{pad}</{tag}>")
    return lines


def _document(declaration: str, root: _Node) -> str:
    return "\n".join([declaration, *_render(root)])


RELS_DOT_RELS = _document(
    _DECLARATION,
    _e(
        "Relationships",
        *(
            _e("Relationship", Id=f"rId{number}", Type=rel_type, Target=target)
            for number, (rel_type, target) in enumerate(
                [
                    (f"{_DOC_RELS}/officeDocument", "xl/workbook.xml"),
                    (
                        "http://schemas.openxmlformats.org/package/2006/relationships"
                        "/metadata/core-properties",
                        "docProps/core.xml",
                    ),
                    (f"{_DOC_RELS}/extended-properties", "docProps/app.xml"),
                ],
                start=1,
            )
        ),
        xmlns=_PKG_RELS_NS,
    ),
)

DOCPROPS_APP = _document(
    _DECLARATION_STANDALONE,
    _e(
        "Properties",
        _e("TotalTime", "0"),
        _e("Application", "sheetxml"),
        **{
            "xmlns": "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties",
            "xmlns:vt": "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes",
        },
    ),
)

DOCPROPS_CORE = _document(
    _DECLARATION_STANDALONE,
    _e(
        "cp:coreProperties",
        "",
        **{
            "xmlns:cp": "http://schemas.openxmlformats.org/package/2006/metadata/core-properties",
            "xmlns:dc": "http://purl.org/dc/elements/1.1/",
            "xmlns:dcmitype": "http://purl.org/dc/dcmitype/",
            "xmlns:dcterms": "http://purl.org/dc/terms/",
            "xmlns:xsi": "http://www.w3.org/2001/XMLSchema-instance",
        },
    ),
)


# Colour scheme entries: name, then either ("sys", value, last colour) or ("rgb", value).
_COLOR_SCHEME = [
    ("dk1", ("sys", "windowText", "000000")),
    ("lt1", ("sys", "window", "FFFFFF")),
    ("dk2", ("rgb", "1F497D")),
    ("lt2", ("rgb", "EEECE1")),
    ("accent1", ("rgb", "4F81BD")),
    ("accent2", ("rgb", "C0504D")),
    ("accent3", ("rgb", "9BBB59")),
    ("accent4", ("rgb", "8064A2")),
    ("accent5", ("rgb", "4BACC6")),
    ("accent6", ("rgb", "F79646")),
    ("hlink", ("rgb", "0000FF")),
    ("folHlink", ("rgb", "800080")),
]


def _color_entry(name: str, spec: tuple) -> _Node:
    if spec[0] == "sys":
        return _a(name, _a("sysClr", val=spec[1], lastClr=spec[2]))
    return _a(name, _a("srgbClr", val=spec[1]))


# Script typefaces; "RTL" and "KHMER" are filled in per font.
_SCRIPT_FONTS = [
    ("Jpan", "ＭＳ Ｐゴシック"), ("Hang", "맑은 고딕"), ("Hans", "宋体"), ("Hant", "新細明體"),
    ("Arab", "RTL"), ("Hebr", "RTL"), ("Thai", "Tahoma"), ("Ethi", "Nyala"),
    ("Beng", "Vrinda"), ("Gujr", "Shruti"), ("Khmr", "KHMER"), ("Knda", "Tunga"),
    ("Guru", "Raavi"), ("Cans", "Euphemia"), ("Cher", "Plantagenet Cherokee"),
    ("Yiii", "Microsoft Yi Baiti"), ("Tibt", "Microsoft Himalaya"), ("Thaa", "MV Boli"),
    ("Deva", "Mangal"), ("Telu", "Gautami"), ("Taml", "Latha"), ("Syrc", "Estrangelo Edessa"),
    ("Orya", "Kalinga"), ("Mlym", "Kartika"), ("Laoo", "DokChampa"), ("Sinh", "Iskoola Pota"),
    ("Mong", "Mongolian Baiti"), ("Viet", "RTL"), ("Uigh", "Microsoft Uighur"),
    ("Geor", "Sylfaen"),
]


def _font(tag: str, latin: str, rtl: str, khmer: str) -> _Node:
    substitutions = {"RTL": rtl, "KHMER": khmer}
    return _a(
        tag,
        _a("latin", typeface=latin),
        _a("ea", typeface=""),
        _a("cs", typeface=""),
        *(
            _a("font", script=script, typeface=substitutions.get(face, face))
            for script, face in _SCRIPT_FONTS
        ),
    )


def _scheme(val: str, *mods: tuple[str, str]) -> _Node:
    return _a("schemeClr", *(_a(name, val=value) for name, value in mods), val=val)


def _stop(pos: str, *mods: tuple[str, str]) -> _Node:
    return _a("gs", _scheme("phClr", *mods), pos=pos)


def _gradient(stops: list[_Node], tail: _Node) -> _Node:
    return _a("gradFill", _a("gsLst", *stops), tail, rotWithShape="1")


def _solid_ph() -> _Node:
    return _a("solidFill", _scheme("phClr"))


def _line(width: str, *mods: tuple[str, str]) -> _Node:
    return _a(
        "ln",
        _a("solidFill", _scheme("phClr", *mods)),
        _a("prstDash", val="solid"),
        w=width, cap="flat", cmpd="sng", algn="ctr",
    )


def _effect_list(dist: str, alpha: str) -> _Node:
    return _a(
        "effectLst",
        _a(
            "outerShdw",
            _a("srgbClr", _a("alpha", val=alpha), val="000000"),
            blurRad="40000", dist=dist, dir="5400000", rotWithShape="0",
        ),
    )


def _circle(left: str, top: str, right: str, bottom: str) -> _Node:
    return _a("path", _a("fillToRect", l=left, t=top, r=right, b=bottom), path="circle")


def _object_default(tag: str, line: str, fill: str, effect: str, font_color: str) -> _Node:
    accent = _scheme("accent1")
    return _a(
        tag,
        _a("spPr"),
        _a("bodyPr"),
        _a("lstStyle"),
        _a(
            "style",
            _a("lnRef", accent, idx=line),
            _a("fillRef", accent, idx=fill),
            _a("effectRef", accent, idx=effect),
            _a("fontRef", _scheme(font_color), idx="minor"),
        ),
    )


_FORMAT_SCHEME = _a(
    "fmtScheme",
    _a(
        "fillStyleLst",
        _solid_ph(),
        _gradient(
            [
                _stop("0", ("tint", "50000"), ("satMod", "300000")),
                _stop("35000", ("tint", "37000"), ("satMod", "300000")),
                _stop("100000", ("tint", "15000"), ("satMod", "350000")),
            ],
            _a("lin", ang="16200000", scaled="1"),
        ),
        _gradient(
            [
                _stop("0", ("tint", "100000"), ("shade", "100000"), ("satMod", "130000")),
                _stop("100000", ("tint", "50000"), ("shade", "100000"), ("satMod", "350000")),
            ],
            _a("lin", ang="16200000", scaled="0"),
        ),
    ),
    _a(
        "lnStyleLst",
        _line("9525", ("shade", "95000"), ("satMod", "105000")),
        _line("25400"),
        _line("38100"),
    ),
    _a(
        "effectStyleLst",
        _a("effectStyle", _effect_list("20000", "38000")),
        _a("effectStyle", _effect_list("23000", "35000")),
        _a(
            "effectStyle",
            _effect_list("23000", "35000"),
            _a(
                "scene3d",
                _a("camera", _a("rot", lat="0", lon="0", rev="0"), prst="orthographicFront"),
                _a("lightRig", _a("rot", lat="0", lon="0", rev="1200000"), rig="threePt", dir="t"),
            ),
            _a("sp3d", _a("bevelT", w="63500", h="25400")),
        ),
    ),
    _a(
        "bgFillStyleLst",
        _solid_ph(),
        _gradient(
            [
                _stop("0", ("tint", "40000"), ("satMod", "350000")),
                _stop("40000", ("tint", "45000"), ("shade", "99000"), ("satMod", "350000")),
                _stop("100000", ("shade", "20000"), ("satMod", "255000")),
            ],
            _circle("50000", "-80000", "50000", "180000"),
        ),
        _gradient(
            [
                _stop("0", ("tint", "80000"), ("satMod", "300000")),
                _stop("100000", ("shade", "30000"), ("satMod", "200000")),
            ],
            _circle("50000", "50000", "50000", "50000"),
        ),
    ),
    name="Office",
)


XL_THEME_THEME = _document(
    _DECLARATION_STANDALONE,
    _a(
        "theme",
        _a(
            "themeElements",
            _a("clrScheme", *(_color_entry(n, s) for n, s in _COLOR_SCHEME), name="Office"),
            _a(
                "fontScheme",
                _font("majorFont", "Cambria", "Times New Roman", "MoolBoran"),
                _font("minorFont", "Arial", "Arial", "DaunPenh"),
                name="Office",
            ),
            _FORMAT_SCHEME,
        ),
        _a(
            "objectDefaults",
            _object_default("spDef", "1", "3", "2", "lt1"),
            _object_default("lnDef", "2", "0", "1", "tx1"),
        ),
        _a("extraClrSchemeLst"),
        **{"xmlns:a": _DRAWING_NS, "name": "Office-Design"},
    ),
)