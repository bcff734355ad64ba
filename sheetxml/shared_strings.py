"""The shared string table part and its rich-text runs."""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from sheetxml.xml_style_elements import XlsxColor, XlsxVal

NAMESPACE = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"

_TEXT_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\r": "&#xD;",
}
_ATTR_ESCAPES = {**_TEXT_ESCAPES, "\n": "&#xA;"}

_BOOL_PROPS = ("b", "i", "strike", "outline", "shadow", "condense", "extend")


def _escape_text(text: str) -> str:
    return "".join(_TEXT_ESCAPES.get(ch, ch) for ch in text)


def _escape_attr(text: str) -> str:
    return "".join(_ATTR_ESCAPES.get(ch, ch) for ch in text)


def _format_float(value: float) -> str:
    """Shortest text for a float, switching to exponent form as %g does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    exp = point - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _split_tag(tag: str) -> tuple[str, str]:
    if tag.startswith("{"):
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return "", tag


def _local(tag: str) -> str:
    return _split_tag(tag)[1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local(child.tag) == name)


def _parse_int(text: str) -> int:
    text = text.strip()
    return int(text) if text else 0


def _parse_float(text: str) -> float:
    text = text.strip()
    return float(text) if text else 0.0


def _parse_bool_prop(element: ET.Element) -> bool:
    value = element.get("val")
    if value is None:
        return True
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise ValueError(f'cannot read boolean property: "{value}" is not a valid boolean value')


def _color_from(element: ET.Element) -> XlsxColor:
    theme = element.get("theme")
    tint = element.get("tint")
    indexed = element.get("indexed")
    return XlsxColor(
        rgb=element.get("rgb", ""),
        theme=None if theme is None else _parse_int(theme),
        tint=0.0 if tint is None else _parse_float(tint),
        indexed=None if indexed is None else _parse_int(indexed),
    )


def _color_xml(color: XlsxColor) -> str:
    attrs = ""
    if color.rgb:
        attrs += f' rgb="{_escape_attr(color.rgb)}"'
    if color.theme is not None:
        attrs += f' theme="{color.theme}"'
    if color.tint != 0:
        attrs += f' tint="{_format_float(color.tint)}"'
    if color.indexed is not None:
        attrs += f' indexed="{color.indexed}"'
    return f"<color{attrs}></color>"


def _val_xml(tag: str, value: str) -> str:
    attrs = f' val="{_escape_attr(value)}"' if value else ""
    return f"<{tag}{attrs}></{tag}>"


def _text_xml(text: str) -> str:
    space = ' xml:space="preserve"' if need_preserve(text) else ""
    return f"<t{space}>{_escape_text(text)}</t>"


def need_preserve(text: str) -> bool:
    """Tell whether a text element needs xml:space="preserve" to keep its whitespace."""
    if not text:
        return False
    for ch in (text[0], text[-1]):
        code = ord(ch)
        if code <= 32 and code not in (9, 13):
            return True
    return "\n" in text


@dataclass
class RunProperties:
    r_font: XlsxVal | None = None
    charset: int | None = None
    family: int | None = None
    b: bool = False
    i: bool = False
    strike: bool = False
    outline: bool = False
    shadow: bool = False
    condense: bool = False
    extend: bool = False
    color: XlsxColor | None = None
    sz: float | None = None
    u: XlsxVal | None = None
    vert_align: XlsxVal | None = None
    scheme: XlsxVal | None = None

    @classmethod
    def _from_element(cls, element: ET.Element) -> RunProperties:
        props = cls()
        for child in element:
            name = _local(child.tag)
            value = child.get("val", "")
            if name in _BOOL_PROPS:
                setattr(props, name, _parse_bool_prop(child))
            elif name == "rFont":
                props.r_font = XlsxVal(value)
            elif name == "charset":
                props.charset = _parse_int(value)
            elif name == "family":
                props.family = _parse_int(value)
            elif name == "color":
                props.color = _color_from(child)
            elif name == "sz":
                props.sz = _parse_float(value)
            elif name == "u":
                props.u = XlsxVal(value)
            elif name == "vertAlign":
                props.vert_align = XlsxVal(value)
            elif name == "scheme":
                props.scheme = XlsxVal(value)
        return props

    def _to_xml(self) -> str:
        parts = ["<rPr>"]
        if self.r_font is not None:
            parts.append(_val_xml("rFont", self.r_font.val))
        if self.charset is not None:
            parts.append(f'<charset val="{self.charset}"></charset>')
        if self.family is not None:
            parts.append(f'<family val="{self.family}"></family>')
        for name in _BOOL_PROPS:
            if getattr(self, name):
                parts.append(f"<{name}></{name}>")
        if self.color is not None:
            parts.append(_color_xml(self.color))
        if self.sz is not None:
            parts.append(f'<sz val="{_format_float(self.sz)}"></sz>')
        if self.u is not None:
            parts.append(_val_xml("u", self.u.val))
        if self.vert_align is not None:
            parts.append(_val_xml("vertAlign", self.vert_align.val))
        if self.scheme is not None:
            parts.append(_val_xml("scheme", self.scheme.val))
        parts.append("</rPr>")
        return "".join(parts)


@dataclass
class Run:
    rpr: RunProperties | None = None
    text: str = ""

    @classmethod
    def _from_element(cls, element: ET.Element) -> Run:
        run = cls()
        for child in element:
            name = _local(child.tag)
            if name == "rPr":
                run.rpr = RunProperties._from_element(child)
            elif name == "t":
                run.text = child.text or ""
        return run

    def to_xml(self) -> str:
        props = self.rpr._to_xml() if self.rpr is not None else ""
        return f"<r>{props}{_text_xml(self.text)}</r>"


@dataclass
class StringItem:
    text: str | None = None
    runs: list[Run] | None = None

    @classmethod
    def _from_element(cls, element: ET.Element) -> StringItem:
        item = cls()
        for child in element:
            name = _local(child.tag)
            if name == "t":
                item.text = child.text or ""
            elif name == "r":
                if item.runs is None:
                    item.runs = []
                item.runs.append(Run._from_element(child))
        return item

    def to_xml(self) -> str:
        parts = ["<si>"]
        if self.text is not None:
            parts.append(_text_xml(self.text))
        parts.extend(run.to_xml() for run in self.runs or ())
        parts.append("</si>")
        return "".join(parts)


@dataclass
class SharedStringTable:
    count: int = 0
    unique_count: int = 0
    items: list[StringItem] = field(default_factory=list)

    @classmethod
    def from_xml(cls, data: str | bytes) -> SharedStringTable:
        """Parse a shared strings part."""
        root = ET.fromstring(data.lstrip())
        namespace, local = _split_tag(root.tag)
        if local != "sst" or namespace != NAMESPACE:
            raise ValueError(f"expected element <sst> in namespace {NAMESPACE}, found {root.tag}")
        return cls(
            count=_parse_int(root.get("count", "")),
            unique_count=_parse_int(root.get("uniqueCount", "")),
            items=[StringItem._from_element(si) for si in _children(root, "si")],
        )