"""Theme colour scheme parsing and theme colour resolution."""

from __future__ import annotations

import colorsys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

_COLOR_ORDER = (
    "lt1", "dk1", "lt2", "dk2", "accent1", "accent2", "accent3",
    "accent4", "accent5", "accent6", "hlink", "folHlink",
)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    return next((c for c in element if _local(c.tag) == name), None)


@dataclass
class SysColor:
    val: str = ""
    last_clr: str = ""


@dataclass
class SrgbColor:
    val: str = ""


@dataclass
class ColorSchemeEntry:
    name: str
    sys_clr: SysColor | None = None
    srgb_clr: SrgbColor | None = None


@dataclass
class ThemeXml:
    color_scheme_name: str = ""
    color_scheme: list[ColorSchemeEntry] = field(default_factory=list)

    @classmethod
    def from_xml(cls, data: str | bytes) -> ThemeXml:
        """Parse a theme part, keeping its colour scheme."""
        root = ET.fromstring(data.lstrip())
        theme = cls()
        elements = _child(root, "themeElements")
        if elements is None:
            return theme
        scheme = _child(elements, "clrScheme")
        if scheme is None:
            return theme
        theme.color_scheme_name = scheme.get("name", "")
        for entry in scheme:
            sys_el = _child(entry, "sysClr")
            srgb_el = _child(entry, "srgbClr")
            theme.color_scheme.append(
                ColorSchemeEntry(
                    name=_local(entry.tag),
                    sys_clr=None if sys_el is None
                    else SysColor(sys_el.get("val", ""), sys_el.get("lastClr", "")),
                    srgb_clr=None if srgb_el is None else SrgbColor(srgb_el.get("val", "")),
                )
            )
        return theme


@dataclass
class Theme:
    colors: list[str]

    @classmethod
    def from_theme_xml(cls, theme_xml: ThemeXml) -> Theme:
        color_map: dict[str, str] = {}
        for entry in theme_xml.color_scheme:
            if entry.sys_clr is not None:
                rgb = entry.sys_clr.last_clr
            else:
                rgb = entry.srgb_clr.val if entry.srgb_clr is not None else ""
            color_map[entry.name] = rgb
        return cls([color_map.get(name, "") for name in _COLOR_ORDER])

    def theme_color(self, index: int, tint: float) -> str:
        """Return the ARGB value of a theme colour, lightened or darkened by tint."""
        base = self.colors[index]
        if tint == 0:
            return "FF" + base
        r, g, b = (int(base[i:i + 2], 16) / 255 for i in (0, 2, 4))
        h, lum, s = colorsys.rgb_to_hls(r, g, b)
        if tint < 0:
            lum *= 1 + tint
        else:
            lum = lum * (1 - tint) + tint
        lum = min(max(lum, 0.0), 1.0)
        out = (round(c * 255) for c in colorsys.hls_to_rgb(h, lum, s))
        return "FF" + "".join(f"{c:02X}" for c in out)