"""The workbook part: sheet list, views, defined names and calculation settings."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sheetxml.shared_strings import _escape_attr, _escape_text, _format_float

NAMESPACE = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
RELATIONSHIPS_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

SHEET_STATE_VISIBLE = "visible"
SHEET_STATE_HIDDEN = "hidden"
SHEET_STATE_VERY_HIDDEN = "veryHidden"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _split_tag(tag: str) -> tuple[str, str]:
    if tag.startswith("{"):
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return "", tag


def _local(tag: str) -> str:
    return _split_tag(tag)[1]


def _int(element: ET.Element, name: str) -> int:
    text = element.get(name, "").strip()
    return int(text) if text else 0


def _float(element: ET.Element, name: str) -> float:
    text = element.get(name, "").strip()
    return float(text) if text else 0.0


def _bool(element: ET.Element, name: str) -> bool:
    text = element.get(name, "").strip()
    if not text or text in _FALSE:
        return False
    if text in _TRUE:
        return True
    raise ValueError(f"invalid boolean value {text!r} for attribute {name}")


def _attr_text(value: Any) -> str:
    """Format an attribute value the way the workbook part writes it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _attrs(pairs: list[tuple[str, str]]) -> str:
    return "".join(f' {name}="{_escape_attr(value)}"' for name, value in pairs)


def _optional(pairs: list[tuple[str, Any]]) -> list[tuple[str, str]]:
    """Keep only attributes with a non-empty value, formatted as text."""
    return [(name, _attr_text(value)) for name, value in pairs if value]


@dataclass
class FileVersion:
    app_name: str = ""
    last_edited: str = ""
    lowest_edited: str = ""
    rup_build: str = ""

    @classmethod
    def _from_element(cls, element: ET.Element) -> FileVersion:
        return cls(
            app_name=element.get("appName", ""),
            last_edited=element.get("lastEdited", ""),
            lowest_edited=element.get("lowestEdited", ""),
            rup_build=element.get("rupBuild", ""),
        )

    def _to_xml(self) -> str:
        attrs = _optional([
            ("appName", self.app_name),
            ("lastEdited", self.last_edited),
            ("lowestEdited", self.lowest_edited),
            ("rupBuild", self.rup_build),
        ])
        return f"<fileVersion{_attrs(attrs)}></fileVersion>"


@dataclass
class WorkbookPr:
    default_theme_version: str = ""
    backup_file: bool = False
    show_objects: str = ""
    date1904: bool = False

    @classmethod
    def _from_element(cls, element: ET.Element) -> WorkbookPr:
        return cls(
            default_theme_version=element.get("defaultThemeVersion", ""),
            backup_file=_bool(element, "backupFile"),
            show_objects=element.get("showObjects", ""),
            date1904=_bool(element, "date1904"),
        )

    def _to_xml(self) -> str:
        attrs = _optional([
            ("defaultThemeVersion", self.default_theme_version),
            ("backupFile", self.backup_file),
            ("showObjects", self.show_objects),
        ])
        attrs.append(("date1904", _attr_text(self.date1904)))
        return f"<workbookPr{_attrs(attrs)}></workbookPr>"


@dataclass
class WorkbookView:
    active_tab: int = 0
    first_sheet: int = 0
    show_horizontal_scroll: bool = False
    show_vertical_scroll: bool = False
    show_sheet_tabs: bool = False
    tab_ratio: int = 0
    window_height: int = 0
    window_width: int = 0
    x_window: str = ""
    y_window: str = ""

    @classmethod
    def _from_element(cls, element: ET.Element) -> WorkbookView:
        return cls(
            active_tab=_int(element, "activeTab"),
            first_sheet=_int(element, "firstSheet"),
            show_horizontal_scroll=_bool(element, "showHorizontalScroll"),
            show_vertical_scroll=_bool(element, "showVerticalScroll"),
            show_sheet_tabs=_bool(element, "showSheetTabs"),
            tab_ratio=_int(element, "tabRatio"),
            window_height=_int(element, "windowHeight"),
            window_width=_int(element, "windowWidth"),
            x_window=element.get("xWindow", ""),
            y_window=element.get("yWindow", ""),
        )

    def _to_xml(self) -> str:
        attrs = _optional([
            ("activeTab", self.active_tab),
            ("firstSheet", self.first_sheet),
            ("showHorizontalScroll", self.show_horizontal_scroll),
            ("showVerticalScroll", self.show_vertical_scroll),
            ("showSheetTabs", self.show_sheet_tabs),
            ("tabRatio", self.tab_ratio),
            ("windowHeight", self.window_height),
            ("windowWidth", self.window_width),
            ("xWindow", self.x_window),
            ("yWindow", self.y_window),
        ])
        return f"<workbookView{_attrs(attrs)}></workbookView>"


@dataclass
class SheetEntry:
    name: str = ""
    sheet_id: str = ""
    rel_id: str = ""
    state: str = ""

    @classmethod
    def _from_element(cls, element: ET.Element) -> SheetEntry:
        return cls(
            name=element.get("name", ""),
            sheet_id=element.get("sheetId", ""),
            rel_id=element.get(f"{{{RELATIONSHIPS_NAMESPACE}}}id", ""),
            state=element.get("state", ""),
        )

    def _to_xml(self) -> str:
        attrs = _attrs(_optional([("name", self.name), ("sheetId", self.sheet_id)]))
        if self.rel_id:
            attrs += _attrs([
                ("xmlns:relationships", RELATIONSHIPS_NAMESPACE),
                ("relationships:id", self.rel_id),
            ])
        attrs += _attrs(_optional([("state", self.state)]))
        return f"<sheet{attrs}></sheet>"


@dataclass
class DefinedName:
    name: str = ""
    data: str = ""
    comment: str = ""
    custom_menu: str = ""
    description: str = ""
    help: str = ""
    shortcut_key: str = ""
    status_bar: str = ""
    local_sheet_id: int = 0
    function_group_id: int = 0
    function: bool = False
    hidden: bool = False
    vb_procedure: bool = False
    publish_to_server: bool = False
    workbook_parameter: bool = False
    xlm: bool = False

    @classmethod
    def _from_element(cls, element: ET.Element) -> DefinedName:
        return cls(
            name=element.get("name", ""),
            data="".join(element.itertext()),
            comment=element.get("comment", ""),
            custom_menu=element.get("customMenu", ""),
            description=element.get("description", ""),
            help=element.get("help", ""),
            shortcut_key=element.get("shortcutKey", ""),
            status_bar=element.get("statusBar", ""),
            local_sheet_id=_int(element, "localSheetId"),
            function_group_id=_int(element, "functionGroupId"),
            function=_bool(element, "function"),
            hidden=_bool(element, "hidden"),
            vb_procedure=_bool(element, "vbProcedure"),
            publish_to_server=_bool(element, "publishToServer"),
            workbook_parameter=_bool(element, "workbookParameter"),
            xlm=_bool(element, "xml"),
        )

    def _to_xml(self) -> str:
        attrs = [("name", self.name)] + _optional([
            ("comment", self.comment),
            ("customMenu", self.custom_menu),
            ("description", self.description),
            ("help", self.help),
            ("shortcutKey", self.shortcut_key),
            ("statusBar", self.status_bar),
            ("localSheetId", self.local_sheet_id),
            ("functionGroupId", self.function_group_id),
            ("function", self.function),
            ("hidden", self.hidden),
            ("vbProcedure", self.vb_procedure),
            ("publishToServer", self.publish_to_server),
            ("workbookParameter", self.workbook_parameter),
            ("xml", self.xlm),
        ])
        return f"<definedName{_attrs(attrs)}>{_escape_text(self.data)}</definedName>"


@dataclass
class CalcPr:
    calc_id: str = ""
    iterate_count: int = 0
    ref_mode: str = ""
    iterate: bool = False
    iterate_delta: float = 0.0

    @classmethod
    def _from_element(cls, element: ET.Element) -> CalcPr:
        return cls(
            calc_id=element.get("calcId", ""),
            iterate_count=_int(element, "iterateCount"),
            ref_mode=element.get("refMode", ""),
            iterate=_bool(element, "iterate"),
            iterate_delta=_float(element, "iterateDelta"),
        )

    def _to_xml(self) -> str:
        attrs = _optional([
            ("calcId", self.calc_id),
            ("iterateCount", self.iterate_count),
            ("refMode", self.ref_mode),
            ("iterate", self.iterate),
            ("iterateDelta", float(self.iterate_delta)),
        ])
        return f"<calcPr{_attrs(attrs)}></calcPr>"


@dataclass
class Workbook:
    file_version: FileVersion = field(default_factory=FileVersion)
    workbook_pr: WorkbookPr = field(default_factory=WorkbookPr)
    book_views: list[WorkbookView] = field(default_factory=list)
    sheets: list[SheetEntry] = field(default_factory=list)
    defined_names: list[DefinedName] = field(default_factory=list)
    calc_pr: CalcPr = field(default_factory=CalcPr)

    @classmethod
    def from_xml(cls, data: str | bytes) -> Workbook:
        """Parse a workbook part."""
        root = ET.fromstring(data.lstrip())
        namespace, local = _split_tag(root.tag)
        if local != "workbook" or namespace != NAMESPACE:
            raise ValueError(
                f"expected element <workbook> in namespace {NAMESPACE}, found {root.tag}"
            )
        workbook = cls()
        for child in root:
            name = _local(child.tag)
            if name == "fileVersion":
                workbook.file_version = FileVersion._from_element(child)
            elif name == "workbookPr":
                workbook.workbook_pr = WorkbookPr._from_element(child)
            elif name == "bookViews":
                workbook.book_views.extend(
                    WorkbookView._from_element(view)
                    for view in child if _local(view.tag) == "workbookView"
                )
            elif name == "sheets":
                workbook.sheets.extend(
                    SheetEntry._from_element(sheet)
                    for sheet in child if _local(sheet.tag) == "sheet"
                )
            elif name == "definedNames":
                workbook.defined_names.extend(
                    DefinedName._from_element(dn)
                    for dn in child if _local(dn.tag) == "definedName"
                )
            elif name == "calcPr":
                workbook.calc_pr = CalcPr._from_element(child)
        return workbook

    def to_xml(self) -> str:
        """Serialise the workbook element, without an XML declaration."""
        return "".join([
            f'<workbook xmlns="{NAMESPACE}">',
            self.file_version._to_xml(),
            self.workbook_pr._to_xml(),
            "<workbookProtection></workbookProtection>",
            "<bookViews>",
            *(view._to_xml() for view in self.book_views),
            "</bookViews>",
            "<sheets>",
            *(sheet._to_xml() for sheet in self.sheets),
            "</sheets>",
            "<definedNames>",
            *(dn._to_xml() for dn in self.defined_names),
            "</definedNames>",
            self.calc_pr._to_xml(),
            "</workbook>",
        ])


def worksheet_file_for_sheet(sheet: SheetEntry, worksheets: Mapping[str, Any],
                             sheet_xml_map: Mapping[str, str]) -> Any:
    """Find the worksheet part a sheet entry refers to, or None if there is none."""
    if sheet.rel_id in sheet_xml_map:
        sheet_name = sheet_xml_map[sheet.rel_id]
    elif sheet.sheet_id:
        sheet_name = f"sheet{sheet.sheet_id}"
    else:
        sheet_name = f"sheet{sheet.rel_id}"
    return worksheets.get(sheet_name)