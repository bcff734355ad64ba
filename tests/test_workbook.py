import pytest

from sheetxml.workbook import (
    SHEET_STATE_HIDDEN,
    SHEET_STATE_VERY_HIDDEN,
    SHEET_STATE_VISIBLE,
    FileVersion,
    SheetEntry,
    Workbook,
    WorkbookPr,
    WorkbookView,
    worksheet_file_for_sheet,
)

WORKBOOK_XML = """<?xml version="1.0"
        encoding="UTF-8"
        standalone="yes"?>
        <workbook xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main"
                  xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">
          <fileVersion appName="xl"
                       lastEdited="4"
                       lowestEdited="4"
                       rupBuild="4506"/>
          <workbookPr defaultThemeVersion="124226" date1904="true"/>
          <bookViews>
            <workbookView xWindow="120"
                          yWindow="75"
                          windowWidth="15135"
                          windowHeight="7620"/>
          </bookViews>
          <sheets>
            <sheet name="Sheet1"
                   sheetId="1"
                   r:id="rId1"
                   state="visible"/>
            <sheet name="Sheet2"
                   sheetId="2"
                   r:id="rId2"
                   state="hidden"/>
            <sheet name="Sheet3"
                   sheetId="3"
                   r:id="rId3"
                   state="veryHidden"/>
          </sheets>
          <definedNames>
            <definedName name="monitors" comment="this is the comment"
                         description="give cells a name"
                         localSheetId="0">Sheet1!$A$1533</definedName>
          </definedNames>
          <calcPr calcId="125725"/>
          </workbook>"""


def test_unmarshal_workbook_xml():
    workbook = Workbook.from_xml(WORKBOOK_XML)
    assert workbook.file_version.app_name == "xl"
    assert workbook.file_version.last_edited == "4"
    assert workbook.file_version.lowest_edited == "4"
    assert workbook.file_version.rup_build == "4506"
    assert workbook.workbook_pr.default_theme_version == "124226"
    assert workbook.workbook_pr.date1904 is True
    assert len(workbook.book_views) == 1
    view = workbook.book_views[0]
    assert view.x_window == "120"
    assert view.y_window == "75"
    assert view.window_width == 15135
    assert view.window_height == 7620
    assert len(workbook.sheets) == 3
    sheet = workbook.sheets[0]
    assert sheet.rel_id == "rId1"
    assert sheet.name == "Sheet1"
    assert sheet.sheet_id == "1"
    assert sheet.state == "visible"
    assert len(workbook.defined_names) == 1
    dname = workbook.defined_names[0]
    assert dname.data == "Sheet1!$A$1533"
    assert dname.local_sheet_id == 0
    assert dname.name == "monitors"
    assert dname.comment == "this is the comment"
    assert dname.description == "give cells a name"
    assert workbook.calc_pr.calc_id == "125725"


def test_unmarshal_sheet_states():
    workbook = Workbook.from_xml(WORKBOOK_XML)
    assert [s.state for s in workbook.sheets] == [
        SHEET_STATE_VISIBLE,
        SHEET_STATE_HIDDEN,
        SHEET_STATE_VERY_HIDDEN,
    ]


def test_marshal_workbook():
    workbook = Workbook(
        file_version=FileVersion(app_name="xlsx"),
        workbook_pr=WorkbookPr(backup_file=False),
        book_views=[WorkbookView()],
        sheets=[SheetEntry(name="sheet1", sheet_id="1", rel_id="rId2")],
    )
    expected = (
        '<workbook xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">'
        '<fileVersion appName="xlsx"></fileVersion>'
        '<workbookPr date1904="false"></workbookPr>'
        "<workbookProtection></workbookProtection>"
        "<bookViews><workbookView></workbookView></bookViews>"
        '<sheets><sheet name="sheet1" sheetId="1" '
        'xmlns:relationships="http://schemas.openxmlformats.org/officeDocument/2006/relationships" '
        'relationships:id="rId2"></sheet></sheets>'
        "<definedNames></definedNames><calcPr></calcPr></workbook>"
    )
    assert workbook.to_xml() == expected


def test_round_trip():
    workbook = Workbook.from_xml(WORKBOOK_XML)
    assert Workbook.from_xml(workbook.to_xml()) == workbook


def test_numeric_boolean_attribute():
    data = (
        '<workbook xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">'
        '<workbookPr date1904="1" backupFile="0"/></workbook>'
    )
    workbook = Workbook.from_xml(data)
    assert workbook.workbook_pr.date1904 is True
    assert workbook.workbook_pr.backup_file is False


def test_invalid_boolean_attribute_raises():
    data = (
        '<workbook xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">'
        '<workbookPr date1904="sometimes"/></workbook>'
    )
    with pytest.raises(ValueError):
        Workbook.from_xml(data)


def test_wrong_root_raises():
    with pytest.raises(ValueError):
        Workbook.from_xml("<workbook/>")


def test_worksheet_file_from_relationship_map():
    sheet = SheetEntry(name="A", sheet_id="1", rel_id="rId1")
    worksheets = {"sheet3": "third", "sheet1": "first"}
    assert worksheet_file_for_sheet(sheet, worksheets, {"rId1": "sheet3"}) == "third"


def test_worksheet_file_from_sheet_id():
    sheet = SheetEntry(name="A", sheet_id="2", rel_id="rId9")
    assert worksheet_file_for_sheet(sheet, {"sheet2": "second"}, {}) == "second"


def test_worksheet_file_from_relationship_id_when_no_sheet_id():
    sheet = SheetEntry(name="A", rel_id="7")
    assert worksheet_file_for_sheet(sheet, {"sheet7": "seventh"}, {}) == "seventh"


def test_worksheet_file_missing():
    sheet = SheetEntry(name="A", sheet_id="4")
    assert worksheet_file_for_sheet(sheet, {"sheet1": "first"}, {}) is None