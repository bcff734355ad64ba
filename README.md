# sheetxml

`sheetxml` models several of the XML parts found inside an XLSX (Office Open
XML spreadsheet) file. It uses only the standard library.

| Module | What it does |
| --- | --- |
| `sheetxml.xml_style_elements` | Element classes for the styles part (`XlsxFont`, `XlsxFill`, `XlsxPatternFill`, `XlsxBorder`, `XlsxLine`, `XlsxColor`, `XlsxAlignment`, `XlsxXf`, `XlsxNumFmt`, `XlsxCellStyle`, `XlsxColors`). Each can compare itself with `matches()` and most can write their XML with `to_xml()`. Also has the built-in number format table and `builtin_number_format()`. |
| `sheetxml.style` | A high-level `Style` (with `Border`, `Fill`, `Font`, `Alignment`), `new_style()` with defaults, `set_default_font()`, and `Style.make_xlsx_style_elements()`, which converts a style into the font, fill, border and xf elements. |
| `sheetxml.stylesheet` | `StyleSheet`: holds fonts, fills, borders and cell formats, adds them without duplicates, registers number formats, resolves an xf index back into a `Style` with `get_style()`, and writes the whole `styles.xml` text with `marshal()`. |
| `sheetxml.theme` | `ThemeXml.from_xml()` reads the colour scheme of a theme part; `Theme.theme_color()` returns the ARGB value of a theme colour, lightened or darkened by a tint. |
| `sheetxml.shared_strings` | `SharedStringTable.from_xml()` reads `sharedStrings.xml`, including rich-text runs (`StringItem`, `Run`, `RunProperties`). `StringItem.to_xml()` and `Run.to_xml()` write them back; `need_preserve()` decides when `xml:space="preserve"` is needed. |
| `sheetxml.workbook` | `Workbook.from_xml()` and `Workbook.to_xml()` read and write `workbook.xml` (file version, properties, views, sheets, defined names, calculation settings). `worksheet_file_for_sheet()` finds the worksheet part a sheet entry refers to. |
| `sheetxml.content_types` | `ContentTypes.to_xml()` writes `[Content_Types].xml`; `make_default_content_types()` returns the entries a new workbook package needs. |
| `sheetxml.templates` | Fixed default parts as strings: `RELS_DOT_RELS`, `DOCPROPS_APP`, `DOCPROPS_CORE` and `XL_THEME_THEME`. |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Examples

Build a style sheet, add a cell format and write it out:

```python
from sheetxml.stylesheet import StyleSheet
from sheetxml.style import new_style

styles = StyleSheet()
styles.reset()
style = new_style()
style.font.bold = True
font, fill, border, xf = style.make_xlsx_style_elements()
xf.font_id = styles.add_font(font)
xf.fill_id = styles.add_fill(fill)
xf.border_id = styles.add_border(border)
index = styles.add_cell_xf(xf)
xml_text = styles.marshal()
```

Built-in number format codes get their fixed ids; any other code gets a new
id starting at 164:

```python
styles.new_num_fmt("0.00").num_fmt_id      # 2
styles.new_num_fmt("hh:mm:ss").num_fmt_id  # 164
```

Read a theme and look up a colour:

```python
from sheetxml.theme import ThemeXml, Theme

theme = Theme.from_theme_xml(ThemeXml.from_xml(theme_bytes))
theme.theme_color(0, 0.0)   # "FF" followed by the lt1 colour
```

Read shared strings and a workbook:

```python
from sheetxml.shared_strings import SharedStringTable
from sheetxml.workbook import Workbook

sst = SharedStringTable.from_xml(shared_strings_bytes)
texts = [item.text for item in sst.items]
workbook = Workbook.from_xml(workbook_bytes)
names = [sheet.name for sheet in workbook.sheets]
```

Write the default content types:

```python
from sheetxml.content_types import make_default_content_types

xml_text = make_default_content_types().to_xml()
```

## What it does not do

- It does not open or save `.xlsx` files. Reading and writing the zip
  package, and deciding which part goes where, is left to the caller.
- It has no model of worksheets, rows or cells, and does not read or write
  worksheet parts.
- `StyleSheet` writes `styles.xml` but cannot read one; the theme part is
  read only; the content types part is written only.
- There is no command-line tool.

## Running the tests

```
pytest
```