"""Models for the XML parts of XLSX files: styles, themes, shared strings, workbook, content types."""

__version__ = "0.1.0"

__all__ = [
    "content_types",
    "shared_strings",
    "style",
    "stylesheet",
    "templates",
    "theme",
    "workbook",
    "xml_style_elements",
]