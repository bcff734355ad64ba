"""The content types part that maps package parts to their media types."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheetxml.shared_strings import _escape_attr

NAMESPACE = "http://schemas.openxmlformats.org/package/2006/content-types"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

RELATIONSHIPS_TYPE = "application/vnd.openxmlformats-package.relationships+xml"


@dataclass
class Override:
    """A content type given to one named part."""

    part_name: str = ""
    content_type: str = ""

    def _to_xml(self) -> str:
        return (
            f'<Override PartName="{_escape_attr(self.part_name)}" '
            f'ContentType="{_escape_attr(self.content_type)}"></Override>'
        )


@dataclass
class Default:
    """A content type given to every part with a file extension."""

    extension: str = ""
    content_type: str = ""

    def _to_xml(self) -> str:
        return (
            f'<Default Extension="{_escape_attr(self.extension)}" '
            f'ContentType="{_escape_attr(self.content_type)}"></Default>'
        )


@dataclass
class ContentTypes:
    overrides: list[Override] = field(default_factory=list)
    defaults: list[Default] = field(default_factory=list)

    def to_xml(self) -> str:
        """Serialise the Types element, without an XML declaration."""
        return "".join([
            f'<Types xmlns="{NAMESPACE}">',
            *(override._to_xml() for override in self.overrides),
            *(default._to_xml() for default in self.defaults),
            "</Types>",
        ])


def make_default_content_types() -> ContentTypes:
    """Return the content types every generated workbook package needs."""
    return ContentTypes(
        overrides=[
            Override("/_rels/.rels", RELATIONSHIPS_TYPE),
            Override(
                "/docProps/app.xml",
                "application/vnd.openxmlformats-officedocument.extended-properties+xml",
            ),
            Override(
                "/docProps/core.xml",
                "application/vnd.openxmlformats-package.core-properties+xml",
            ),
            Override("/xl/_rels/workbook.xml.rels", RELATIONSHIPS_TYPE),
            Override(
                "/xl/sharedStrings.xml",
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sharedStrings+xml",
            ),
            Override(
                "/xl/styles.xml",
                "application/vnd.openxmlformats-officedocument.spreadsheetml.styles+xml",
            ),
            Override(
                "/xl/workbook.xml",
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml",
            ),
            Override(
                "/xl/theme/theme1.xml",
                "application/vnd.openxmlformats-officedocument.theme+xml",
            ),
        ],
        defaults=[
            Default("rels", RELATIONSHIPS_TYPE),
            Default("xml", "application/xml"),
        ],
    )