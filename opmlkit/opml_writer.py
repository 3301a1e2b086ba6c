import logging
from typing import Final

import lxml.etree

from opmlkit.config import get_settings
from opmlkit.exceptions import SerializationError
from opmlkit.models import Document, Outline

logger = logging.getLogger(__name__)

XML_HEADER: Final = '<?xml version="1.0" encoding="UTF-8"?>\n'


def write_opml(document: Document, *, indent: str | None = None) -> str:
    """Serializes document to an indented XML string.

    Optional fields that are empty are omitted. `indent` defaults to the
    `indent` setting.

    Raises SerializationError if a value cannot be represented in XML.
    """
    if indent is None:
        indent = get_settings().indent

    try:
        root = lxml.etree.Element("opml", version=document.version)

        head = lxml.etree.SubElement(root, "head")
        for name, value in document.head.iter_xml_values():
            lxml.etree.SubElement(head, name).text = value

        _write_outlines(lxml.etree.SubElement(root, "body"), document.outlines)

        lxml.etree.indent(root, space=indent)
        content = XML_HEADER + lxml.etree.tostring(root, encoding="unicode")
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc

    logger.debug("Wrote OPML document: %d characters", len(content))
    return content


def to_json(document: Document, *, indent: int | None = None) -> str:
    """Serializes document to JSON, keyed by the OPML names.

    Raises SerializationError if outlines are nested deeper than the JSON
    serializer allows.
    """
    try:
        return document.model_dump_json(by_alias=True, indent=indent)
    except ValueError as exc:
        raise SerializationError(str(exc)) from exc


def _write_outlines(parent: lxml.etree._Element, outlines: list[Outline]) -> None:
    stack = [(parent, outlines)]
    while stack:
        element, children = stack.pop()
        for outline in children:
            stack.append(
                (
                    lxml.etree.SubElement(
                        element,
                        "outline",
                        {
                            name: value
                            for name, value in outline.iter_xml_values()
                            if name != "outline"
                        },
                    ),
                    outline.outlines,
                )
            )
