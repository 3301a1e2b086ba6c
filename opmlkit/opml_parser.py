import functools
import logging

import lxml.etree
from pydantic import ValidationError

from opmlkit.exceptions import ParseError
from opmlkit.models import Document, Head, Outline
from opmlkit.xml_parser import XMLParser

logger = logging.getLogger(__name__)


def parse_opml(content: bytes) -> Document:
    """Parses OPML document.

    Elements and attributes not part of the OPML schema are ignored. A
    well-formed document with a root element other than `opml` returns an
    empty Document.

    Raises ParseError if the content is not well-formed XML.
    """
    return _opml_parser().parse(content)


def parse_json(content: str | bytes) -> Document:
    """Parses JSON rendition of an OPML document, as written by `to_json()`."""
    try:
        return Document.model_validate_json(content)
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


class _OPMLParser:
    """Parse OPML document."""

    def __init__(self) -> None:
        self._parser = XMLParser()
        self._head_names = Head.xml_names()
        self._outline_names = Outline.xml_names()

    def parse(self, content: bytes) -> Document:
        """Parse OPML content."""
        root = self._parser.parse(content)

        if (tag := self._parser.localname(root)) != "opml":
            logger.debug("Root element is <%s>, not <opml>", tag)
            return Document()

        document = Document(
            version=root.get("version", ""),
            head=self._parse_head(root),
            body={"outline": self._parse_body(root)},
        )
        logger.debug("Parsed OPML document: %d bytes", len(content))
        return document

    def _parse_head(self, root: lxml.etree._Element) -> Head:
        values: dict[str, str] = {}
        for head in self._parser.iterchildren(root, "head"):
            for element in self._parser.iterchildren(head):
                if (name := self._parser.localname(element)) in self._head_names:
                    values[name] = self._parser.text(element)
        return Head.model_validate(values)

    def _parse_body(self, root: lxml.etree._Element) -> list[Outline]:
        return [
            outline
            for body in self._parser.iterchildren(root, "body")
            for outline in self._parse_outlines(body)
        ]

    def _parse_outlines(self, parent: lxml.etree._Element) -> list[Outline]:
        outlines: list[Outline] = []
        stack = [(parent, outlines)]
        while stack:
            element, siblings = stack.pop()
            for child in self._parser.iterchildren(element, "outline"):
                outline = Outline.model_validate(
                    {
                        name: value
                        for name, value in self._parser.attributes(child).items()
                        if name in self._outline_names and name != "outline"
                    }
                )
                siblings.append(outline)
                stack.append((child, outline.outlines))
        return outlines


@functools.cache
def _opml_parser() -> _OPMLParser:
    return _OPMLParser()
