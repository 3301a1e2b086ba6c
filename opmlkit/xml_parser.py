from collections.abc import Iterator

import lxml.etree

from opmlkit.exceptions import ParseError


class XMLParser:
    """Strict XML parser with lookups by local (namespace-free) name.

    A fresh lxml parser is created for each document, so instances can be
    shared between threads.
    """

    def parse(self, content: bytes) -> lxml.etree._Element:
        """Parses document and returns the root element.

        Raises ParseError if the content is not well-formed XML.
        """
        try:
            root = lxml.etree.fromstring(content, parser=self._make_parser())
        except lxml.etree.XMLSyntaxError as exc:
            raise ParseError(exc.msg, lineno=exc.lineno, offset=exc.offset) from exc
        except ValueError as exc:
            raise ParseError(str(exc)) from exc

        if root is None:
            raise ParseError("Document is empty")
        return root

    def localname(self, element: lxml.etree._Element) -> str:
        """Returns tag name without any namespace."""
        return lxml.etree.QName(element).localname

    def iterchildren(
        self, element: lxml.etree._Element, name: str | None = None
    ) -> Iterator[lxml.etree._Element]:
        """Iterates child elements in document order, optionally matching local name."""
        if name is None:
            yield from element.xpath("*")
        else:
            yield from element.xpath("*[local-name() = $name]", name=name)

    def text(self, element: lxml.etree._Element) -> str:
        """Returns all character data directly inside the element, unmodified."""
        return "".join(element.xpath("text()"))

    def attributes(self, element: lxml.etree._Element) -> dict[str, str]:
        """Returns attributes without a namespace."""
        return {
            name: value
            for name, value in element.attrib.items()
            if not name.startswith("{")
        }

    def _make_parser(self) -> lxml.etree.XMLParser:
        return lxml.etree.XMLParser(
            no_network=True,
            resolve_entities=False,
            huge_tree=True,
            recover=False,
            remove_comments=True,
            remove_pis=True,
        )
