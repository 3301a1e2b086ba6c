from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class OPMLModel(BaseModel):
    """Base for records mapped onto an OPML element.

    Each field's alias is its XML (and JSON) name. String fields equal to ""
    are left out of serialized output unless listed in `required_fields`.
    """

    model_config = ConfigDict(populate_by_name=True)

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def xml_names(cls) -> dict[str, str]:
        """Returns mapping of XML name to field name."""
        return {field.alias or name: name for name, field in cls.model_fields.items()}

    def is_omitted(self, name: str) -> bool:
        """Returns True if field is left out of serialized output."""
        return name not in self.required_fields and getattr(self, name) == ""

    def iter_xml_values(self) -> Iterator[tuple[str, Any]]:
        """Iterates XML name and value of each field that is not omitted."""
        for xml_name, name in self.xml_names().items():
            if not self.is_omitted(name):
                yield xml_name, getattr(self, name)

    @model_serializer(mode="wrap")
    def _omit_empty(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if self.is_omitted(name):
                data.pop(field.alias if info.by_alias and field.alias else name, None)
        return data


class Outline(OPMLModel):
    """Single node in the outline hierarchy."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"text", "outlines"})

    text: str = ""
    type: str = ""
    is_comment: str = Field("", alias="isComment")
    is_breakpoint: str = Field("", alias="isBreakpoint")
    created: str = ""
    category: str = ""
    xml_url: str = Field("", alias="xmlUrl")
    html_url: str = Field("", alias="htmlUrl")
    url: str = ""
    language: str = ""
    title: str = ""
    version: str = ""
    description: str = ""

    outlines: list["Outline"] = Field(default_factory=list, alias="outline")

    def iter_outlines(self) -> Iterator["Outline"]:
        """Iterates all descendant outlines in document order."""
        return _walk(self.outlines)


class Head(OPMLModel):
    """Document metadata. All values are kept verbatim."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"title"})

    title: str = ""
    date_created: str = Field("", alias="dateCreated")
    date_modified: str = Field("", alias="dateModified")
    owner_name: str = Field("", alias="ownerName")
    owner_email: str = Field("", alias="ownerEmail")
    owner_id: str = Field("", alias="ownerId")
    docs: str = ""
    expansion_state: str = Field("", alias="expansionState")
    vert_scroll_state: str = Field("", alias="vertScrollState")
    window_top: str = Field("", alias="windowTop")
    window_bottom: str = Field("", alias="windowBottom")
    window_left: str = Field("", alias="windowLeft")
    window_right: str = Field("", alias="windowRight")


class Body(OPMLModel):
    """Container of the top-level outlines."""

    outlines: list[Outline] = Field(default_factory=list, alias="outline")


class Document(OPMLModel):
    """Root of an OPML document."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"version"})

    version: str = ""
    head: Head = Field(default_factory=Head)
    body: Body = Field(default_factory=Body)

    @property
    def outlines(self) -> list[Outline]:
        """Returns the top-level outlines."""
        return self.body.outlines

    def iter_outlines(self) -> Iterator[Outline]:
        """Iterates every outline at any depth in document order."""
        return _walk(self.body.outlines)

    def iter_feeds(self) -> Iterator[Outline]:
        """Iterates outlines with a feed URL."""
        return (outline for outline in self.iter_outlines() if outline.xml_url)


def _walk(outlines: Iterable[Outline]) -> Iterator[Outline]:
    stack = list(reversed(list(outlines)))
    while stack:
        outline = stack.pop()
        yield outline
        stack.extend(reversed(outline.outlines))
