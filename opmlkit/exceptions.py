class OPMLError(Exception):
    """Base OPML exception."""


class ParseError(OPMLError, ValueError):
    """Content is not a well-formed XML (or JSON) document."""

    def __init__(
        self, *args, lineno: int | None = None, offset: int | None = None
    ) -> None:
        self.lineno = lineno
        self.offset = offset
        super().__init__(*args)


class NetworkError(OPMLError):
    """Request could not be completed at the transport level."""

    def __init__(self, *args, url: str = "") -> None:
        self.url = url
        super().__init__(*args)


class ReadError(OPMLError, OSError):
    """File or response body could not be read."""

    def __init__(self, *args, path: str = "", url: str = "") -> None:
        self.path = path
        self.url = url
        super().__init__(*args)


class SerializationError(OPMLError):
    """Document could not be serialized."""
