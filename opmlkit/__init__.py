"""
OPML parsing and serialization.

Parses OPML 1.0 and 2.0 documents from bytes, URLs or files into a tree of
records, and writes them back to XML or JSON.
"""

import logging

from .exceptions import (
    NetworkError,
    OPMLError,
    ParseError,
    ReadError,
    SerializationError,
)
from .models import Body, Document, Head, Outline
from .opml_fetcher import fetch_opml, read_opml
from .opml_parser import parse_json, parse_opml
from .opml_writer import to_json, write_opml

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Document",
    "Head",
    "Body",
    "Outline",
    "parse_opml",
    "parse_json",
    "fetch_opml",
    "read_opml",
    "write_opml",
    "to_json",
    "OPMLError",
    "ParseError",
    "NetworkError",
    "ReadError",
    "SerializationError",
]
