r"""
inimap: a small, permissive ini-style configuration parser.

    >>> doc = parse("x = 1\n[Server]\nHost = example.org\nverbose")
    >>> doc["server"]["host"]
    'example.org'
    >>> doc["server"]["verbose"] is None
    True
    >>> doc.default["x"]
    '1'
"""
from __future__ import annotations

from inimap.core.errors import (
    EncodingError,
    IniError,
    MalformedHeaderError,
    ParseError,
    SourceReadError,
)
from inimap.core.loader import LoadResult, load, load_many, safe_load, safe_load_many
from inimap.core.models import ParserOptions
from inimap.parsers import Document, Section, parse_stream
from inimap.parsers import parse_ini as parse

__version__ = "0.1.0"

__all__ = [
    "Document",
    "EncodingError",
    "IniError",
    "LoadResult",
    "MalformedHeaderError",
    "ParseError",
    "ParserOptions",
    "Section",
    "SourceReadError",
    "load",
    "load_many",
    "parse",
    "parse_stream",
    "safe_load",
    "safe_load_many",
]
