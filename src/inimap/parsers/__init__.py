from __future__ import annotations

from inimap.parsers.ini_parser import classify_lines, parse_ini, parse_stream
from inimap.parsers.types import Document, LineKind, ParsedLine, Section

__all__ = [
    "Document",
    "LineKind",
    "ParsedLine",
    "Section",
    "classify_lines",
    "parse_ini",
    "parse_stream",
]
