from __future__ import annotations

import logging
from typing import IO, Dict, Iterator, Optional, Union

from inimap.core.errors import EncodingError, MalformedHeaderError
from inimap.core.models import ParserOptions
from inimap.parsers.common import decode, find_first, iter_lines, normalize_key, strip_comment
from inimap.parsers.types import Document, LineKind, ParsedLine

logger = logging.getLogger(__name__)


def classify_lines(text: str, options: Optional[ParserOptions] = None) -> Iterator[ParsedLine]:
    """
    Turn raw text into header/entry records, skipping blank lines.

    Header:  "[" ... last "]" on the line; anything after that "]" is ignored.
    Entry:   first delimiter splits key/value; no delimiter means value None.
    Raises MalformedHeaderError for "[" with no "]" anywhere on the line.
    """
    opts = options or ParserOptions()
    fold = not opts.case_sensitive

    for idx, raw in iter_lines(text):
        line = strip_comment(raw, opts.comment_symbols) if opts.comment_symbols else raw
        line = line.strip()
        if not line:
            continue

        if line.startswith("["):
            end = line.rfind("]")
            if end == -1:
                raise MalformedHeaderError(idx, raw)
            name = normalize_key(line[1:end], case_insensitive=fold)
            yield ParsedLine(kind=LineKind.HEADER, name=name, line=idx)
            continue

        split_at = find_first(line, opts.delimiters)
        if split_at is None:
            yield ParsedLine(kind=LineKind.ENTRY, name=normalize_key(line, case_insensitive=fold), line=idx)
        else:
            key = normalize_key(line[:split_at], case_insensitive=fold)
            yield ParsedLine(kind=LineKind.ENTRY, name=key, value=line[split_at + 1:].strip(), line=idx)


def parse_ini(text: Union[str, bytes], *, options: Optional[ParserOptions] = None) -> Document:
    """
    Parse ini text into a Document.

    Either the whole input parses and a complete Document comes back, or
    a ParseError is raised and nothing is returned. Every call builds its
    own dicts; no state is shared between calls.
    """
    opts = options or ParserOptions()
    try:
        source = decode(text)
    except UnicodeDecodeError as e:
        raise EncodingError(f"input is not valid UTF-8: {e.reason}") from e

    default = opts.default_section_name
    sections: Dict[str, Dict[str, Optional[str]]] = {default: {}}
    current = sections[default]
    entries = 0

    for parsed in classify_lines(source, opts):
        if parsed.kind == LineKind.HEADER:
            # Revisiting a section resumes it rather than clearing it.
            current = sections.setdefault(parsed.name, {})
            logger.debug("line %d: section [%s]", parsed.line, parsed.name)
        else:
            current[parsed.name] = parsed.value
            entries += 1

    logger.debug("parsed %d section(s), %d key(s)", len(sections), entries)
    return Document(sections, default_section=default, case_sensitive=opts.case_sensitive)


def parse_stream(stream: IO, *, options: Optional[ParserOptions] = None) -> Document:
    """Read a text or binary file-like object to the end and parse it."""
    return parse_ini(stream.read(), options=options)

