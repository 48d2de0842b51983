from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple, Union

_BOM = "\ufeff"


def decode(data: Union[str, bytes]) -> str:
    """
    Accept text or UTF-8 bytes. A leading BOM is dropped either way.
    Raises UnicodeDecodeError for undecodable bytes.
    """
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return text


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, raw_line), 1-based.

    Splits on "\\n" only; a "\\r" left over from "\\r\\n" is trimmed later
    along with the rest of the edge whitespace.
    """
    for idx, raw in enumerate(text.split("\n"), start=1):
        yield idx, raw


def find_first(line: str, symbols: Iterable[str]) -> Optional[int]:
    """Index of the earliest occurrence of any of `symbols`, or None."""
    best: Optional[int] = None
    for s in symbols:
        i = line.find(s)
        if i != -1 and (best is None or i < best):
            best = i
    return best


def strip_comment(line: str, symbols: Iterable[str]) -> str:
    idx = find_first(line, symbols)
    return line if idx is None else line[:idx]


def normalize_key(key: str, *, case_insensitive: bool) -> str:
    k = (key or "").strip()
    return k.lower() if case_insensitive else k
