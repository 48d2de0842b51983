from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    MISSING = 3


class IniError(Exception):
    """
    Base error for everything inimap reports.

    ``source`` is a label for where the text came from (usually a path);
    it is filled in by the loader, the parser itself only sees text.
    """

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def with_source(self, source: str) -> "IniError":
        self.source = source
        return self

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ParseError(IniError):
    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        source: Optional[str] = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, source=source)
        self.line_number = line_number


class MalformedHeaderError(ParseError):
    """A line opens a section header with `[` but never closes it."""

    def __init__(self, line_number: int, line: str = "", *, source: Optional[str] = None) -> None:
        super().__init__(
            "found opening bracket for section name but no closing bracket",
            line_number=line_number,
            source=source,
        )
        self.line = line


class EncodingError(ParseError):
    pass


class SourceReadError(IniError):
    """The input could not be read; wraps the underlying OSError."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"could not read input: {cause}", source=path)
        self.path = path
        self.cause = cause
