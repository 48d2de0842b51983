from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional

from inimap.parsers.common import normalize_key


class LineKind(str, Enum):
    HEADER = "header"
    ENTRY = "entry"


@dataclass(frozen=True)
class ParsedLine:
    """ A classified, normalized line from an ini source."""
    kind: LineKind
    name: str
    value: Optional[str] = None
    line: Optional[int] = None


class Section(Mapping[str, Optional[str]]):
    """
    Read-only view of one section: key -> value.

    A value of None means the key was written bare (no delimiter);
    "" means the delimiter was there with nothing after it.
    """

    __slots__ = ("name", "_entries")

    def __init__(self, name: str, entries: Optional[Dict[str, Optional[str]]] = None) -> None:
        self.name = name
        self._entries: Dict[str, Optional[str]] = dict(entries or {})

    def __getitem__(self, key: str) -> Optional[str]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def has_value(self, key: str) -> bool:
        return self._entries.get(key) is not None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return dict(self._entries)

    def __repr__(self) -> str:
        return f"Section({self.name!r}, {self._entries!r})"


class Document(Mapping[str, Section]):
    """
    Parse result: section name -> Section.

    The reserved default section is always present. Lookups through
    ``get_value`` normalize names the same way the parser does; plain
    indexing expects already-normalized names.
    """

    __slots__ = ("default_section", "case_sensitive", "_sections")

    def __init__(
        self,
        sections: Dict[str, Dict[str, Optional[str]]],
        *,
        default_section: str = "default",
        case_sensitive: bool = False,
    ) -> None:
        self.default_section = default_section
        self.case_sensitive = case_sensitive
        self._sections: Dict[str, Section] = {
            name: Section(name, entries) for name, entries in sections.items()
        }
        if default_section not in self._sections:
            self._sections = {default_section: Section(default_section), **self._sections}

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    @property
    def default(self) -> Section:
        return self._sections[self.default_section]

    def sections(self) -> List[str]:
        return list(self._sections)

    def _norm(self, name: str) -> str:
        return normalize_key(name, case_insensitive=not self.case_sensitive)

    def get_value(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        sec = self._sections.get(self._norm(section))
        if sec is None:
            return fallback
        k = self._norm(key)
        if k not in sec:
            return fallback
        return sec[k]

    def has_key(self, section: str, key: str) -> bool:
        sec = self._sections.get(self._norm(section))
        return sec is not None and self._norm(key) in sec

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {name: sec.to_dict() for name, sec in self._sections.items()}

    def __repr__(self) -> str:
        return f"Document({self.to_dict()!r})"
