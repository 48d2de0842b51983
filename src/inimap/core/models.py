from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


# ================================
# Enums
# ================================


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    INI = "ini"


# ================================
# Parser options (defaults only)
# ================================

DEFAULT_SECTION = "default"
DEFAULT_DELIMITERS = ["="]

# Header brackets can never act as delimiters or comment markers.
_RESERVED = {"[", "]"}


class ParserOptions(BaseModel):
    """
    Knobs for the ini parser. The defaults give the plain format:
    "=" as the only delimiter, no comments, case-insensitive names.
    Repo/global/CLI overrides are merged by core/config.py.
    """

    default_section: str = Field(
        default=DEFAULT_SECTION,
        description="Section that holds properties written before any header.",
    )
    case_sensitive: bool = Field(default=False)
    delimiters: List[str] = Field(default_factory=lambda: list(DEFAULT_DELIMITERS))
    comment_symbols: List[str] = Field(
        default_factory=list,
        description="Characters that start a comment running to end of line.",
    )

    @field_validator("default_section")
    @classmethod
    def _default_section_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_section must not be blank")
        return v

    @field_validator("delimiters", "comment_symbols")
    @classmethod
    def _single_chars(cls, v: List[str]) -> List[str]:
        for s in v:
            if len(s) != 1:
                raise ValueError(f"expected single characters, got {s!r}")
            if s in _RESERVED:
                raise ValueError(f"{s!r} is reserved for section headers")
        return v

    @model_validator(mode="after")
    def _validate_symbols(self) -> "ParserOptions":
        if not self.delimiters:
            raise ValueError("at least one delimiter is required")
        both = set(self.delimiters) & set(self.comment_symbols)
        if both:
            raise ValueError(f"symbols cannot be both delimiter and comment: {sorted(both)}")
        return self

    def normalize(self, name: str) -> str:
        # imported here: inimap.parsers imports this module
        from inimap.parsers.common import normalize_key

        return normalize_key(name, case_insensitive=not self.case_sensitive)

    @property
    def default_section_name(self) -> str:
        return self.normalize(self.default_section)


# ================================
# Output config (defaults only)
# ================================


class OutputConfig(BaseModel):
    """
    How the CLI renders documents. Defaults live here.
    """

    format: OutputFormat = Field(default=OutputFormat.TABLE)
    show_valueless: bool = Field(
        default=True,
        description="Include keys written without a delimiter in rendered output.",
    )
