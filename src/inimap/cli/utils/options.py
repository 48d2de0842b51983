from __future__ import annotations

from typing import Any, Dict, Optional

import typer

from inimap.core.models import OutputFormat

# Shared option declarations so every command spells them the same way.
CaseSensitiveOpt = typer.Option(
    None,
    "--case-sensitive/--case-insensitive",
    help="Keep section/key case (overrides config if set).",
)
DefaultSectionOpt = typer.Option(
    None, "--default-section", help="Name of the section for header-less properties."
)
CommentsOpt = typer.Option(
    None, "--comments", help='Comment characters, e.g. ";#". Empty string disables comments.'
)
DelimitersOpt = typer.Option(
    None, "--delimiters", help='Key/value delimiters, e.g. "=:".'
)
VerboseOpt = typer.Option(False, "--verbose", "-v", help="Verbose output.")


def cli_overrides(
    *,
    case_sensitive: Optional[bool] = None,
    default_section: Optional[str] = None,
    comments: Optional[str] = None,
    delimiters: Optional[str] = None,
    output_format: Optional[OutputFormat] = None,
) -> Dict[str, Any]:
    """Build a config-shaped override dict from the flags that were actually given."""
    parser: Dict[str, Any] = {}
    if case_sensitive is not None:
        parser["case_sensitive"] = bool(case_sensitive)
    if default_section is not None:
        parser["default_section"] = default_section
    if comments is not None:
        parser["comment_symbols"] = list(comments)
    if delimiters is not None:
        parser["delimiters"] = list(delimiters)

    out: Dict[str, Any] = {"parser": parser}
    if output_format is not None:
        out["output"] = {"format": output_format.value}
    return out
