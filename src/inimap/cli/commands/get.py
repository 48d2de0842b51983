from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from inimap.cli.commands.common import resolve_config
from inimap.cli.ui import get_ui
from inimap.cli.utils.options import (
    CaseSensitiveOpt,
    CommentsOpt,
    DefaultSectionOpt,
    DelimitersOpt,
    VerboseOpt,
    cli_overrides,
)
from inimap.core.errors import ExitCode, IniError
from inimap.core.loader import load


def get_cmd(
    path: Path = typer.Argument(..., help="Ini file to read."),
    section: str = typer.Argument(..., help="Section name (case rules follow the parser)."),
    key: str = typer.Argument(..., help="Key name."),
    case_sensitive: Optional[bool] = CaseSensitiveOpt,
    default_section: Optional[str] = DefaultSectionOpt,
    comments: Optional[str] = CommentsOpt,
    delimiters: Optional[str] = DelimitersOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """
    Print the value of SECTION/KEY.

    A key written without a delimiter has no value and prints nothing.
    Exits 3 when the section or key does not exist.
    """
    ui = get_ui(verbose=verbose)
    loaded = resolve_config(
        ui,
        cli_overrides(
            case_sensitive=case_sensitive,
            default_section=default_section,
            comments=comments,
            delimiters=delimiters,
        ),
    )

    try:
        doc = load(path, options=loaded.parser)
    except IniError as e:
        ui.err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if not doc.has_key(section, key):
        ui.err_console.print(Text.assemble(("not found: ", "warn"), f"[{section}] {key}"))
        raise typer.Exit(code=int(ExitCode.MISSING))

    value = doc.get_value(section, key)
    if value is not None:
        typer.echo(value)
