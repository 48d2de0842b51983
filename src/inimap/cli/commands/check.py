from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.text import Text

from inimap.cli.commands.common import resolve_config
from inimap.cli.ui import get_ui, render_errors, render_load_summary
from inimap.cli.utils.options import (
    CaseSensitiveOpt,
    CommentsOpt,
    DefaultSectionOpt,
    DelimitersOpt,
    VerboseOpt,
    cli_overrides,
)
from inimap.core.errors import ExitCode, IniError
from inimap.core.loader import load_many, safe_load_many


def check_cmd(
    paths: List[Path] = typer.Argument(..., help="One or more ini files."),
    strict: bool = typer.Option(
        False, "--strict", help="Stop at the first failure instead of reporting all of them."
    ),
    case_sensitive: Optional[bool] = CaseSensitiveOpt,
    default_section: Optional[str] = DefaultSectionOpt,
    comments: Optional[str] = CommentsOpt,
    delimiters: Optional[str] = DelimitersOpt,
    verbose: bool = VerboseOpt,
) -> None:
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

    if strict:
        try:
            load_many(*paths, options=loaded.parser)
        except IniError as e:
            ui.err_console.print(Text.assemble(("error: ", "err"), str(e)), soft_wrap=True)
            raise typer.Exit(code=int(ExitCode.ERROR))
        ui.console.print(f"[ok]OK[/ok] ({len(paths)} file(s))")
        return

    results = safe_load_many(*paths, options=loaded.parser)
    render_errors(ui.err_console, results)
    if ui.verbose:
        render_load_summary(ui.err_console, results)

    if any(not r.ok for r in results):
        raise typer.Exit(code=int(ExitCode.ERROR))
    ui.console.print(f"[ok]OK[/ok] ({len(results)} file(s))")
