from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from inimap.cli.commands.common import resolve_config
from inimap.cli.ui import get_ui, render_document, render_errors, render_load_summary
from inimap.cli.utils.options import (
    CaseSensitiveOpt,
    CommentsOpt,
    DefaultSectionOpt,
    DelimitersOpt,
    VerboseOpt,
    cli_overrides,
)
from inimap.core.errors import ExitCode
from inimap.core.loader import safe_load_many
from inimap.core.models import OutputFormat


def show_cmd(
    paths: List[Path] = typer.Argument(..., help="One or more ini files."),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format (overrides config if set)."
    ),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Only show this section."
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
            output_format=output_format,
        ),
    )

    results = safe_load_many(*paths, options=loaded.parser)
    multiple = len(results) > 1
    wanted = loaded.parser.normalize(section) if section is not None else None

    for r in results:
        if not r.ok or r.document is None:
            continue
        render_document(
            ui.console,
            r.document,
            config=loaded.output,
            section=wanted,
            title=r.source if multiple or ui.verbose else None,
        )

    render_errors(ui.err_console, results)
    if ui.verbose:
        render_load_summary(ui.err_console, results)

    if any(not r.ok for r in results):
        raise typer.Exit(code=int(ExitCode.ERROR))
