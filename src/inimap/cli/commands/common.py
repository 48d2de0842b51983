from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import typer
from pydantic import ValidationError

from inimap.cli.ui import UI
from inimap.core.config import LoadedConfig, load_app_config
from inimap.core.errors import ExitCode


def resolve_config(ui: UI, overrides: Dict[str, Any]) -> LoadedConfig:
    """Load config for the current directory; bad values end the command."""
    try:
        loaded = load_app_config(start_dir=Path.cwd(), cli_overrides=overrides)
    except (ValidationError, ValueError) as e:
        ui.err_console.print("[err]Invalid configuration:[/err]")
        ui.err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if ui.verbose:
        ui.err_console.print("[bold]Config sources:[/bold]")
        ui.err_console.print(f"  global: {loaded.global_path or '-'}", markup=False)
        ui.err_console.print(f"  repo:   {loaded.repo_path or '-'}", markup=False)
    return loaded
