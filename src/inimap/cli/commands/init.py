from __future__ import annotations

from pathlib import Path

import typer

from inimap.cli.utils.files import write_file

DEFAULT_CONFIG_TOML = """\
[parser]
# section that collects properties written before the first [header]
default_section = "default"
case_sensitive = false
delimiters = ["="]
# e.g. [";", "#"]; empty keeps every character of a value
comment_symbols = []

[output]
# table | json | yaml | ini
format = "table"
show_valueless = true
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    target = path.resolve() / ".inimap.toml"
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"{target} already exists (use --force to overwrite)")
