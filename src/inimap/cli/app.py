from __future__ import annotations

import typer
from rich.console import Console

from inimap import __version__
from inimap.cli.commands.check import check_cmd
from inimap.cli.commands.get import get_cmd
from inimap.cli.commands.init import init_cmd
from inimap.cli.commands.show import show_cmd

app = typer.Typer(
    name="inimap",
    help="Parse ini-style configuration files into sections of key/value pairs.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"inimap {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("show", help="Parse ini files and print their contents.")(show_cmd)
app.command("get")(get_cmd)
app.command("check", help="Validate ini files.")(check_cmd)
app.command("init", help="Write a starter .inimap.toml.")(init_cmd)


if __name__ == "__main__":  # pragma: no cover
    app()
