from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from inimap.cli.ui.formatters import (
    render_document,
    render_errors,
    render_load_summary,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
        "none": "dim italic",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool


def configure_logging(console: Console, *, verbose: bool) -> None:
    handler = RichHandler(console=console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger("inimap")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    err_console = Console(theme=THEME, stderr=True)
    configure_logging(err_console, verbose=verbose)
    return UI(console=console, err_console=err_console, verbose=verbose)


__all__ = [
    "UI",
    "configure_logging",
    "get_ui",
    "render_document",
    "render_errors",
    "render_load_summary",
]
