from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence

import typer
import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from inimap.core.loader import LoadResult
from inimap.core.models import OutputConfig, OutputFormat
from inimap.parsers import Document


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def _selected(
    doc: Document, *, section: Optional[str], show_valueless: bool
) -> Dict[str, Dict[str, Optional[str]]]:
    data = doc.to_dict()
    if section is not None:
        data = {section: data[section]} if section in data else {}
    if not show_valueless:
        data = {
            name: {k: v for k, v in entries.items() if v is not None}
            for name, entries in data.items()
        }
    return data


# ----------------------------
# Serializers
# ----------------------------

def document_to_json(data: Dict[str, Dict[str, Optional[str]]]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def document_to_yaml(data: Dict[str, Dict[str, Optional[str]]]) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


def document_to_ini(data: Dict[str, Dict[str, Optional[str]]], *, default_section: Optional[str] = None) -> str:
    """
    Normalized ini text: one header per section, "key = value" for keys
    with a value, the bare key for valueless ones. Properties of the
    default section are written first, without a header.
    """
    lines: List[str] = []
    ordered = sorted(data.items(), key=lambda kv: kv[0] != default_section)

    for name, entries in ordered:
        if name != default_section:
            if lines:
                lines.append("")
            lines.append(f"[{name}]")
        for k, v in entries.items():
            if v is None:
                lines.append(k)
            elif v == "":
                lines.append(f"{k} =")
            else:
                lines.append(f"{k} = {v}")

    return "\n".join(lines) + ("\n" if lines else "")


# ----------------------------
# Tables
# ----------------------------

def render_document_table(
    console: Console,
    data: Dict[str, Dict[str, Optional[str]]],
    *,
    title: Optional[str] = None,
) -> None:
    if not data:
        console.print("[muted]No sections.[/muted]")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key")
    table.add_column("Value")

    for name, entries in data.items():
        for k, v in entries.items():
            value = Text("(no value)", style="none") if v is None else Text(_short(v, 120))
            table.add_row(Text(name), Text(k), value)
        if not entries:
            table.add_row(Text(name), Text("(empty)", style="muted"), "")

    console.print(table)


def render_document(
    console: Console,
    doc: Document,
    *,
    config: Optional[OutputConfig] = None,
    section: Optional[str] = None,
    title: Optional[str] = None,
) -> None:
    config = config or OutputConfig()
    data = _selected(doc, section=section, show_valueless=config.show_valueless)

    if config.format == OutputFormat.TABLE:
        render_document_table(console, data, title=title)
        return

    if config.format == OutputFormat.JSON:
        out = document_to_json(data)
    elif config.format == OutputFormat.YAML:
        out = document_to_yaml(data)
    else:
        out = document_to_ini(data, default_section=doc.default_section)

    # bypass rich so tabs and markup-like text reach stdout untouched
    typer.echo(out, nl=not out.endswith("\n"))


# ----------------------------
# Errors / summaries
# ----------------------------

def render_errors(
    console: Console,
    results: Sequence[LoadResult],
    *,
    max_items: int = 25,
) -> None:
    failed = [r for r in results if not r.ok]
    if not failed:
        return

    console.print(f"[warn]⚠️  {len(failed)} input(s) failed to load.[/warn]")
    for r in failed[:max_items]:
        console.print(f"- {_short(str(r.error), 200)}", markup=False, highlight=False, soft_wrap=True)

    if len(failed) > max_items:
        console.print(f"[muted]… and {len(failed) - max_items} more[/muted]")


def render_load_summary(
    console: Console,
    results: Sequence[LoadResult],
    *,
    header: str = "Summary",
) -> None:
    table = Table(title=header, show_header=True, show_lines=False)
    table.add_column("Source", style="path")
    table.add_column("Status", no_wrap=True)
    table.add_column("Sections", justify="right", no_wrap=True)
    table.add_column("Keys", justify="right", no_wrap=True)

    for r in results:
        if r.ok and r.document is not None:
            keys = sum(len(s) for s in r.document.values())
            table.add_row(Text(r.source), Text("ok", style="ok"), str(len(r.document)), str(keys))
        else:
            table.add_row(Text(r.source), Text("error", style="err"), "-", "-")

    console.print()
    console.print(table)
