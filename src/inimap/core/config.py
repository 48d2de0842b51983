from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from inimap.core.models import OutputConfig, ParserOptions

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Project-local config (closest one wins)
DEFAULT_REPO_CONFIG_FILES = (".inimap.toml",)

# Global config (applies on this machine for every run)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/inimap/config.toml",
    "~/.inimap.toml",
)


def _read_toml(path: Path) -> Dict[str, Any]:
    data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """
    Walk upward to find the closest project config.
    """
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = parent / rel
            if p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for raw in DEFAULT_GLOBAL_CONFIG_FILES:
        p = Path(raw).expanduser()
        if p.is_file():
            return p
    return None


@dataclass(frozen=True)
class LoadedConfig:
    parser: ParserOptions
    output: OutputConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def _section(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = merged.get(name) or {}
    return value if isinstance(value, dict) else {}


def load_app_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (models) ->
      global config ->
      repo config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Any] = {}
    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))
    if repo_path:
        merged = _deep_merge(merged, _read_toml(repo_path))

    # CLI overrides use the same namespaced shape as the TOML file
    merged = _deep_merge(merged, cli_overrides)

    return LoadedConfig(
        parser=ParserOptions.model_validate(_section(merged, "parser")),
        output=OutputConfig.model_validate(_section(merged, "output")),
        global_path=global_path,
        repo_path=repo_path,
    )
