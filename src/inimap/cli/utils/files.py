from __future__ import annotations

from pathlib import Path


def write_file(path: Path, content: str, *, force: bool) -> bool:
    """Write `content` unless the file exists and `force` is off. Returns True if written."""
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True
