from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from inimap.core.errors import IniError, SourceReadError
from inimap.core.models import ParserOptions
from inimap.parsers import Document, parse_ini

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one source under the safe convention."""
    source: str
    document: Optional[Document] = None
    error: Optional[IniError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Document:
        if self.error is not None:
            raise self.error
        if self.document is None:
            raise IniError("nothing was loaded", source=self.source)
        return self.document


def read_source(path: PathLike) -> bytes:
    """
    Read raw bytes from disk. Decoding is left to the parser so that
    encoding problems surface as ParseError like everything else.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(str(path), e) from e


# ----------------------------
# Unsafe convention: raise on failure
# ----------------------------

def load(path: PathLike, *, options: Optional[ParserOptions] = None) -> Document:
    """
    Read and parse one file.

    Raises SourceReadError or ParseError (tagged with the path). Left
    uncaught, the error ends the process with its cause in the message.
    """
    data = read_source(path)
    try:
        doc = parse_ini(data, options=options)
    except IniError as e:
        e.with_source(str(path))
        raise
    logger.debug("loaded %s (%d section(s))", path, len(doc))
    return doc


def load_many(*paths: PathLike, options: Optional[ParserOptions] = None) -> Tuple[Document, ...]:
    """One independent Document per path, in order. Stops at the first failure."""
    return tuple(load(p, options=options) for p in paths)


# ----------------------------
# Safe convention: failures come back as values
# ----------------------------

def safe_load(path: PathLike, *, options: Optional[ParserOptions] = None) -> LoadResult:
    try:
        return LoadResult(source=str(path), document=load(path, options=options))
    except IniError as e:
        logger.debug("failed loading %s: %s", path, e)
        return LoadResult(source=str(path), error=e)


def safe_load_many(*paths: PathLike, options: Optional[ParserOptions] = None) -> Tuple[LoadResult, ...]:
    return tuple(safe_load(p, options=options) for p in paths)
