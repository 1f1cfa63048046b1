"""
Grammar Loader - Reads grammar source text from files.

A source is read in one go (opened, fully read, closed) before any
parsing happens. A missing or unreadable file raises SourceUnreadable,
which callers can tell apart from syntax errors.
"""

from __future__ import annotations
from pathlib import Path

from .errors import SourceUnreadable
from ..grammars import bundled_path


def resolve_source(ref: str | Path) -> Path:
    """
    Resolve a grammar source reference to a file path.

    ``ref`` is a filesystem path, or the name of a bundled grammar file
    (e.g. "fantasy" or "fantasy.cfg").
    """
    path = Path(ref).expanduser()
    if path.exists():
        return path

    bundled = bundled_path(str(ref))
    if bundled is not None:
        return bundled

    raise SourceUnreadable(str(ref))


def read_source(ref: str | Path) -> str:
    """
    Read the full text of a grammar source.

    Raises:
        SourceUnreadable: the file does not exist, is a directory, or
            cannot be read/decoded
    """
    path = resolve_source(ref)
    if not path.is_file():
        raise SourceUnreadable(str(ref), "is not a file")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(str(ref), f"could not be read ({e})") from e
