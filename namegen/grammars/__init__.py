"""Bundled grammar files in the libtcod namegen dialect."""

from pathlib import Path

GRAMMAR_DIR = Path(__file__).parent


def list_bundled() -> list[str]:
    """File names of all bundled grammars, sorted."""
    return sorted(path.name for path in GRAMMAR_DIR.glob("*.cfg"))


def bundled_path(name: str) -> Path | None:
    """
    Path of a bundled grammar file.

    Accepts the file name with or without its ``.cfg`` suffix.
    Returns None if no such file is bundled.
    """
    if not name.endswith(".cfg"):
        name = f"{name}.cfg"
    path = GRAMMAR_DIR / name
    if path.parent != GRAMMAR_DIR or not path.is_file():
        return None
    return path
