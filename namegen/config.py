"""
Settings - Environment-driven configuration.

Variables:
    NAMEGEN_MAX_ATTEMPTS    Cap for the rejection-sampling loops (unset = unbounded,
                            10000 in the HTTP app)
    NAMEGEN_SEED            Seed for the default random source
    NAMEGEN_GRAMMAR_FILES   Comma-separated grammar files preloaded by the HTTP app
    NAMEGEN_LOG_LEVEL       Log level (default INFO)
    NAMEGEN_LOG_FORMAT      "console" or "json" (default console)
    ALLOWED_ORIGINS         CORS origins for the HTTP app (default *)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os


@dataclass
class Settings:
    max_attempts: int | None = None
    seed: int | None = None
    grammar_files: list[str] = field(default_factory=list)
    log_level: str = "INFO"
    log_format: str = "console"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])


def _optional_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        max_attempts=_optional_int("NAMEGEN_MAX_ATTEMPTS"),
        seed=_optional_int("NAMEGEN_SEED"),
        grammar_files=_split(os.getenv("NAMEGEN_GRAMMAR_FILES", "")),
        log_level=os.getenv("NAMEGEN_LOG_LEVEL", "INFO"),
        log_format=os.getenv("NAMEGEN_LOG_FORMAT", "console"),
        allowed_origins=_split(os.getenv("ALLOWED_ORIGINS", "*")),
    )
