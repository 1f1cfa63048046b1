"""
Tests for environment settings.
"""

import pytest

from ..config import load_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in (
            "NAMEGEN_MAX_ATTEMPTS",
            "NAMEGEN_SEED",
            "NAMEGEN_GRAMMAR_FILES",
            "NAMEGEN_LOG_LEVEL",
            "NAMEGEN_LOG_FORMAT",
            "ALLOWED_ORIGINS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()

        assert settings.max_attempts is None
        assert settings.seed is None
        assert settings.grammar_files == []
        assert settings.log_level == "INFO"
        assert settings.allowed_origins == ["*"]

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("NAMEGEN_MAX_ATTEMPTS", "500")
        monkeypatch.setenv("NAMEGEN_SEED", "7")
        monkeypatch.setenv("NAMEGEN_GRAMMAR_FILES", "fantasy, town.cfg")

        settings = load_settings()

        assert settings.max_attempts == 500
        assert settings.seed == 7
        assert settings.grammar_files == ["fantasy", "town.cfg"]

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("NAMEGEN_MAX_ATTEMPTS", "lots")
        with pytest.raises(ValueError):
            load_settings()
