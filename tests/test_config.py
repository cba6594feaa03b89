"""Unit tests for Config (goforge.config).

Tests cover:
- Config defaults
- from_env (each variable, boolean parsing, bad values)
- options_for (defaults, overrides, None overrides ignored)
- save / load round-trip
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from goforge.config import Config


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.frontend == "htmx"
        assert config.css_framework == "daisyui"
        assert config.include_db is True
        assert config.quiet is False

    @pytest.mark.unit
    def test_invalid_bool_rejected(self):
        with pytest.raises(ValidationError):
            Config(include_db="sometimes")


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_all_variables(self):
        env = {
            "GOFORGE_OUTPUT_DIR": "/tmp/projects",
            "GOFORGE_FRONTEND": "htmx-alpine",
            "GOFORGE_CSS": "basecoat",
            "GOFORGE_INCLUDE_DB": "false",
            "GOFORGE_QUIET": "1",
        }
        with patch.dict("os.environ", env):
            config = Config.from_env()
        assert config.output_dir == Path("/tmp/projects")
        assert config.frontend == "htmx-alpine"
        assert config.css_framework == "basecoat"
        assert config.include_db is False
        assert config.quiet is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("YES", True), (" on ", True),
        ("0", False), ("No", False), ("off", False),
    ])
    def test_boolean_spellings(self, monkeypatch, value, expected):
        monkeypatch.setenv("GOFORGE_INCLUDE_DB", value)
        assert Config.from_env().include_db is expected

    @pytest.mark.unit
    def test_bad_boolean_raises(self, monkeypatch):
        monkeypatch.setenv("GOFORGE_QUIET", "maybe")
        with pytest.raises(ValueError, match="GOFORGE_QUIET"):
            Config.from_env()

    @pytest.mark.unit
    def test_empty_variable_ignored(self, monkeypatch):
        monkeypatch.setenv("GOFORGE_INCLUDE_DB", "")
        assert Config.from_env().include_db is True


# ---------------------------------------------------------------------------
# options_for
# ---------------------------------------------------------------------------


class TestOptionsFor:
    @pytest.mark.unit
    def test_uses_config_defaults(self):
        config = Config(frontend="htmx-hyperscript", css_framework="templui", include_db=False)
        options = config.options_for("app", "github.com/test/app")
        assert options.project_name == "app"
        assert options.module_path == "github.com/test/app"
        assert options.frontend == "htmx-hyperscript"
        assert options.css_framework == "templui"
        assert options.include_db is False

    @pytest.mark.unit
    def test_overrides_win(self):
        options = Config().options_for("app", "x/app", frontend="htmx-alpine", include_db=False)
        assert options.frontend == "htmx-alpine"
        assert options.include_db is False

    @pytest.mark.unit
    def test_none_overrides_ignored(self):
        options = Config(css_framework="basecoat").options_for(
            "app", "x/app", frontend=None, css_framework=None, include_db=None
        )
        assert options.frontend == "htmx"
        assert options.css_framework == "basecoat"
        assert options.include_db is True


# ---------------------------------------------------------------------------
# save / load
# ---------------------------------------------------------------------------


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(output_dir=tmp_path / "out", frontend="htmx-alpine", quiet=True)
        path = config.save(tmp_path / "nested" / "goforge.json")
        assert path.exists()
        assert Config.load(path) == config

    @pytest.mark.unit
    def test_saved_file_is_json(self, tmp_path: Path):
        path = Config(include_db=False).save(tmp_path / "goforge.json")
        data = json.loads(path.read_text())
        assert data["include_db"] is False
        assert data["css_framework"] == "daisyui"
