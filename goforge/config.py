"""goforge configuration.

Defaults for the generation options the CLI does not receive explicitly.
Settings are a Pydantic v2 model so they can be validated at construction,
read from environment variables, and saved to / loaded from JSON.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .scaffolder.options import DEFAULT_CSS_FRAMEWORK, DEFAULT_FRONTEND, Options

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {value!r}")


class Config(BaseModel):
    """Global goforge configuration.

    Holds the defaults applied when a generation request leaves a setting
    out.  Typically built once by the CLI via :meth:`from_env` and then
    turned into per-project ``Options`` with :meth:`options_for`.
    """

    output_dir: Path = Field(default=Path("."), description="Parent directory of new projects")
    frontend: str = Field(default=DEFAULT_FRONTEND.value)
    css_framework: str = Field(default=DEFAULT_CSS_FRAMEWORK.value)
    include_db: bool = Field(default=True)
    quiet: bool = Field(default=False, description="Suppress per-file progress output")

    # ------------------------------------------------------------------
    # Options construction
    # ------------------------------------------------------------------

    def options_for(self, project_name: str, module_path: str, **overrides: Any) -> Options:
        """Build ``Options`` for one project from these defaults.

        Keyword overrides whose value is ``None`` are ignored, so unset CLI
        flags can be passed straight through.
        """
        values: dict[str, Any] = {
            "frontend": self.frontend,
            "css_framework": self.css_framework,
            "include_db": self.include_db,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Options(project_name=project_name, module_path=module_path, **values)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOFORGE_OUTPUT_DIR, GOFORGE_FRONTEND, GOFORGE_CSS,
            GOFORGE_INCLUDE_DB, GOFORGE_QUIET.

        Raises:
            ValueError: If a boolean variable holds an unrecognised value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GOFORGE_OUTPUT_DIR"])
        if os.environ.get("GOFORGE_FRONTEND"):
            kwargs["frontend"] = os.environ["GOFORGE_FRONTEND"]
        if os.environ.get("GOFORGE_CSS"):
            kwargs["css_framework"] = os.environ["GOFORGE_CSS"]
        if os.environ.get("GOFORGE_INCLUDE_DB"):
            kwargs["include_db"] = _parse_bool(os.environ["GOFORGE_INCLUDE_DB"], "GOFORGE_INCLUDE_DB")
        if os.environ.get("GOFORGE_QUIET"):
            kwargs["quiet"] = _parse_bool(os.environ["GOFORGE_QUIET"], "GOFORGE_QUIET")
        return cls(**kwargs)
