"""Generation options and the input validation applied before generation.

``Options`` is the finished record handed to the scaffolder by the CLI (or
by library callers).  Enum-like fields are stored as plain strings so that a
misconfigured value survives construction; the option resolver normalizes
them to a known variant before anything touches the disk.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Frontend(str, Enum):
    """Client-side enhancement library bundled into the page shell."""

    HTMX = "htmx"
    HTMX_HYPERSCRIPT = "htmx-hyperscript"
    HTMX_ALPINE = "htmx-alpine"


class CSSFramework(str, Enum):
    """Component framework layered on top of Tailwind CSS."""

    DAISYUI = "daisyui"
    TEMPLUI = "templui"
    BASECOAT = "basecoat"


DEFAULT_FRONTEND = Frontend.HTMX
DEFAULT_CSS_FRAMEWORK = CSSFramework.DAISYUI

FRONTEND_LABELS: dict[Frontend, str] = {
    Frontend.HTMX: "HTMX",
    Frontend.HTMX_HYPERSCRIPT: "HTMX + Hyperscript",
    Frontend.HTMX_ALPINE: "HTMX + Alpine.js",
}

CSS_FRAMEWORK_LABELS: dict[CSSFramework, str] = {
    CSSFramework.DAISYUI: "DaisyUI",
    CSSFramework.TEMPLUI: "TemplUI",
    CSSFramework.BASECOAT: "Basecoat",
}

# Gate name used by the ``<!-- IF DB -->`` conditional blocks.
DB_GATE = "DB"


class Options(BaseModel):
    """Pydantic model describing the project to generate."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Target directory name")
    module_path: str = Field(..., description="Go module path, e.g. github.com/user/app")
    frontend: str = Field(default=DEFAULT_FRONTEND.value)
    css_framework: str = Field(default=DEFAULT_CSS_FRAMEWORK.value)
    include_db: bool = Field(default=True, description="Ship Postgres wiring and migrations")

    def gates(self) -> dict[str, bool]:
        """Return the boolean gates that drive conditional-block pruning."""
        return {DB_GATE: self.include_db}


# ---------------------------------------------------------------------------
# Input validation (run by callers, never by the engine itself)
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> str:
    """Reject empty project names and names that would break the target path.

    Raises:
        ValueError: If *name* is empty or contains a space or path separator.
    """
    if not name:
        raise ValueError("project name is required")
    if any(ch in name for ch in " /\\"):
        raise ValueError("project name cannot contain spaces or slashes")
    if name in (".", ".."):
        raise ValueError(f"project name cannot be {name!r}")
    return name


def validate_module_path(module_path: str) -> str:
    """Require a non-empty module path with at least one ``/``.

    Raises:
        ValueError: If the module path is empty or has no path separator.
    """
    if not module_path:
        raise ValueError("module path is required")
    if "/" not in module_path:
        raise ValueError("module path should contain at least one '/'")
    return module_path
