"""Shared pytest fixtures for the goforge test suite.

Provides reusable fixtures for:
- A small hand-built template tree (text, binary, DB subtree, .tmpl files)
- Sample ``Options`` records
- Snapshotting a generated directory for comparisons
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from goforge.scaffolder.options import Options
from goforge.scaffolder.tree import TemplateTree


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

GOFORGE_ENV_VARS = (
    "GOFORGE_OUTPUT_DIR",
    "GOFORGE_FRONTEND",
    "GOFORGE_CSS",
    "GOFORGE_INCLUDE_DB",
    "GOFORGE_QUIET",
)


@pytest.fixture(autouse=True)
def _clean_goforge_env(monkeypatch):
    """Keep the caller's GOFORGE_* variables out of every test."""
    for name in GOFORGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

# PNG signature followed by bytes that happen to spell the module placeholder.
BINARY_WITH_TOKEN = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
    b"github.com/goforge/scaffold<!-- PROJECT_NAME -->"
    b"\x00\xff\xfe"
)

MINI_TEMPLATES: dict[str, bytes] = {
    "go.mod.tmpl": b"module github.com/goforge/scaffold\n\ngo 1.23\n",
    "cmd/server/main.go": (
        b"package main\n"
        b"\n"
        b"import (\n"
        b'\t"github.com/goforge/scaffold/internal/config"\n'
        b"<!-- IF DB -->\n"
        b'\t"github.com/goforge/scaffold/internal/database"\n'
        b"<!-- END DB -->\n"
        b")\n"
        b"\n"
        b"func main() {\n"
        b"<!-- IF DB -->\n"
        b"\tdatabase.Connect()\n"
        b"<!-- END DB -->\n"
        b"<!-- IF NOT DB -->\n"
        b"\tprintln(\"no database\")\n"
        b"<!-- END NOT DB -->\n"
        b"\tconfig.Load()\n"
        b"}\n"
    ),
    "internal/config/config.go": b"package config\n\nfunc Load() {}\n",
    "internal/database/database.go": b"package database\n\nfunc Connect() {}\n",
    "internal/database/migrations/00001_init.sql": b"-- +goose Up\nCREATE TABLE users (id int);\n",
    "views/base.templ": (
        b"<head>\n\t<title><!-- PROJECT_NAME --></title>\n\t<!-- FRONTEND_SCRIPTS -->\n</head>\n"
    ),
    "assets/logo.png": BINARY_WITH_TOKEN,
}


@pytest.fixture
def mini_template_dir(tmp_path: Path) -> Path:
    """Directory holding a small template tree (``tmp_path/templates``)."""
    root = tmp_path / "templates"
    for rel, content in MINI_TEMPLATES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    return root


@pytest.fixture
def mini_tree(mini_template_dir: Path) -> TemplateTree:
    """``TemplateTree`` over :func:`mini_template_dir`."""
    return TemplateTree(mini_template_dir)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@pytest.fixture
def demo_options() -> Options:
    """The end-to-end demo selection: Alpine + Basecoat with a database."""
    return Options(
        project_name="demo",
        module_path="github.com/x/demo",
        frontend="htmx-alpine",
        css_framework="basecoat",
        include_db=True,
    )


@pytest.fixture
def default_options() -> Options:
    """Options relying on every default."""
    return Options(project_name="app", module_path="github.com/test/app")


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Return a function mapping every file under a root to its bytes."""
    return _snapshot
