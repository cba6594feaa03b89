"""Read-only access to the bundled template tree.

The templates ship as package data under ``goforge/scaffolder/templates/``
and are reached through :mod:`importlib.resources`, so the same code works
from a source checkout, an installed wheel or a zip import.  Any directory
on disk can stand in for the bundle (tests build small trees in
``tmp_path``).

Entry paths are POSIX strings rooted at ``templates/``, e.g.
``templates/cmd/server/main.go``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath

TEMPLATE_ROOT = "templates"
TEMPLATE_SUFFIX = ".tmpl"

# Extensions copied byte-for-byte without any text transform.
BINARY_EXTENSIONS: frozenset[str] = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp",
    ".woff", ".woff2", ".ttf", ".eot",
    ".zip", ".tar", ".gz",
    ".mjs",
})

# Subtree only emitted when the project includes a database.
DB_SUBTREE = "internal/database"

_IGNORED_NAMES = frozenset({"__pycache__", ".DS_Store"})


class TemplateError(Exception):
    """Raised when the template tree itself is malformed."""


@dataclass(frozen=True)
class TemplateEntry:
    """One directory or file of the template tree."""

    path: str
    is_dir: bool
    resource: Traversable

    @property
    def relative_path(self) -> str:
        """Path with the ``templates/`` root removed."""
        return strip_root(self.path)

    @property
    def output_path(self) -> str:
        """Output path relative to the target root (see :func:`output_relpath`)."""
        return output_relpath(self.path, is_dir=self.is_dir)

    def read_bytes(self) -> bytes:
        return self.resource.read_bytes()


class TemplateTree:
    """Immutable view over a directory of template files."""

    def __init__(self, root: Traversable | str | Path) -> None:
        if isinstance(root, (str, Path)):
            root = Path(root)
        self.root = root

    @classmethod
    def bundled(cls) -> "TemplateTree":
        """Return the tree shipped inside the ``goforge.scaffolder`` package."""
        return cls(files("goforge.scaffolder").joinpath(TEMPLATE_ROOT))

    def walk(self) -> Iterator[TemplateEntry]:
        """Yield entries depth-first, each directory before its children.

        Siblings come in name order.
        """
        if not self.root.is_dir():
            raise TemplateError(f"Template root is not a directory: {self.root}")
        yield from self._walk(self.root, TEMPLATE_ROOT)

    def _walk(self, node: Traversable, prefix: str) -> Iterator[TemplateEntry]:
        for child in sorted(node.iterdir(), key=lambda c: c.name):
            if child.name in _IGNORED_NAMES:
                continue
            path = f"{prefix}/{child.name}"
            if child.is_dir():
                yield TemplateEntry(path=path, is_dir=True, resource=child)
                yield from self._walk(child, path)
            else:
                yield TemplateEntry(path=path, is_dir=False, resource=child)

    def files(self) -> list[str]:
        """Return the ``templates/``-rooted paths of every file entry."""
        return [entry.path for entry in self.walk() if not entry.is_dir]

    def check_output_paths(self) -> None:
        """Raise ``TemplateError`` if two entries map to the same output path.

        Directories count too, so ``a.tmpl`` next to a directory ``a`` is a
        collision.
        """
        seen: dict[str, str] = {}
        for entry in self.walk():
            out = entry.output_path
            if out in seen:
                raise TemplateError(
                    f"Templates {seen[out]!r} and {entry.path!r} both produce {out!r}"
                )
            seen[out] = entry.path


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def strip_root(path: str) -> str:
    """Drop the leading ``templates/`` component from *path*."""
    prefix = TEMPLATE_ROOT + "/"
    if path.startswith(prefix):
        return path[len(prefix):]
    if path == TEMPLATE_ROOT:
        return ""
    return path


def output_relpath(path: str, is_dir: bool = False) -> str:
    """Map a template path to its output path relative to the target root.

    ``templates/go.mod.tmpl`` becomes ``go.mod``.  Only files lose the
    ``.tmpl`` suffix; a directory keeps its name.
    """
    rel = strip_root(path)
    if not is_dir and rel.endswith(TEMPLATE_SUFFIX):
        rel = rel[: -len(TEMPLATE_SUFFIX)]
    return rel


def is_binary(path: str) -> bool:
    """Classify *path* as binary by its (case-insensitive) extension."""
    return PurePosixPath(path).suffix.lower() in BINARY_EXTENSIONS


def in_db_subtree(path: str) -> bool:
    """Return ``True`` if *path* lies in (or is) the database subtree."""
    rel = strip_root(path)
    return rel == DB_SUBTREE or rel.startswith(DB_SUBTREE + "/")
