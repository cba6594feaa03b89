"""Tree materializer: writes a transformed copy of a ``TemplateTree`` to disk.

One synchronous depth-first walk.  Each entry is fully read, transformed and
written before the next one is visited.  The first I/O failure aborts the
walk with a ``MaterializeError``.  Files already written stay on disk.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from ..utils import console
from .options import Options
from .transform import render_text
from .tree import TemplateTree, in_db_subtree, is_binary


class MaterializeError(Exception):
    """An I/O failure while materializing, tagged with the offending path."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {path}")


@dataclass
class MaterializeReport:
    """What a materialization run did, in visit order."""

    target_root: Path
    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def materialize(
    tree: TemplateTree,
    target_root: str | Path,
    options: Options,
    substitutions: Mapping[str, str],
    *,
    quiet: bool = False,
) -> MaterializeReport:
    """Write every entry of *tree* under *target_root*.

    Args:
        tree: Template source to walk.
        target_root: Directory receiving the output; created if missing.
            Existing files at colliding paths are overwritten.
        options: Supplies the module path and the conditional-block gates.
        substitutions: Placeholder -> replacement mapping from the resolver.
        quiet: Suppress the per-file progress lines.

    Returns:
        A ``MaterializeReport`` listing written files and skipped entries.

    Raises:
        TemplateError: If two templates would produce the same output path.
        MaterializeError: On the first directory, read or write failure.
    """
    root = Path(target_root)
    tree.check_output_paths()
    report = MaterializeReport(target_root=root)
    gates = options.gates()

    _mkdir(root)

    skip_prefix: str | None = None
    for entry in tree.walk():
        if skip_prefix and entry.path.startswith(skip_prefix):
            continue

        if not options.include_db and in_db_subtree(entry.path):
            report.skipped.append(entry.path)
            if entry.is_dir:
                skip_prefix = entry.path + "/"
            continue

        target = root / entry.output_path

        if entry.is_dir:
            _mkdir(target)
            report.directories.append(target)
            continue

        try:
            raw = entry.read_bytes()
        except OSError as exc:
            raise MaterializeError(entry.path, "failed to read template file") from exc

        if is_binary(entry.path):
            data = raw
        else:
            text = raw.decode("utf-8", errors="surrogateescape")
            text = render_text(text, options.module_path, substitutions, gates)
            data = text.encode("utf-8", errors="surrogateescape")

        _mkdir(target.parent)
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise MaterializeError(target, "failed to write file") from exc

        report.files.append(target)
        if not quiet:
            console.print(f"  [green]✓[/green] {escape(entry.output_path)}")

    return report


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MaterializeError(path, "failed to create directory") from exc
