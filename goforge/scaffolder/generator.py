"""Main scaffolding orchestrator.

Takes an ``Options`` record and produces a Go + Chi + Templ + HTMX +
Tailwind project directory from the bundled template tree:

1. normalize the frontend / CSS choices,
2. resolve the placeholder substitution map,
3. create ``<output_dir>/<project_name>``,
4. materialize the template tree into it.
"""

from __future__ import annotations

from pathlib import Path

from .materializer import MaterializeReport, materialize
from .options import Options
from .resolver import normalize_options, resolve
from .tree import TemplateTree


class ProjectGenerator:
    """Generates one project from a fixed set of options.

    The template tree defaults to the bundle shipped with the package; pass
    another ``TemplateTree`` to generate from a different source.
    """

    def __init__(self, options: Options, tree: TemplateTree | None = None) -> None:
        self.options = normalize_options(options)
        self.tree = tree or TemplateTree.bundled()
        self.last_report: MaterializeReport | None = None

    def generate(self, output_dir: str | Path = ".", *, quiet: bool = False) -> Path:
        """Generate the project under *output_dir*.

        Args:
            output_dir: Parent directory.  A subdirectory named after the
                project is created inside it (an existing one is reused and
                colliding files are overwritten).
            quiet: Suppress per-file progress output.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(output_dir) / self.options.project_name
        substitutions = resolve(self.options)
        self.last_report = materialize(
            self.tree, project_root, self.options, substitutions, quiet=quiet
        )
        return project_root


def generate_project(
    options: Options,
    output_dir: str | Path = ".",
    *,
    quiet: bool = False,
    tree: TemplateTree | None = None,
) -> Path:
    """Convenience wrapper around :class:`ProjectGenerator`."""
    return ProjectGenerator(options, tree).generate(output_dir, quiet=quiet)
