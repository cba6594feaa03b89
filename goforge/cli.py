"""Command-line entry point: ``goforge new NAME MODULE [options]``."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from rich.markup import escape

from . import __version__
from .config import Config
from .scaffolder.generator import ProjectGenerator
from .scaffolder.materializer import MaterializeError
from .scaffolder.options import (
    CSS_FRAMEWORK_LABELS,
    FRONTEND_LABELS,
    CSSFramework,
    Frontend,
    validate_module_path,
    validate_project_name,
)
from .scaffolder.resolver import normalize_css_framework, normalize_frontend
from .scaffolder.tree import TemplateError
from .utils import (
    console,
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``goforge`` command."""
    parser = argparse.ArgumentParser(
        prog="goforge",
        description=(
            "Scaffold production-ready Go projects "
            "(Go + Chi + Templ + HTMX + Tailwind, optional Postgres + Goose)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  goforge new my-app github.com/username/my-app\n"
            "  goforge new my-app github.com/username/my-app -f htmx-alpine -c basecoat\n"
            "  goforge new my-app github.com/username/my-app --no-db\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")
    new = subparsers.add_parser("new", help="Create a new project")
    new.add_argument("project_name", help="Name of the project directory")
    new.add_argument("module_path", help="Go module path (e.g. github.com/username/project)")
    new.add_argument(
        "--frontend", "-f",
        default=None,
        help="Frontend stack: " + ", ".join(f.value for f in Frontend),
    )
    new.add_argument(
        "--css", "-c",
        dest="css_framework",
        default=None,
        help="CSS framework: " + ", ".join(c.value for c in CSSFramework),
    )
    new.add_argument(
        "--db",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include Postgres wiring and migrations (default: on)",
    )
    new.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    new.add_argument(
        "--force",
        action="store_true",
        help="Generate into an existing directory, overwriting colliding files",
    )
    new.add_argument("--quiet", "-q", action="store_true", help="Do not list generated files")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``goforge`` and ``python -m goforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "new":
        parser.print_help()
        sys.exit(1)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if not _run_new(args, config):
        sys.exit(1)


def _run_new(args: argparse.Namespace, config: Config) -> bool:
    try:
        validate_project_name(args.project_name)
        validate_module_path(args.module_path)
    except ValueError as exc:
        print_error(f"Error: {exc}")
        return False

    options = config.options_for(
        args.project_name,
        args.module_path,
        frontend=args.frontend,
        css_framework=args.css_framework,
        include_db=args.db,
    )
    frontend = normalize_frontend(options.frontend)
    css = normalize_css_framework(options.css_framework)
    if frontend.value != options.frontend:
        print_warning(f"Unknown frontend {options.frontend!r}, using {frontend.value}")
    if css.value != options.css_framework:
        print_warning(f"Unknown CSS framework {options.css_framework!r}, using {css.value}")

    output_dir = Path(args.output) if args.output else config.output_dir
    project_root = output_dir / options.project_name
    if project_root.exists() and not args.force:
        print_error(f"Error: directory '{project_root}' already exists (use --force to overwrite)")
        return False

    print_header(f"Creating {options.project_name}")
    console.print(f"  Module:        [bold]{escape(options.module_path)}[/bold]")
    console.print(f"  Frontend:      {FRONTEND_LABELS[frontend]}")
    console.print(f"  CSS framework: {CSS_FRAMEWORK_LABELS[css]}")
    console.print(f"  Database:      {'Postgres + Goose' if options.include_db else 'none'}")
    console.print()

    generator = ProjectGenerator(options)
    started = time.monotonic()
    try:
        generator.generate(output_dir, quiet=args.quiet or config.quiet)
    except (MaterializeError, TemplateError) as exc:
        print_error(f"Generation failed: {exc}")
        return False
    elapsed = time.monotonic() - started

    report = generator.last_report
    console.print()
    print_summary_table(
        {
            "Project": str(project_root),
            "Files written": str(len(report.files) if report else 0),
            "Elapsed": format_duration(elapsed),
        },
        title="Generation Summary",
    )
    print_success("✅ Project created successfully!")
    console.print(f"  cd {escape(str(project_root))}")
    console.print("  make setup    # Install tools and download frontend assets")
    console.print("  make dev      # Start development server with live reload")
    return True
