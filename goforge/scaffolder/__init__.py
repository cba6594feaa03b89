"""goforge scaffolder -- materializes the bundled Go project templates.

Quick usage::

    from goforge.scaffolder import Options, generate_project

    options = Options(
        project_name="my-app",
        module_path="github.com/me/my-app",
        frontend="htmx-alpine",
        css_framework="basecoat",
        include_db=True,
    )
    project_path = generate_project(options, "/tmp/output")
"""

from goforge.scaffolder.generator import ProjectGenerator, generate_project
from goforge.scaffolder.materializer import MaterializeError, MaterializeReport, materialize
from goforge.scaffolder.options import CSSFramework, Frontend, Options
from goforge.scaffolder.resolver import resolve
from goforge.scaffolder.tree import TemplateError, TemplateTree

__all__ = [
    "CSSFramework",
    "Frontend",
    "MaterializeError",
    "MaterializeReport",
    "Options",
    "ProjectGenerator",
    "TemplateError",
    "TemplateTree",
    "generate_project",
    "materialize",
    "resolve",
]
