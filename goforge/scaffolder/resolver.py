"""Option resolver: turns ``Options`` into the placeholder substitution map.

Each feature axis (frontend library, CSS framework) is a lookup table from
the enum variant to an immutable bundle of string fragments.  The bundles of
both axes are concatenated field by field, frontend first, so picking e.g.
``htmx-alpine`` + ``basecoat`` yields the script tags and asset downloads of
*both* axes.

Everything here is pure: no I/O, no clock, no randomness.  The same
``Options`` always produce a byte-identical mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from .options import (
    DEFAULT_CSS_FRAMEWORK,
    DEFAULT_FRONTEND,
    CSSFramework,
    Frontend,
    Options,
)


# ---------------------------------------------------------------------------
# Placeholder tokens (bit-exact, shared with the template authors)
# ---------------------------------------------------------------------------

PROJECT_NAME_TOKEN = "<!-- PROJECT_NAME -->"
FRONTEND_SCRIPTS_TOKEN = "<!-- FRONTEND_SCRIPTS -->"
SETUP_COMMAND_TOKEN = "<!-- SETUP_COMMAND -->"
DOCKER_ASSETS_TOKEN = "<!-- DOCKER_ASSETS -->"
CSS_BUILD_COMMAND_TOKEN = "<!-- CSS_BUILD_COMMAND -->"
CSS_WATCH_COMMAND_TOKEN = "<!-- CSS_WATCH_COMMAND -->"
CSS_INPUT_IMPORT_TOKEN = "<!-- CSS_INPUT_IMPORT -->"
CSS_EMBED_PATH_TOKEN = "<!-- CSS_EMBED_PATH -->"
TAILWIND_PLUGIN_TOKEN = "<!-- TAILWIND_PLUGIN -->"
DAISYUI_CONFIG_TOKEN = "<!-- DAISYUI_CONFIG -->"

ALL_TOKENS: tuple[str, ...] = (
    PROJECT_NAME_TOKEN,
    FRONTEND_SCRIPTS_TOKEN,
    SETUP_COMMAND_TOKEN,
    DOCKER_ASSETS_TOKEN,
    CSS_BUILD_COMMAND_TOKEN,
    CSS_WATCH_COMMAND_TOKEN,
    CSS_INPUT_IMPORT_TOKEN,
    CSS_EMBED_PATH_TOKEN,
    TAILWIND_PLUGIN_TOKEN,
    DAISYUI_CONFIG_TOKEN,
)

# Separators matching where each token sits in the templates.
_SCRIPT_JOIN = "\n\t\t\t"  # inside <head> of views/layouts/base.templ
_RECIPE_JOIN = "\n\t"  # Makefile recipe lines
_DOCKER_JOIN = "\n"  # Dockerfile instructions


# ---------------------------------------------------------------------------
# Fragment bundles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AxisFragments:
    """String fragments one axis variant contributes to the generated project."""

    scripts: tuple[str, ...] = ()
    asset_download: tuple[str, ...] = ()
    docker_build: tuple[str, ...] = ()
    css_build: tuple[str, ...] = ()
    css_watch: tuple[str, ...] = ()


@dataclass(frozen=True)
class CSSFrameworkConfig:
    """Axis fragments plus the CSS-only configuration snippets."""

    fragments: AxisFragments
    input_import: str
    embed_path: str
    tailwind_plugin: str = ""
    daisyui_config: str = ""


def compose(*axes: AxisFragments) -> AxisFragments:
    """Concatenate fragment bundles field by field, preserving argument order."""
    merged = {
        f.name: tuple(item for axis in axes for item in getattr(axis, f.name))
        for f in fields(AxisFragments)
    }
    return AxisFragments(**merged)


# -- Frontend axis -------------------------------------------------------------

_HTMX_URL = "https://unpkg.com/htmx.org@2.0.4/dist/htmx.min.js"
_HYPERSCRIPT_URL = "https://unpkg.com/hyperscript.org@0.9.14/dist/_hyperscript.min.js"
_ALPINE_URL = "https://unpkg.com/alpinejs@3.14.8/dist/cdn.min.js"

_HTMX = AxisFragments(
    scripts=('<script src="/assets/js/htmx.min.js"></script>',),
    asset_download=(
        '@echo "📥 Downloading HTMX..."',
        f"@curl -sL {_HTMX_URL} -o assets/js/htmx.min.js",
    ),
    docker_build=(f"RUN curl -sL {_HTMX_URL} -o assets/js/htmx.min.js",),
)

FRONTEND_FRAGMENTS: dict[Frontend, AxisFragments] = {
    Frontend.HTMX: _HTMX,
    Frontend.HTMX_HYPERSCRIPT: compose(
        _HTMX,
        AxisFragments(
            scripts=('<script src="/assets/js/_hyperscript.min.js"></script>',),
            asset_download=(
                '@echo "📥 Downloading _hyperscript..."',
                f"@curl -sL {_HYPERSCRIPT_URL} -o assets/js/_hyperscript.min.js",
            ),
            docker_build=(f"RUN curl -sL {_HYPERSCRIPT_URL} -o assets/js/_hyperscript.min.js",),
        ),
    ),
    Frontend.HTMX_ALPINE: compose(
        _HTMX,
        AxisFragments(
            scripts=('<script defer src="/assets/js/alpine.min.js"></script>',),
            asset_download=(
                '@echo "📥 Downloading Alpine.js..."',
                f"@curl -sL {_ALPINE_URL} -o assets/js/alpine.min.js",
            ),
            docker_build=(f"RUN curl -sL {_ALPINE_URL} -o assets/js/alpine.min.js",),
        ),
    ),
}


# -- CSS axis ------------------------------------------------------------------

_TAILWIND_RELEASES = "https://github.com/tailwindlabs/tailwindcss/releases/latest/download"
_DAISYUI_RELEASES = "https://github.com/saadeghi/daisyui/releases/latest/download"
_BASECOAT_CDN = "https://cdn.jsdelivr.net/npm/basecoat-css@0.3.2/dist"

_TAILWIND = AxisFragments(
    asset_download=(
        '@echo "📥 Installing Tailwind CSS..."',
        "@cd assets && curl -sL "
        f"{_TAILWIND_RELEASES}/tailwindcss-$$(uname -s | tr '[:upper:]' '[:lower:]' | sed 's/darwin/macos/')"
        "-$$(uname -m | sed 's/x86_64/x64/;s/aarch64/arm64/') -o tailwindcss && chmod +x tailwindcss",
    ),
    docker_build=(
        f"RUN cd assets && curl -sL {_TAILWIND_RELEASES}/tailwindcss-linux-x64-musl -o tailwindcss"
        " && chmod +x tailwindcss",
    ),
)

# The CSS build runs last in the container so that every axis' assets exist.
_TAILWIND_BUILD = AxisFragments(
    docker_build=("RUN cd assets && ./tailwindcss -i css/input.css -o css/output.css --minify",),
    css_build=("@cd assets && ./tailwindcss -i css/input.css -o css/output.css --minify",),
    css_watch=("@cd assets && ./tailwindcss -i css/input.css -o css/output.css --watch",),
)

_DAISYUI_DOWNLOAD = (
    f"curl -sLO {_DAISYUI_RELEASES}/daisyui.mjs && curl -sLO {_DAISYUI_RELEASES}/daisyui-theme.mjs"
)

_EMBED_PATH = "css/output.css js/*.js static/*"

CSS_FRAMEWORKS: dict[CSSFramework, CSSFrameworkConfig] = {
    CSSFramework.DAISYUI: CSSFrameworkConfig(
        fragments=compose(
            _TAILWIND,
            AxisFragments(
                asset_download=(
                    '@echo "📥 Installing DaisyUI..."',
                    f"@cd assets && {_DAISYUI_DOWNLOAD}",
                ),
                docker_build=(f"RUN cd assets && {_DAISYUI_DOWNLOAD}",),
            ),
            _TAILWIND_BUILD,
        ),
        input_import=(
            '@import "tailwindcss";\n'
            "\n"
            '@source not "../tailwindcss";\n'
            '@source not "../daisyui{,*}.mjs";\n'
            "\n"
            '@plugin "../daisyui.mjs";'
        ),
        embed_path=_EMBED_PATH,
        tailwind_plugin="require('./assets/daisyui.mjs')",
        daisyui_config=(
            ",\n"
            "    daisyui: {\n"
            '        themes: ["light", "dark"],\n'
            '        darkTheme: "dark",\n'
            "        base: true,\n"
            "        styled: true,\n"
            "        utils: true,\n"
            "    }"
        ),
    ),
    CSSFramework.TEMPLUI: CSSFrameworkConfig(
        fragments=compose(
            _TAILWIND,
            AxisFragments(
                asset_download=(
                    '@echo "📦 Installing TemplUI..."',
                    "@go install github.com/templui/templui/cmd/templui@latest",
                ),
            ),
            _TAILWIND_BUILD,
        ),
        input_import=(
            '@import "tailwindcss";\n'
            "\n"
            "/* TemplUI base styles */\n"
            "@theme {\n"
            "\t--color-background: oklch(100% 0 0);\n"
            "\t--color-foreground: oklch(10% 0 0);\n"
            "\t--color-primary: oklch(50% 0.2 250);\n"
            "\t--color-secondary: oklch(70% 0.15 200);\n"
            "}"
        ),
        embed_path=_EMBED_PATH,
    ),
    CSSFramework.BASECOAT: CSSFrameworkConfig(
        fragments=compose(
            _TAILWIND,
            AxisFragments(
                scripts=('<script defer src="/assets/js/basecoat.min.js"></script>',),
                asset_download=(
                    '@echo "📥 Downloading Basecoat..."',
                    f"@curl -sL {_BASECOAT_CDN}/basecoat.cdn.min.css -o assets/css/basecoat.css",
                    f"@curl -sL {_BASECOAT_CDN}/js/all.min.js -o assets/js/basecoat.min.js",
                ),
                docker_build=(
                    f"RUN curl -sL {_BASECOAT_CDN}/basecoat.cdn.min.css -o assets/css/basecoat.css",
                    f"RUN curl -sL {_BASECOAT_CDN}/js/all.min.js -o assets/js/basecoat.min.js",
                ),
            ),
            _TAILWIND_BUILD,
        ),
        input_import='@import "tailwindcss";\n@import "./basecoat.css";',
        embed_path=_EMBED_PATH,
    ),
}


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize_frontend(value: str | Frontend) -> Frontend:
    """Map *value* to a known ``Frontend``, falling back to ``htmx``."""
    try:
        return Frontend(value)
    except ValueError:
        return DEFAULT_FRONTEND


def normalize_css_framework(value: str | CSSFramework) -> CSSFramework:
    """Map *value* to a known ``CSSFramework``, falling back to ``daisyui``."""
    try:
        return CSSFramework(value)
    except ValueError:
        return DEFAULT_CSS_FRAMEWORK


def normalize_options(options: Options) -> Options:
    """Return a copy of *options* whose enum fields hold canonical values."""
    return options.model_copy(
        update={
            "frontend": normalize_frontend(options.frontend).value,
            "css_framework": normalize_css_framework(options.css_framework).value,
        }
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve(options: Options) -> dict[str, str]:
    """Build the placeholder -> replacement mapping for *options*.

    Never raises: unknown frontend / CSS values resolve to the defaults.
    The module-path token is not part of the mapping; the materializer
    substitutes it separately, before these tokens.
    """
    frontend = normalize_frontend(options.frontend)
    css = CSS_FRAMEWORKS[normalize_css_framework(options.css_framework)]
    merged = compose(FRONTEND_FRAGMENTS[frontend], css.fragments)

    return {
        PROJECT_NAME_TOKEN: options.project_name,
        FRONTEND_SCRIPTS_TOKEN: _SCRIPT_JOIN.join(merged.scripts),
        SETUP_COMMAND_TOKEN: _RECIPE_JOIN.join(merged.asset_download),
        DOCKER_ASSETS_TOKEN: _DOCKER_JOIN.join(merged.docker_build),
        CSS_BUILD_COMMAND_TOKEN: _RECIPE_JOIN.join(merged.css_build),
        CSS_WATCH_COMMAND_TOKEN: _RECIPE_JOIN.join(merged.css_watch),
        CSS_INPUT_IMPORT_TOKEN: css.input_import,
        CSS_EMBED_PATH_TOKEN: css.embed_path,
        TAILWIND_PLUGIN_TOKEN: css.tailwind_plugin,
        DAISYUI_CONFIG_TOKEN: css.daisyui_config,
    }
