"""Text transforms applied to every text template.

Two stages, always in this order:

1. ``prune_blocks`` erases or unwraps conditional blocks::

       <!-- IF DB -->        ... kept when DB is on ...     <!-- END DB -->
       <!-- IF NOT DB -->    ... kept when DB is off ...    <!-- END NOT DB -->

2. ``substitute`` replaces the module-path placeholder, then every token of
   the substitution map, literally and exhaustively.

Blocks are flat.  Nesting is not supported and produces best-effort output.
"""

from __future__ import annotations

from collections.abc import Mapping

# Import path used throughout the templates in place of the real module.
MODULE_PLACEHOLDER = "github.com/goforge/scaffold"


def open_marker(gate: str, negated: bool = False) -> str:
    """Return the opening marker text for *gate*."""
    return f"<!-- IF NOT {gate} -->" if negated else f"<!-- IF {gate} -->"


def close_marker(gate: str, negated: bool = False) -> str:
    """Return the closing marker text for *gate*."""
    return f"<!-- END NOT {gate} -->" if negated else f"<!-- END {gate} -->"


# ---------------------------------------------------------------------------
# Conditional-block pruning
# ---------------------------------------------------------------------------


def prune_blocks(text: str, gates: Mapping[str, bool]) -> str:
    """Resolve every conditional block in *text* against *gates*.

    For a gate that is on, the ``IF <gate>`` markers are removed and their
    content kept, while ``IF NOT <gate>`` spans are removed with their
    content.  A gate that is off does the inverse.  Gates are processed in
    sorted order.
    """
    for gate in sorted(gates):
        enabled = gates[gate]
        text = unwrap_blocks(text, open_marker(gate, not enabled), close_marker(gate, not enabled))
        text = drop_blocks(text, open_marker(gate, enabled), close_marker(gate, enabled))
    return text


def unwrap_blocks(text: str, begin: str, end: str) -> str:
    """Remove every *begin* / *end* marker pair, keeping the text between.

    Scans left to right.  Stops at the first *begin* with no *end* after it;
    that marker and everything after it are left untouched.
    """
    pos = 0
    while True:
        start = text.find(begin, pos)
        if start == -1:
            return text
        stop = text.find(end, start + len(begin))
        if stop == -1:
            return text

        end_lo, end_hi = _marker_span(text, stop, stop + len(end))
        begin_lo, begin_hi = _marker_span(text, start, start + len(begin))
        text = text[:begin_lo] + text[begin_hi:end_lo] + text[end_hi:]
        pos = begin_lo


def drop_blocks(text: str, begin: str, end: str) -> str:
    """Remove every *begin* ... *end* span, markers and content included.

    Same scanning and malformed-input rules as :func:`unwrap_blocks`.
    """
    while True:
        start = text.find(begin)
        if start == -1:
            return text
        stop = text.find(end, start + len(begin))
        if stop == -1:
            return text

        lo, _ = _marker_span(text, start, start + len(begin))
        _, hi = _marker_span(text, stop, stop + len(end))
        text = text[:lo] + text[hi:]


def _marker_span(text: str, lo: int, hi: int) -> tuple[int, int]:
    """Widen ``text[lo:hi]`` to its whole line when the marker stands alone.

    A marker alone on its line (only whitespace around it) takes the line's
    indentation and line break with it.  An inline marker is removed alone.
    """
    line_start = text.rfind("\n", 0, lo) + 1
    if text[line_start:lo].strip():
        return lo, hi

    line_end = text.find("\n", hi)
    if line_end == -1:
        line_end = len(text)
    if text[hi:line_end].strip():
        return lo, hi

    return line_start, min(line_end + 1, len(text))


# ---------------------------------------------------------------------------
# Placeholder substitution
# ---------------------------------------------------------------------------


def substitute(text: str, module_path: str, substitutions: Mapping[str, str]) -> str:
    """Replace the module placeholder and every token of *substitutions*.

    The module path goes first.  The remaining tokens follow in sorted order.
    Replacement values must not contain any token, because the pass is not
    repeated.
    """
    text = text.replace(MODULE_PLACEHOLDER, module_path)
    for token in sorted(substitutions):
        text = text.replace(token, substitutions[token])
    return text


def render_text(
    text: str,
    module_path: str,
    substitutions: Mapping[str, str],
    gates: Mapping[str, bool],
) -> str:
    """Prune conditional blocks, then substitute placeholders."""
    return substitute(prune_blocks(text, gates), module_path, substitutions)
