"""Unit tests for utility functions (goforge.utils).

Tests cover:
- format_duration
- Rich output helpers (print_header, print_summary_table, etc.)
"""

from __future__ import annotations

import pytest

from goforge.utils import (
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize("seconds,expected", [
        (0, "0ms"),
        (0.042, "42ms"),
        (0.5, "500ms"),
        (1, "1.0s"),
        (12.34, "12.3s"),
        (60, "1m 0s"),
        (75, "1m 15s"),
        (3661.0, "61m 1s"),
    ])
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected

    @pytest.mark.unit
    def test_negative(self):
        assert format_duration(-5) == "0ms"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_header(self, capsys):
        print_header("Creating demo")
        assert "Creating demo" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Project": "demo", "Files written": "3"}, title="Generation Summary")
        out = capsys.readouterr().out
        assert "Generation Summary" in out
        assert "Files written" in out
        assert "demo" in out

    @pytest.mark.unit
    @pytest.mark.parametrize("printer", [print_success, print_error, print_warning])
    def test_message_printed(self, printer, capsys):
        printer("all good")
        assert "all good" in capsys.readouterr().out

    @pytest.mark.unit
    def test_summary_values_escaped(self, capsys):
        print_summary_table({"Project": "out/[/x]/demo"})
        assert "out/[/x]/demo" in capsys.readouterr().out

    @pytest.mark.unit
    def test_markup_in_message_escaped(self, capsys):
        print_error("bad path [bold]x[/bold]")
        assert "[bold]x[/bold]" in capsys.readouterr().out
