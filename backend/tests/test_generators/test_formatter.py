"""Tests for the code formatter seam."""

import shlex
import sys

from svgcomp.config import settings
from svgcomp.generators.formatter import format_code, tidy_whitespace


def _python_command(script: str) -> str:
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"


def test_tidy_whitespace():
    assert tidy_whitespace("\n\na  \n\n\n\nb\t\n\n") == "a\n\nb\n"


def test_builtin_tidy_when_no_command(monkeypatch):
    monkeypatch.setattr(settings, "formatter_command", "")
    assert format_code("x = 1;   \n") == "x = 1;\n"


def test_external_command_receives_parser_and_width(monkeypatch):
    script = "import sys; sys.stdin.read(); sys.stdout.write(' '.join(sys.argv[1:]))"
    monkeypatch.setattr(settings, "formatter_command", _python_command(script))
    assert format_code("x", syntax="babel", print_width=100) == "--parser babel --print-width 100"


def test_external_command_output_used(monkeypatch):
    script = "import sys; sys.stdout.write(sys.stdin.read().upper())"
    monkeypatch.setattr(settings, "formatter_command", _python_command(script))
    assert format_code("const a = 1;") == "CONST A = 1;\n"


def test_failing_command_falls_back(monkeypatch, caplog):
    monkeypatch.setattr(settings, "formatter_command", _python_command("import sys; sys.exit(2)"))
    assert format_code("a  \n") == "a\n"
    assert "Formatter exited 2" in caplog.text


def test_missing_command_falls_back(monkeypatch, caplog):
    monkeypatch.setattr(settings, "formatter_command", "definitely-not-a-formatter-xyz")
    assert format_code("a  \n") == "a\n"
    assert "unavailable" in caplog.text
