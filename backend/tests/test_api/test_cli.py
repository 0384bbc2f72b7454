"""Tests for the command-line entry point."""

from __future__ import annotations

from svgcomp.cli import main
from tests.conftest import CIRCLE_SVG


def test_writes_react_component(tmp_path):
    src = tmp_path / "circle-outline.svg"
    src.write_text(CIRCLE_SVG, encoding="utf-8")
    out = tmp_path / "out"

    assert main([str(src), "-o", str(out)]) == 0
    code = (out / "CircleOutlineIcon.tsx").read_text(encoding="utf-8")
    assert "export function CircleOutlineIcon(" in code
    assert code.endswith("\n")


def test_both_frameworks_with_name(tmp_path):
    src = tmp_path / "circle.svg"
    src.write_text(CIRCLE_SVG, encoding="utf-8")

    assert main([str(src), "-f", "react,vue", "-n", "Ring", "-o", str(tmp_path), "--no-typescript"]) == 0
    assert (tmp_path / "Ring.jsx").is_file()
    assert (tmp_path / "Ring.vue").is_file()


def test_no_props(tmp_path):
    src = tmp_path / "circle.svg"
    src.write_text(CIRCLE_SVG, encoding="utf-8")

    assert main([str(src), "-o", str(tmp_path), "--no-props"]) == 0
    code = (tmp_path / "CircleIcon.tsx").read_text(encoding="utf-8")
    assert "size = 24" not in code


def test_rejects_non_svg_path(tmp_path):
    src = tmp_path / "circle.txt"
    src.write_text(CIRCLE_SVG, encoding="utf-8")
    assert main([str(src), "-o", str(tmp_path)]) == 1


def test_rejects_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.svg")]) == 1


def test_rejects_invalid_document(tmp_path):
    src = tmp_path / "broken.svg"
    src.write_text("not an svg", encoding="utf-8")
    assert main([str(src), "-o", str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()


def test_rejects_invalid_component_name(tmp_path):
    src = tmp_path / "123.svg"
    src.write_text(CIRCLE_SVG, encoding="utf-8")
    out = tmp_path / "out"

    assert main([str(src), "-o", str(out)]) == 1
    assert main([str(tmp_path / "123.svg"), "-n", "my icon", "-o", str(out)]) == 1
    assert not out.exists()
