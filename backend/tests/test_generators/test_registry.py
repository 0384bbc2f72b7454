"""Tests for the generator registry."""

import pytest

from svgcomp.errors import UnsupportedFramework
from svgcomp.generators import get_registry
from svgcomp.generators.registry import GeneratorRegistry, GeneratorSpec
from svgcomp.models.generation import GeneratorOptions, GeneratorResult


def _noop(options: GeneratorOptions) -> GeneratorResult:
    return GeneratorResult(code="", extension=".txt", framework="noop")


def test_register_and_get():
    reg = GeneratorRegistry()
    spec = GeneratorSpec(framework="noop", extension=".txt", fn=_noop)
    reg.register(spec)
    assert reg.get("noop") is spec
    assert "noop" in reg
    assert reg.count == 1


def test_duplicate_rejected():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(framework="noop", extension=".txt", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(GeneratorSpec(framework="noop", extension=".md", fn=_noop))


def test_unknown_framework():
    reg = GeneratorRegistry()
    with pytest.raises(UnsupportedFramework) as exc_info:
        reg.get("svelte")
    assert exc_info.value.framework == "svelte"
    assert "svelte" in str(exc_info.value)


def test_registration_order():
    reg = GeneratorRegistry()
    for name in ("b", "a", "c"):
        reg.register(GeneratorSpec(framework=name, extension=".x", fn=_noop))
    assert reg.frameworks() == ["b", "a", "c"]
    assert [s.framework for s in reg.all()] == ["b", "a", "c"]


def test_builtins_registered():
    reg = get_registry()
    assert reg.frameworks()[:2] == ["react", "vue"]
    assert reg.get("react").extension == ".tsx"
    assert reg.get("vue").extension == ".vue"
