"""Tests for the Jinja2 TemplateRenderer.

Covers:
- The packaged PHP template is discoverable
- Strict undefined variables
- Frame layout with and without a body
"""

from __future__ import annotations

from pathlib import Path

import jinja2
import pytest

from entity_scaffold.scaffolder.renderer import TYPE_TEMPLATE
from entity_scaffold.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


def _context(**overrides):
    context = {
        "strict_types": True,
        "namespace_line": "namespace App\\Domain\\Product;",
        "declaration": "interface ProductRepositoryInterface",
        "body": "",
    }
    context.update(overrides)
    return context


class TestTemplateRenderer:
    def test_lists_packaged_template(self):
        assert TYPE_TEMPLATE in TemplateRenderer().list_templates()

    def test_list_with_prefix(self):
        assert TemplateRenderer().list_templates("php") == [TYPE_TEMPLATE]

    def test_list_missing_prefix(self):
        assert TemplateRenderer().list_templates("java") == []

    def test_missing_variable_raises(self):
        with pytest.raises(jinja2.UndefinedError):
            TemplateRenderer().render(TYPE_TEMPLATE, {"strict_types": True})

    def test_empty_body(self):
        out = TemplateRenderer().render(TYPE_TEMPLATE, _context())
        assert out.endswith("interface ProductRepositoryInterface\n{\n}\n")

    def test_body_between_braces(self):
        out = TemplateRenderer().render(
            TYPE_TEMPLATE, _context(declaration="class X", body="    // body")
        )
        assert out.endswith("class X\n{\n    // body\n}\n")

    def test_strict_types_toggle(self):
        out = TemplateRenderer().render(TYPE_TEMPLATE, _context(strict_types=False))
        assert out.startswith("<?php\n\nnamespace App\\Domain\\Product;\n")

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.j2").write_text("Hello {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "World"}) == "Hello World\n"
        assert renderer.list_templates() == ["hello.j2"]
