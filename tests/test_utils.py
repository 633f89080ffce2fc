"""Unit tests for the Rich console helpers (entity_scaffold.utils).

Tests cover:
- build_files_table columns and rows
- print_files_table / print_source output
- Status message helpers
"""

from __future__ import annotations

import pytest
from rich.console import Console
from rich.table import Table

from entity_scaffold import utils
from entity_scaffold.utils import (
    build_files_table,
    print_error,
    print_files_table,
    print_note,
    print_source,
    print_success,
    print_warning,
)


@pytest.fixture
def recording_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Swap the module console for a wide, recording one."""
    recorder = Console(record=True, width=200, color_system=None)
    monkeypatch.setattr(utils, "console", recorder)
    return recorder


class TestFilesTable:
    @pytest.mark.unit
    def test_columns(self, product_files):
        table = build_files_table(product_files.values())
        assert isinstance(table, Table)
        assert [c.header for c in table.columns] == ["path", "class"]
        assert table.row_count == 13

    @pytest.mark.unit
    def test_print_lists_every_file(self, recording_console, product_files):
        print_files_table(product_files.values(), title="Product")
        output = recording_console.export_text()
        for rendered in product_files.values():
            assert rendered.path.as_posix() in output
        assert "interface Domain\\Product\\ProductRepositoryInterface" in output

    @pytest.mark.unit
    def test_print_source(self, recording_console, product_files):
        rendered = product_files["Domain\\Product\\ProductEntity"]
        print_source(rendered)
        output = recording_console.export_text()
        assert "Domain/Product/ProductEntity.php" in output
        assert "class ProductEntity" in output


class TestMessages:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper", [print_note, print_success, print_error, print_warning]
    )
    def test_helpers_print(self, recording_console, helper):
        helper("hello scaffold")
        assert "hello scaffold" in recording_console.export_text()

    @pytest.mark.unit
    def test_note_prefix(self, recording_console):
        print_note("src")
        assert recording_console.export_text().startswith("Note: src")
