"""
Content Table Loading Tests

Validation and freezing of the category table.
"""

import json

import pytest

from content import (
    DONGERS,
    ContentTableError,
    EmptyTableError,
    categories,
    freeze_table,
    load_content_table,
)


class TestFreezeTable:
    """Test table validation."""

    def test_freezes_to_tuples(self):
        """Categories become tuples in a read-only mapping."""
        table = freeze_table({"cat": ["a", "b"]})
        assert table["cat"] == ("a", "b")
        with pytest.raises(TypeError):
            table["dog"] = ("c",)

    def test_copy_is_independent(self):
        """Mutating the source does not change the frozen table."""
        source = {"cat": ["a"]}
        table = freeze_table(source)
        source["cat"].append("b")
        assert table["cat"] == ("a",)

    def test_preserves_order(self):
        """Category order is kept."""
        table = freeze_table({"b": ["1"], "a": ["2"], "c": ["3"]})
        assert categories(table) == ["b", "a", "c"]

    def test_empty_table(self):
        """No categories is an error."""
        with pytest.raises(EmptyTableError):
            freeze_table({})

    def test_empty_category(self):
        """Empty category is an error."""
        with pytest.raises(EmptyTableError):
            freeze_table({"cat": []})

    @pytest.mark.parametrize("table", [
        ["cat"],
        {"cat": "ฅ^•ﻌ•^ฅ"},
        {"cat": [1, 2]},
        {"cat": {"a": "b"}},
        {1: ["a"]},
    ])
    def test_wrong_shape(self, table):
        """Anything but str -> list[str] is rejected."""
        with pytest.raises(ContentTableError):
            freeze_table(table)


class TestLoadContentTable:
    """Test loading from file or bundle."""

    def test_bundled_dongers(self):
        """No path loads the bundled table."""
        table = load_content_table()
        assert set(table) == set(DONGERS)
        assert all(table[name] for name in table)

    def test_load_from_file(self, tmp_path):
        """JSON file is loaded and frozen."""
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"cat": ["=^..^="]}), encoding="utf-8")
        table = load_content_table(path)
        assert dict(table) == {"cat": ("=^..^=",)}

    def test_missing_file(self, tmp_path):
        """Unreadable file raises ContentTableError."""
        with pytest.raises(ContentTableError):
            load_content_table(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Invalid JSON raises ContentTableError."""
        path = tmp_path / "table.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ContentTableError):
            load_content_table(path)
