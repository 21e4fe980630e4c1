"""
Tests for the read-only structure export.
"""

import pytest
from pydantic import ValidationError

from cmdtree import ItemType, StructureItem


class TestBuildStructure:
    """Test structure listing of the shared example tree."""

    def test_depth_first_listing(self, commander):
        paths = [item.path for item in commander.structure()]
        assert paths == [
            "example..clone",
            "example.class1",
            "example.class1.inner-class1",
            "example.class1.inner-class1..name",
            "example.class1.another",
            "example.print",
            "example.print..echo",
            "example.print..countdown",
        ]

    def test_item_fields(self, commander):
        items = {item.path: item for item in commander.structure()}

        inner = items["example.class1.inner-class1"]
        assert inner.name == "inner-class1"
        assert inner.help == "nested class!"
        assert inner.item_type is ItemType.CLASS
        assert inner.depth == 2

        name = items["example.class1.inner-class1..name"]
        assert name.item_type is ItemType.ACTION
        assert name.help == "print class name"
        assert name.depth == 2

        clone = items["example..clone"]
        assert clone.depth == 0

    def test_structure_does_not_move_cursor(self, commander):
        commander.execute("print")
        commander.structure()
        assert commander.path == "example.print"

    def test_structure_covers_whole_tree_from_any_position(self, commander):
        at_root = commander.structure()
        commander.execute("class1")
        assert commander.structure() == at_root

    def test_items_serialize(self, commander):
        dumped = commander.structure()[0].model_dump(mode="json")
        assert dumped == {
            "path": "example..clone",
            "name": "clone",
            "help": "clone something",
            "item_type": "action",
            "depth": 0,
        }

    def test_items_are_frozen(self, commander):
        item = commander.structure()[0]
        with pytest.raises(ValidationError):
            item.name = "other"

    def test_item_type_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            StructureItem(path="x", name="x", help="", item_type="folder", depth=0)
