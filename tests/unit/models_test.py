"""Tests for the pydantic data models."""

import pytest
from pydantic import ValidationError

from unreal_index.models import ApiCategory, ApiEntry, HierarchyNode, StructuralRecord


def test_structural_record_is_frozen() -> None:
    record = StructuralRecord(name="AActor", source_file="Actor.h", definition_line=7)
    with pytest.raises(ValidationError):
        record.name = "APawn"  # type: ignore[misc]


def test_hierarchy_node_nests() -> None:
    back_edge = HierarchyNode(class_name="AActor", cycle=True)
    node = HierarchyNode(
        class_name="AActor",
        superclasses=[HierarchyNode(class_name="UObject", superclasses=[back_edge])],
    )
    dumped = node.model_dump()
    assert dumped["superclasses"][0]["superclasses"][0] == {
        "class_name": "AActor",
        "superclasses": [],
        "interfaces": [],
        "cycle": True,
    }


def test_api_entry_category_serializes_as_text() -> None:
    entry = ApiEntry(
        class_name="AActor",
        description="Class AActor",
        syntax="class AActor",
        category="Actor",
        module="Engine",
    )
    assert entry.category is ApiCategory.ACTOR
    assert entry.model_dump(mode="json")["category"] == "Actor"
