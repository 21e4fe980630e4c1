"""
cmdtree structure components.

This package provides command tree construction, name validation, and the
read-only structure export.
"""

from cmdtree.structure.builder import Builder, ClassDraft
from cmdtree.structure.export import ItemType, StructureItem, build_structure
from cmdtree.structure.utils import check_names, normalize_name, validate_name_format

__all__ = [
    "Builder",
    "ClassDraft",
    "ItemType",
    "StructureItem",
    "build_structure",
    "check_names",
    "normalize_name",
    "validate_name_format",
]
