# ============================================================================
# MAPPING MODEL TESTS
# ============================================================================
# STATUS: Tests - Mapping descriptor models
# PURPOSE: Verify pydantic validation and shorthand handling of mappings
# CREATED: 16 OCT 2026
# ============================================================================
"""
Mapping Model Tests

Tests for the pydantic models describing classes, fields, indexes and
key generators, and for MappingDocument.validate_structure().

Run with:
    pytest tests/test_mapping_models.py -v
"""

import pytest
from pydantic import ValidationError

from core.models import (
    ClassMapping,
    FieldMapping,
    IndexDef,
    KeyGeneratorDef,
    MappingDocument,
)


# ============================================================================
# FIELD MAPPING
# ============================================================================

class TestFieldMapping:
    """Tests for FieldMapping."""

    def test_single_column_shorthand(self):
        fm = FieldMapping(name="id", type="integer", columns="id")
        assert fm.columns == ["id"]

    def test_many_key_shorthand(self):
        fm = FieldMapping(name="tags", type="Tag", many_table="item_tag", many_key="item")
        assert fm.many_key == ["item"]

    def test_defaults(self):
        fm = FieldMapping(name="note", type="string")
        assert fm.columns == []
        assert fm.identity is False
        assert fm.required is False
        assert fm.sql_type is None
        assert fm.has_columns is False
        assert fm.is_many_to_many is False

    def test_many_to_many_flag(self):
        fm = FieldMapping(name="tags", type="Tag", many_table="item_tag")
        assert fm.is_many_to_many is True

    def test_name_required(self):
        with pytest.raises(ValidationError):
            FieldMapping(name="", type="integer")

    def test_type_required(self):
        with pytest.raises(ValidationError):
            FieldMapping(name="id")


# ============================================================================
# CLASS MAPPING
# ============================================================================

class TestClassMapping:
    """Tests for ClassMapping."""

    def test_unmapped_class(self):
        cm = ClassMapping(name="Money")
        assert cm.table is None
        assert cm.fields == []

    def test_identity_shorthand(self):
        cm = ClassMapping(name="Product", table="prod", identity="id")
        assert cm.identity == ["id"]

    def test_get_field_is_case_insensitive(self):
        cm = ClassMapping(
            name="Product",
            table="prod",
            fields=[{"name": "Code", "type": "string", "columns": "code"}],
        )
        assert cm.get_field("code").name == "Code"
        assert cm.get_field("missing") is None

    def test_nested_dicts_become_models(self):
        cm = ClassMapping(
            name="Product",
            table="prod",
            fields=[{"name": "id", "type": "integer", "columns": "id"}],
            indexes=[{"columns": "id"}],
        )
        assert isinstance(cm.fields[0], FieldMapping)
        assert isinstance(cm.indexes[0], IndexDef)


# ============================================================================
# KEY GENERATORS AND INDEXES
# ============================================================================

class TestKeyGeneratorDef:
    """Tests for KeyGeneratorDef."""

    def test_strategy_defaults_to_name(self):
        kg = KeyGeneratorDef(name="identity")
        assert kg.strategy == "identity"

    def test_registry_key_is_upper_case(self):
        kg = KeyGeneratorDef(name="prod_seq", strategy="SEQUENCE")
        assert kg.registry_key == "PROD_SEQ"

    def test_params(self):
        kg = KeyGeneratorDef(name="seq", strategy="SEQUENCE", params={"sequence": "{0}_ids"})
        assert kg.params["sequence"] == "{0}_ids"


class TestIndexDef:
    """Tests for IndexDef."""

    def test_columns_required(self):
        with pytest.raises(ValidationError):
            IndexDef(columns=[])

    def test_column_shorthand(self):
        assert IndexDef(columns="name").columns == ["name"]


# ============================================================================
# DOCUMENT STRUCTURE
# ============================================================================

class TestMappingDocument:
    """Tests for MappingDocument.validate_structure()."""

    def test_valid_document(self):
        doc = MappingDocument(classes=[
            {"name": "Base", "table": "base"},
            {"name": "Child", "table": "child", "extends": "Base"},
        ])
        assert doc.validate_structure() == []

    def test_duplicate_class_names(self):
        doc = MappingDocument(classes=[
            {"name": "A", "table": "a"},
            {"name": "A", "table": "a2"},
        ])
        errors = doc.validate_structure()
        assert len(errors) == 1
        assert "Duplicate class name: A" in errors[0]

    def test_unknown_extends(self):
        doc = MappingDocument(classes=[{"name": "Child", "table": "c", "extends": "Nope"}])
        errors = doc.validate_structure()
        assert "unknown class 'Nope'" in errors[0]

    def test_empty_document(self):
        doc = MappingDocument()
        assert doc.classes == []
        assert doc.key_generators == []
        assert doc.validate_structure() == []
