# ============================================================================
# MAPPING HELPER TESTS
# ============================================================================
# STATUS: Tests - Identity detection and resolution
# PURPOSE: Verify class lookup, identity modes, identity columns and types
# CREATED: 16 OCT 2026
# ============================================================================
"""
Mapping Helper Tests

Run with:
    pytest tests/test_mapping_helper.py -v
"""

import pytest

from core.errors import StructuralMappingError
from core.models import MappingDocument
from generator.mapping_helper import MappingHelper


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def document():
    return MappingDocument(classes=[
        {
            "name": "Entity",
            "fields": [{"name": "id", "type": "integer", "identity": True, "columns": "id"}],
        },
        {
            "name": "Customer",
            "table": "customer",
            "extends": "Entity",
            "fields": [{"name": "name", "type": "string", "columns": "name"}],
        },
        {
            "name": "Order",
            "table": "orders",
            "identity": ["customer", "number"],
            "fields": [
                {"name": "customer", "type": "Customer", "columns": "customer_id"},
                {"name": "number", "type": "integer", "columns": "number"},
                {"name": "note", "type": "string", "columns": "note"},
            ],
        },
        {
            "name": "Line",
            "table": "line",
            "fields": [
                {"name": "order", "type": "Order", "identity": True,
                 "columns": ["order_customer", "order_number"]},
                {"name": "pos", "type": "integer", "sql_type": "smallint", "identity": True,
                 "columns": "pos"},
            ],
        },
    ])


@pytest.fixture
def helper(document):
    return MappingHelper(document)


# ============================================================================
# LOOKUP
# ============================================================================

class TestLookup:
    """Tests for class and parent lookup."""

    def test_find_class_by_name(self, helper):
        assert helper.find_class_by_name("Customer").table == "customer"
        assert helper.find_class_by_name("Nope") is None
        assert helper.find_class_by_name(None) is None

    def test_find_parent(self, helper):
        customer = helper.find_class_by_name("Customer")
        assert helper.find_parent(customer).name == "Entity"

    def test_find_parent_without_extends(self, helper):
        assert helper.find_parent(helper.find_class_by_name("Entity")) is None

    def test_find_parent_unknown(self):
        helper = MappingHelper(MappingDocument(classes=[{"name": "A", "extends": "Ghost"}]))
        with pytest.raises(StructuralMappingError, match="unknown class 'Ghost'"):
            helper.find_parent(helper.find_class_by_name("A"))


# ============================================================================
# IDENTITY DETECTION
# ============================================================================

class TestIdentityDetection:
    """Tests for explicit and convention-based identity."""

    def test_explicit_mode(self, helper):
        entity = helper.find_class_by_name("Entity")
        assert helper.is_using_explicit_field_identity(entity) is True

    def test_convention_mode(self, helper):
        order = helper.find_class_by_name("Order")
        assert helper.is_using_explicit_field_identity(order) is False
        assert helper.is_identity_by_convention(order, order.get_field("number")) is True
        assert helper.is_identity_by_convention(order, order.get_field("note")) is False

    def test_identity_fields(self, helper):
        order = helper.find_class_by_name("Order")
        assert [f.name for f in helper.identity_fields(order)] == ["customer", "number"]


# ============================================================================
# IDENTITY COLUMNS AND TYPES
# ============================================================================

class TestIdentityResolution:
    """Tests for identity column names and type names."""

    def test_own_identity_columns(self, helper):
        order = helper.find_class_by_name("Order")
        assert helper.sql_identity_column_names(order) == ["customer_id", "number"]

    def test_unqualified_does_not_walk_parent(self, helper):
        customer = helper.find_class_by_name("Customer")
        assert helper.sql_identity_column_names(customer, qualified=False) == []

    def test_qualified_walks_parent(self, helper):
        customer = helper.find_class_by_name("Customer")
        assert helper.sql_identity_column_names(customer, qualified=True) == ["id"]

    def test_plain_identity_types(self, helper):
        assert helper.resolve_identity_type_names("Entity") == ["integer"]

    def test_inherited_identity_types(self, helper):
        assert helper.resolve_identity_type_names("Customer") == ["integer"]

    def test_reference_identity_types(self, helper):
        assert helper.resolve_identity_type_names("Order") == ["integer", "integer"]

    def test_sql_type_wins(self, helper):
        assert helper.resolve_identity_type_names("Line") == ["integer", "integer", "smallint"]

    def test_unknown_class(self, helper):
        with pytest.raises(StructuralMappingError):
            helper.resolve_identity_type_names("Ghost")

    def test_circular_identity_reference(self):
        helper = MappingHelper(MappingDocument(classes=[
            {"name": "A", "table": "a",
             "fields": [{"name": "b", "type": "B", "identity": True, "columns": "b_id"}]},
            {"name": "B", "table": "b",
             "fields": [{"name": "a", "type": "A", "identity": True, "columns": "a_id"}]},
        ]))
        with pytest.raises(StructuralMappingError, match="Circular identity reference"):
            helper.resolve_identity_type_names("A")

    def test_circular_extends(self):
        helper = MappingHelper(MappingDocument(classes=[
            {"name": "A", "extends": "B"},
            {"name": "B", "extends": "A"},
        ]))
        with pytest.raises(StructuralMappingError, match="Circular extends"):
            helper.sql_identity_column_names(helper.find_class_by_name("A"), qualified=True)
