# ============================================================================
# MAPPING SERVICE TESTS
# ============================================================================
# STATUS: Tests - YAML mapping loading
# PURPOSE: Verify parsing, validation errors, caching and directory loading
# CREATED: 16 OCT 2026
# ============================================================================
"""
Mapping Service Tests

Run with:
    pytest tests/test_mapping_service.py -v
"""

from pathlib import Path

import pytest

from core.errors import MappingLoadError
from dialects.generic import GenericFactory
from generator.schema_builder import SchemaBuilder
from services import MappingService

MAPPINGS_DIR = Path(__file__).resolve().parent.parent / "mappings"

PRODUCT_YAML = """
classes:
  - name: Product
    table: prod
    fields:
      - {name: id, type: integer, identity: true, columns: id}
      - {name: name, type: string, columns: name}
"""


@pytest.fixture
def service(tmp_path):
    return MappingService(mappings_dir=str(tmp_path))


# ============================================================================
# PARSING
# ============================================================================

class TestLoads:
    """Tests for MappingService.loads()."""

    def test_valid_document(self, service):
        document = service.loads(PRODUCT_YAML)
        assert [cm.name for cm in document.classes] == ["Product"]
        assert document.classes[0].fields[0].columns == ["id"]

    def test_empty_text(self, service):
        document = service.loads("")
        assert document.classes == []

    def test_malformed_yaml(self, service):
        with pytest.raises(MappingLoadError, match="Malformed YAML") as exc_info:
            service.loads("classes: [unclosed", source="broken.yaml")
        assert exc_info.value.source == "broken.yaml"

    def test_not_a_mapping(self, service):
        with pytest.raises(MappingLoadError, match="must be a YAML mapping"):
            service.loads("- a\n- b\n")

    def test_schema_violation(self, service):
        with pytest.raises(MappingLoadError, match="Invalid mapping"):
            service.loads("classes:\n  - table: prod\n")

    def test_structure_violation(self, service):
        text = "classes:\n  - {name: A, table: a}\n  - {name: A, table: b}\n"
        with pytest.raises(MappingLoadError, match="Duplicate class name"):
            service.loads(text)


# ============================================================================
# FILES
# ============================================================================

class TestLoad:
    """Tests for file loading and caching."""

    def test_load_file(self, service, tmp_path):
        path = tmp_path / "shop.yaml"
        path.write_text(PRODUCT_YAML)
        assert service.load(path).classes[0].table == "prod"

    def test_load_is_cached(self, service, tmp_path):
        path = tmp_path / "shop.yaml"
        path.write_text(PRODUCT_YAML)
        first = service.load(path)
        path.write_text("classes: []\n")
        assert service.load(str(path)) is first

        service.clear_cache()
        assert service.load(path).classes == []

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(MappingLoadError, match="Cannot read mapping file"):
            service.load(tmp_path / "missing.yaml")

    def test_load_all(self, service, tmp_path):
        (tmp_path / "b.yml").write_text(PRODUCT_YAML)
        (tmp_path / "a.yaml").write_text("classes: []\n")
        (tmp_path / "notes.txt").write_text("ignored")
        documents = service.load_all()
        assert [len(d.classes) for d in documents] == [0, 1]

    def test_load_all_missing_directory(self, tmp_path):
        service = MappingService(mappings_dir=str(tmp_path / "nope"))
        assert service.load_all() == []


# ============================================================================
# BUNDLED SAMPLE
# ============================================================================

class TestSampleMapping:
    """The bundled sample mapping loads and builds."""

    def test_sample_builds(self):
        document = MappingService(mappings_dir=str(MAPPINGS_DIR)).load(MAPPINGS_DIR / "shop.yaml")
        schema = SchemaBuilder(GenericFactory()).build(document)

        assert schema.table_names == [
            "customer", "product", "tag", "orders", "order_line", "product_tag",
        ]
        assert schema.get_table("order_line").primary_key.field_names == ["order_id", "position"]
        assert schema.get_table("product_tag").field_names == ["product", "tag"]
        assert schema.get_table("customer").primary_key.field_names == ["id"]
