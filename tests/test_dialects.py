# ============================================================================
# DIALECT TESTS
# ============================================================================
# STATUS: Tests - Dialect registry and dialect-specific DDL
# PURPOSE: Verify lookup by name/alias and rendered DDL per dialect
# CREATED: 16 OCT 2026
# ============================================================================
"""
Dialect Tests

Registry lookups plus end-to-end rendering through create_generator()
for the generic, PostgreSQL and MySQL dialects.

Run with:
    pytest tests/test_dialects.py -v
"""

from dataclasses import replace

import pytest

from __version__ import __version__
from core.config import ForeignKeyDefaults, GeneratorDefaults
from core.errors import ConfigurationError, StructuralMappingError
from core.models import MappingDocument
from dialects import (
    DialectNotFoundError,
    GenericFactory,
    MysqlFactory,
    PostgresFactory,
    get_dialect,
    get_dialect_or_raise,
    list_dialects,
)
from dialects.postgresql_ddl import IndexBuilder, SequenceBuilder, render
from generator import create_generator


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def document():
    return MappingDocument(classes=[
        {
            "name": "Product",
            "table": "prod",
            "key_generator": "identity",
            "fields": [
                {"name": "id", "type": "integer", "identity": True, "columns": "id"},
                {"name": "name", "type": "string", "columns": "name"},
            ],
            "indexes": [{"columns": "name", "unique": True}],
        },
        {
            "name": "Review",
            "table": "review",
            "fields": [
                {"name": "id", "type": "long", "identity": True, "columns": "id"},
                {"name": "product", "type": "Product", "columns": "product_id", "required": True},
            ],
        },
    ])


def _generate(dialect, document, **overrides):
    config = replace(GeneratorDefaults(), dialect=dialect, **overrides)
    return create_generator(config=config).generate_ddl_string(document)


# ============================================================================
# REGISTRY
# ============================================================================

class TestDialectRegistry:
    """Tests for dialect registration and lookup."""

    def test_names(self):
        assert get_dialect("generic") is GenericFactory
        assert get_dialect("postgresql") is PostgresFactory
        assert get_dialect("mysql") is MysqlFactory

    def test_aliases(self):
        assert get_dialect("pg") is PostgresFactory
        assert get_dialect("Postgres") is PostgresFactory
        assert get_dialect("mariadb") is MysqlFactory
        assert get_dialect("sql92") is GenericFactory

    def test_unknown_dialect(self):
        assert get_dialect("oracle") is None
        assert get_dialect("") is None
        with pytest.raises(DialectNotFoundError, match="Unknown dialect: oracle"):
            get_dialect_or_raise("oracle")

    def test_not_found_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            create_generator("oracle")

    def test_list_dialects(self):
        names = [d["name"] for d in list_dialects()]
        assert names == sorted(names)
        assert {"generic", "mysql", "postgresql"} <= set(names)

    def test_factory_name_is_set(self):
        assert PostgresFactory.name == "postgresql"


# ============================================================================
# GENERIC
# ============================================================================

class TestGenericDialect:
    """Standard SQL output."""

    def test_header(self, document):
        text = _generate("generic", document)
        assert text.startswith(f"-- Standard SQL DDL\n-- Generated by mapping-ddlgen {__version__}\n\n")

    def test_statements(self, document):
        text = _generate("generic", document)
        assert "CREATE TABLE prod (\n    id INTEGER NOT NULL GENERATED BY DEFAULT AS IDENTITY,\n" in text
        assert "CREATE UNIQUE INDEX idx_unique_prod_name ON prod (name);" in text
        assert "    id BIGINT NOT NULL,\n    product_id INTEGER NOT NULL\n);" in text
        assert (
            "ALTER TABLE review ADD CONSTRAINT review_product FOREIGN KEY (product_id) "
            "REFERENCES prod (id);"
        ) in text

    def test_referential_actions(self, document):
        text = _generate(
            "generic", document,
            foreign_keys=ForeignKeyDefaults(on_delete="cascade", on_update="restrict"),
        )
        assert "REFERENCES prod (id) ON DELETE CASCADE ON UPDATE RESTRICT;" in text


# ============================================================================
# POSTGRESQL
# ============================================================================

class TestPostgresDialect:
    """PostgreSQL output rendered through psycopg.sql."""

    def test_quoted_identifiers(self, document):
        text = _generate("postgresql", document)
        assert text.startswith("-- PostgreSQL DDL\n")
        assert 'DROP TABLE IF EXISTS "prod" CASCADE;' in text
        assert 'CREATE TABLE "prod" (\n    "id" INTEGER NOT NULL GENERATED BY DEFAULT AS IDENTITY,' in text
        assert '"name" VARCHAR(255)\n);' in text
        assert 'ALTER TABLE "prod" ADD CONSTRAINT "pk_prod" PRIMARY KEY ("id");' in text
        assert (
            'ALTER TABLE "review" ADD CONSTRAINT "review_product" FOREIGN KEY ("product_id") '
            'REFERENCES "prod" ("id");'
        ) in text
        assert 'CREATE UNIQUE INDEX IF NOT EXISTS "idx_unique_prod_name" ON "prod" ("name");' in text

    def test_no_schema_statements_by_default(self, document):
        text = _generate("postgresql", document)
        assert "CREATE SCHEMA" not in text
        assert "search_path" not in text

    def test_schema_name(self, document):
        text = _generate("postgresql", document, schema_name="app")
        assert 'CREATE SCHEMA IF NOT EXISTS "app";' in text
        assert 'SET search_path TO "app", public;' in text
        assert 'CREATE TABLE "app"."prod" (' in text
        assert 'REFERENCES "app"."prod" ("id")' in text
        assert text.index("CREATE SCHEMA") < text.index("DROP TABLE")

    def test_postgres_types(self):
        document = MappingDocument(classes=[{
            "name": "Doc", "table": "doc",
            "fields": [
                {"name": "id", "type": "uuid", "identity": True, "columns": "id"},
                {"name": "body", "type": "dict", "columns": "body"},
                {"name": "created", "type": "datetime", "columns": "created"},
            ],
        }])
        text = _generate("postgresql", document)
        assert '"id" UUID NOT NULL' in text
        assert '"body" JSONB' in text
        assert '"created" TIMESTAMPTZ' in text

    def test_sequence_with_column_default(self):
        document = MappingDocument(
            key_generators=[{"name": "ids", "strategy": "SEQUENCE", "params": {"increment": 10}}],
            classes=[{
                "name": "Item", "table": "item", "key_generator": "ids",
                "fields": [{"name": "id", "type": "integer", "identity": True, "columns": "id"}],
            }],
        )
        text = _generate("postgresql", document)
        assert 'CREATE SEQUENCE IF NOT EXISTS "item_seq" INCREMENT BY 10;' in text
        assert 'ALTER TABLE "item" ALTER COLUMN "id" SET DEFAULT nextval(' in text
        assert text.index("CREATE SEQUENCE") < text.index("SET DEFAULT")

    def test_index_builder(self):
        stmt = IndexBuilder.btree("app", "prod", ["name"], name="idx_prod_name")
        assert render(stmt) == 'CREATE INDEX IF NOT EXISTS "idx_prod_name" ON "app"."prod" ("name")'

    def test_sequence_builder(self):
        assert render(SequenceBuilder.create(None, "s")) == 'CREATE SEQUENCE IF NOT EXISTS "s"'

    def test_embedded_quotes_are_escaped(self):
        document = MappingDocument(classes=[{
            "name": "Odd", "table": 'we"ird',
            "fields": [{"name": "id", "type": "integer", "identity": True, "columns": "id"}],
        }])
        text = _generate("postgresql", document)
        assert 'CREATE TABLE "we""ird" (' in text


# ============================================================================
# MYSQL
# ============================================================================

class TestMysqlDialect:
    """MySQL output."""

    def test_back_quoted_identifiers(self, document):
        text = _generate("mysql", document)
        assert text.startswith("# MySQL DDL\n")
        assert "DROP TABLE IF EXISTS `prod`;" in text
        assert "ALTER TABLE `review` ADD CONSTRAINT `pk_review` PRIMARY KEY (`id`);" in text
        assert (
            "ALTER TABLE `review` ADD CONSTRAINT `review_product` FOREIGN KEY (`product_id`) "
            "REFERENCES `prod` (`id`);"
        ) in text
        assert "CREATE UNIQUE INDEX `idx_unique_prod_name` ON `prod` (`name`);" in text

    def test_auto_increment_table_declares_primary_key_inline(self, document):
        text = _generate("mysql", document)
        assert (
            "CREATE TABLE `prod` (\n"
            "    `id` INT NOT NULL AUTO_INCREMENT,\n"
            "    `name` VARCHAR(255),\n"
            "    PRIMARY KEY (`id`)\n"
            ");"
        ) in text
        assert "`pk_prod`" not in text

    def test_primary_key_statement_without_auto_increment(self, document):
        text = _generate("mysql", document)
        assert (
            "CREATE TABLE `review` (\n"
            "    `id` BIGINT NOT NULL,\n"
            "    `product_id` INT NOT NULL\n"
            ");"
        ) in text
        assert "ALTER TABLE `review` ADD CONSTRAINT `pk_review` PRIMARY KEY (`id`);" in text

    def test_engine(self, document):
        text = _generate("mysql", document, mysql_engine="InnoDB")
        assert ") ENGINE=InnoDB;" in text

    def test_embedded_backquote(self):
        document = MappingDocument(classes=[{
            "name": "Odd", "table": "we`ird",
            "fields": [{"name": "id", "type": "integer", "identity": True, "columns": "id"}],
        }])
        assert "CREATE TABLE `we``ird` (" in _generate("mysql", document)

    def test_sequence_not_supported(self):
        document = MappingDocument(key_generators=[{"name": "ids", "strategy": "SEQUENCE"}])
        with pytest.raises(StructuralMappingError, match="not supported"):
            _generate("mysql", document)
