# ============================================================================
# POSTGRESQL DIALECT
# ============================================================================
# STATUS: Dialects - PostgreSQL rendering via psycopg.sql
# PURPOSE: PostgreSQL type map and schema object variants
# CREATED: 16 OCT 2026
# EXPORTS: PostgresTypeMapper, PostgresFactory
# DEPENDENCIES: psycopg
# ============================================================================
"""
PostgreSQL Dialect

Differences from standard SQL:
- Identifiers are quoted, and schema-qualified when schema_name is set
- The schema statement is CREATE SCHEMA IF NOT EXISTS + SET search_path
- Tables are dropped with IF EXISTS ... CASCADE
- SEQUENCE key generators create the sequence, then set nextval() as the
  identity column default
"""

from typing import Optional

from core.contracts import KeyGeneratorStrategy, ParamStyle
from core.schema.factory import SchemaFactory
from core.schema.objects import (
    Field,
    ForeignKey,
    Index,
    PrimaryKey,
    Schema,
    SequenceKeyGenerator,
    Table,
)
from dialects.generic import GenericTypeMapper
from dialects.postgresql_ddl import (
    ConstraintBuilder,
    IndexBuilder,
    SchemaUtils,
    SequenceBuilder,
    TableBuilder,
    render,
)
from dialects.registry import register_dialect


class PostgresTypeMapper(GenericTypeMapper):
    """PostgreSQL column types."""

    TYPES = {
        **GenericTypeMapper.TYPES,
        "bit": ("BOOLEAN", ParamStyle.NONE),
        "tinyint": ("SMALLINT", ParamStyle.NONE),
        "longvarchar": ("TEXT", ParamStyle.NONE),
        "text": ("TEXT", ParamStyle.NONE),
        "timestamptz": ("TIMESTAMPTZ", ParamStyle.NONE),
        "binary": ("BYTEA", ParamStyle.NONE),
        "varbinary": ("BYTEA", ParamStyle.NONE),
        "longvarbinary": ("BYTEA", ParamStyle.NONE),
        "blob": ("BYTEA", ParamStyle.NONE),
        "clob": ("TEXT", ParamStyle.NONE),
        "jsonb": ("JSONB", ParamStyle.NONE),
        "uuid": ("UUID", ParamStyle.NONE),
        "serial": ("SERIAL", ParamStyle.NONE),
    }

    ALIASES = {
        **GenericTypeMapper.ALIASES,
        "datetime": "timestamptz",
        "dict": "jsonb",
        "list": "jsonb",
        "json": "jsonb",
    }


def _schema_name(obj) -> Optional[str]:
    return obj.config.schema_name or None


class PostgresField(Field):

    def to_composed(self):
        return TableBuilder.column(
            self.name,
            self.type_info.to_ddl(),
            not_null=self.not_null,
            identity=self.is_generated_identity,
        )

    def to_ddl(self) -> str:
        return render(self.to_composed())


class PostgresTable(Table):

    def to_create_ddl(self, writer) -> None:
        columns = [f.to_composed() for f in self.fields]
        writer.print(render(TableBuilder.create(_schema_name(self), self.name, columns, writer.indent)))
        writer.end_statement()

    def to_drop_ddl(self, writer) -> None:
        writer.print(render(TableBuilder.drop(_schema_name(self), self.name)))
        writer.end_statement()


class PostgresPrimaryKey(PrimaryKey):

    def to_create_ddl(self, writer) -> None:
        if not self.fields:
            return
        writer.print(render(ConstraintBuilder.primary_key(
            _schema_name(self), self.table.name, self.name, self.field_names,
        )))
        writer.end_statement()


class PostgresForeignKey(ForeignKey):

    def to_create_ddl(self, writer) -> None:
        fk_defaults = self.config.foreign_keys
        writer.print(render(ConstraintBuilder.foreign_key(
            _schema_name(self),
            self.table.name,
            self.name,
            [f.name for f in self.fields],
            self.reference_table.name,
            [f.name for f in self.reference_fields],
            on_delete=fk_defaults.on_delete,
            on_update=fk_defaults.on_update,
        )))
        writer.end_statement()


class PostgresIndex(Index):

    def to_create_ddl(self, writer) -> None:
        builder = IndexBuilder.unique if self.unique else IndexBuilder.btree
        writer.print(render(builder(
            _schema_name(self), self.table.name, [f.name for f in self.fields], self.name,
        )))
        writer.end_statement()


class PostgresSequenceKeyGenerator(SequenceKeyGenerator):

    def to_create_ddl(self, writer) -> None:
        schema = _schema_name(self)
        writer.print(render(SequenceBuilder.create(schema, self.sequence_name, self.increment)))
        writer.end_statement()
        for field in self.table.identity_fields:
            if field.key_generator is not self:
                continue
            writer.print(render(ConstraintBuilder.set_default(
                schema, self.table.name, field.name,
                SequenceBuilder.nextval(schema, self.sequence_name),
            )))
            writer.end_statement()


class PostgresSchema(Schema):

    def to_create_ddl(self, writer) -> None:
        if not self.name:
            return
        writer.print(render(SchemaUtils.create_schema(self.name)))
        writer.end_statement()
        writer.print(render(SchemaUtils.set_search_path(self.name)))
        writer.end_statement()


@register_dialect("postgresql", aliases=("postgres", "pg"), description="PostgreSQL 12+, quoted identifiers")
class PostgresFactory(SchemaFactory):
    """PostgreSQL schema objects."""

    title = "PostgreSQL"

    schema_class = PostgresSchema
    table_class = PostgresTable
    field_class = PostgresField
    primary_key_class = PostgresPrimaryKey
    foreign_key_class = PostgresForeignKey
    index_class = PostgresIndex
    sequence_key_generator_class = PostgresSequenceKeyGenerator
    type_mapper_class = PostgresTypeMapper

    supported_strategies = frozenset(KeyGeneratorStrategy)


__all__ = ["PostgresTypeMapper", "PostgresFactory"]
