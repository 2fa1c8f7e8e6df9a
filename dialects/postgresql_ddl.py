# ============================================================================
# POSTGRESQL DDL BUILDERS
# ============================================================================
# STATUS: Dialects - psycopg.sql statement builders
# PURPOSE: Table, constraint, index, sequence and schema statements
# CREATED: 16 OCT 2026
# EXPORTS: qualified, render, TableBuilder, ConstraintBuilder, IndexBuilder,
#          SequenceBuilder, SchemaUtils
# DEPENDENCIES: psycopg
# ============================================================================
"""
PostgreSQL DDL Builders.

All builders return psycopg.sql.Composed objects. Identifiers are always
passed through sql.Identifier, so names are quoted and escaped by psycopg
rather than by string concatenation.

The generator never connects to a database; render() turns a Composed
into text without a connection.

Usage:
    from dialects.postgresql_ddl import IndexBuilder, render

    stmt = IndexBuilder.btree("app", "prod", ["name"], name="idx_prod_name")
    render(stmt)
    # 'CREATE INDEX "idx_prod_name" ON "app"."prod" ("name")'
"""

from typing import List, Optional, Sequence, Union

from psycopg import sql


def qualified(schema: Optional[str], name: str) -> sql.Identifier:
    """Identifier, schema-qualified when a schema is configured."""
    if schema:
        return sql.Identifier(schema, name)
    return sql.Identifier(name)


def render(statement: sql.Composable) -> str:
    """Render a composed statement without a connection."""
    return statement.as_string(None)


def _column_list(columns: Union[str, Sequence[str]]) -> sql.Composed:
    if isinstance(columns, str):
        columns = [columns]
    return sql.SQL(", ").join(sql.Identifier(c) for c in columns)


# ============================================================================
# TABLE BUILDER
# ============================================================================

class TableBuilder:
    """Builder for CREATE/DROP TABLE and column definitions."""

    @staticmethod
    def column(
        name: str,
        sql_type: str,
        not_null: bool = False,
        identity: bool = False,
        default: Optional[sql.Composable] = None,
    ) -> sql.Composed:
        """
        Column definition.

        Args:
            name: Column name
            sql_type: Rendered column type, e.g. VARCHAR(64)
            not_null: Append NOT NULL
            identity: Append GENERATED BY DEFAULT AS IDENTITY
            default: Optional DEFAULT expression
        """
        parts = [sql.Identifier(name), sql.SQL(sql_type)]
        if default is not None:
            parts.append(sql.SQL("DEFAULT {}").format(default))
        if not_null:
            parts.append(sql.SQL("NOT NULL"))
        if identity:
            parts.append(sql.SQL("GENERATED BY DEFAULT AS IDENTITY"))
        return sql.SQL(" ").join(parts)

    @staticmethod
    def create(
        schema: Optional[str],
        table: str,
        columns: List[sql.Composable],
        indent: str = "    ",
    ) -> sql.Composed:
        """CREATE TABLE with one column per line."""
        body = sql.SQL(",\n").join(sql.SQL(indent) + c for c in columns)
        if columns:
            return sql.SQL("CREATE TABLE {table} (\n{body}\n)").format(
                table=qualified(schema, table),
                body=body,
            )
        return sql.SQL("CREATE TABLE {table} (\n)").format(table=qualified(schema, table))

    @staticmethod
    def drop(schema: Optional[str], table: str, cascade: bool = True) -> sql.Composed:
        """DROP TABLE IF EXISTS, cascading to dependent constraints by default."""
        stmt = sql.SQL("DROP TABLE IF EXISTS {}").format(qualified(schema, table))
        if cascade:
            stmt = sql.SQL("{} CASCADE").format(stmt)
        return stmt


# ============================================================================
# CONSTRAINT BUILDER
# ============================================================================

class ConstraintBuilder:
    """Builder for ALTER TABLE ... ADD CONSTRAINT statements."""

    @staticmethod
    def primary_key(
        schema: Optional[str],
        table: str,
        name: str,
        columns: Sequence[str],
    ) -> sql.Composed:
        return sql.SQL("ALTER TABLE {table} ADD CONSTRAINT {name} PRIMARY KEY ({columns})").format(
            table=qualified(schema, table),
            name=sql.Identifier(name),
            columns=_column_list(columns),
        )

    @staticmethod
    def foreign_key(
        schema: Optional[str],
        table: str,
        name: str,
        columns: Sequence[str],
        reference_table: str,
        reference_columns: Sequence[str],
        on_delete: str = "",
        on_update: str = "",
    ) -> sql.Composed:
        stmt = sql.SQL(
            "ALTER TABLE {table} ADD CONSTRAINT {name} FOREIGN KEY ({columns}) "
            "REFERENCES {reference} ({reference_columns})"
        ).format(
            table=qualified(schema, table),
            name=sql.Identifier(name),
            columns=_column_list(columns),
            reference=qualified(schema, reference_table),
            reference_columns=_column_list(reference_columns),
        )
        if on_delete:
            stmt = sql.SQL("{} ON DELETE {}").format(stmt, sql.SQL(on_delete.upper()))
        if on_update:
            stmt = sql.SQL("{} ON UPDATE {}").format(stmt, sql.SQL(on_update.upper()))
        return stmt

    @staticmethod
    def set_default(
        schema: Optional[str],
        table: str,
        column: str,
        default: sql.Composable,
    ) -> sql.Composed:
        return sql.SQL("ALTER TABLE {table} ALTER COLUMN {column} SET DEFAULT {default}").format(
            table=qualified(schema, table),
            column=sql.Identifier(column),
            default=default,
        )


# ============================================================================
# INDEX BUILDER
# ============================================================================

class IndexBuilder:
    """
    Builder for PostgreSQL index DDL statements.

    All methods are static and return sql.Composed objects.
    """

    @staticmethod
    def btree(
        schema: Optional[str],
        table: str,
        columns: Union[str, Sequence[str]],
        name: str,
    ) -> sql.Composed:
        """CREATE INDEX IF NOT EXISTS (B-tree, the PostgreSQL default)."""
        return sql.SQL("CREATE INDEX IF NOT EXISTS {name} ON {table} ({columns})").format(
            name=sql.Identifier(name),
            table=qualified(schema, table),
            columns=_column_list(columns),
        )

    @staticmethod
    def unique(
        schema: Optional[str],
        table: str,
        columns: Union[str, Sequence[str]],
        name: str,
    ) -> sql.Composed:
        """CREATE UNIQUE INDEX IF NOT EXISTS."""
        return sql.SQL("CREATE UNIQUE INDEX IF NOT EXISTS {name} ON {table} ({columns})").format(
            name=sql.Identifier(name),
            table=qualified(schema, table),
            columns=_column_list(columns),
        )


# ============================================================================
# SEQUENCE BUILDER
# ============================================================================

class SequenceBuilder:
    """Builder for sequences backing SEQUENCE key generators."""

    @staticmethod
    def create(schema: Optional[str], name: str, increment: Optional[int] = None) -> sql.Composed:
        stmt = sql.SQL("CREATE SEQUENCE IF NOT EXISTS {}").format(qualified(schema, name))
        if increment is not None:
            stmt = sql.SQL("{} INCREMENT BY {}").format(stmt, sql.Literal(increment))
        return stmt

    @staticmethod
    def nextval(schema: Optional[str], name: str) -> sql.Composed:
        """nextval('<quoted sequence name>') expression."""
        return sql.SQL("nextval({})").format(sql.Literal(render(qualified(schema, name))))


# ============================================================================
# SCHEMA UTILITIES
# ============================================================================

class SchemaUtils:
    """
    Utility methods for schema-level DDL operations.
    """

    @staticmethod
    def create_schema(schema: str) -> sql.Composed:
        return sql.SQL("CREATE SCHEMA IF NOT EXISTS {}").format(sql.Identifier(schema))

    @staticmethod
    def set_search_path(schema: str, include_public: bool = True) -> sql.Composed:
        """
        Set search_path to include schema.
        """
        if include_public:
            return sql.SQL("SET search_path TO {}, public").format(
                sql.Identifier(schema)
            )
        else:
            return sql.SQL("SET search_path TO {}").format(
                sql.Identifier(schema)
            )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "qualified",
    "render",
    "TableBuilder",
    "ConstraintBuilder",
    "IndexBuilder",
    "SequenceBuilder",
    "SchemaUtils",
]
