# ============================================================================
# DDL EMITTER
# ============================================================================
# STATUS: Generator - Schema model to DDL statement stream
# PURPOSE: Statement ordering (by table / by statement kind) and toggles
# CREATED: 16 OCT 2026
# EXPORTS: DDLEmitter
# ============================================================================
"""
DDL Emitter

Walks a built Schema and lets every object render itself into a
DDLWriter. Two orderings are supported:

    GroupBy.TABLE     for each table: drop, create, primary key,
                      foreign keys, indexes, key generator
    GroupBy.DDL_TYPE  all drops, all creates, all primary keys,
                      all foreign keys, all indexes, all key generators

The header comment comes first, then the schema statement. Every
statement kind can be switched off through GenerationToggles.

The grouping mode is validated before anything is written.
"""

from typing import Optional, Sequence

from core.config.defaults import GeneratorDefaults
from core.contracts import GroupBy
from core.errors import ConfigurationError
from core.logging import ComponentType, get_logger
from core.schema.objects import Schema, Table
from generator.writer import DDLWriter

logger = get_logger(__name__, ComponentType.EMITTER)


class DDLEmitter:
    """Renders a Schema in the configured order."""

    def __init__(self, config: Optional[GeneratorDefaults] = None):
        self.config = config or GeneratorDefaults()

    def resolve_group_by(self) -> GroupBy:
        """
        Parse the configured grouping mode.

        Raises:
            ConfigurationError: value is neither "table" nor "ddltype"
        """
        group_by = GroupBy.parse(self.config.group_by)
        if group_by is None:
            valid = ", ".join(g.value for g in GroupBy)
            raise ConfigurationError(
                f"Unsupported group_by value '{self.config.group_by}' (expected one of: {valid})"
            )
        return group_by

    def emit(
        self,
        schema: Schema,
        writer: DDLWriter,
        header_lines: Optional[Sequence[str]] = None,
        comment_prefix: str = "--",
    ) -> int:
        """
        Render a schema into a writer.

        Returns:
            Number of statements written
        """
        group_by = self.resolve_group_by()
        toggles = self.config.toggles
        before = writer.statement_count

        self.generate_header(writer, header_lines, comment_prefix)
        if toggles.schema:
            schema.to_create_ddl(writer)

        if group_by == GroupBy.TABLE:
            self._emit_by_table(schema, writer)
        else:
            self._emit_by_ddl_type(schema, writer)

        written = writer.statement_count - before
        logger.info(f"Emitted {written} statements for {len(schema)} tables ({group_by.value})")
        return written

    # ------------------------------------------------------------------
    # Orderings
    # ------------------------------------------------------------------

    def _emit_by_table(self, schema: Schema, writer: DDLWriter) -> None:
        toggles = self.config.toggles
        for table in schema.tables:
            if toggles.drop:
                table.to_drop_ddl(writer)
            if toggles.create:
                table.to_create_ddl(writer)
            if toggles.primary_key:
                table.primary_key.to_create_ddl(writer)
            if toggles.foreign_key:
                self._foreign_keys(table, writer)
            if toggles.index:
                self._indexes(table, writer)
            if toggles.key_generator:
                self._key_generator(table, writer)

    def _emit_by_ddl_type(self, schema: Schema, writer: DDLWriter) -> None:
        toggles = self.config.toggles
        if toggles.drop:
            self.generate_drop(schema, writer)
        if toggles.create:
            self.generate_create(schema, writer)
        if toggles.primary_key:
            self.generate_primary_keys(schema, writer)
        if toggles.foreign_key:
            self.generate_foreign_keys(schema, writer)
        if toggles.index:
            self.generate_indexes(schema, writer)
        if toggles.key_generator:
            self.generate_key_generators(schema, writer)

    # ------------------------------------------------------------------
    # Statement kinds
    # ------------------------------------------------------------------

    def generate_header(
        self,
        writer: DDLWriter,
        header_lines: Optional[Sequence[str]] = None,
        comment_prefix: str = "--",
    ) -> None:
        if not header_lines:
            return
        for line in header_lines:
            writer.comment(line, comment_prefix)
        writer.println()

    def generate_drop(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            table.to_drop_ddl(writer)

    def generate_create(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            table.to_create_ddl(writer)

    def generate_primary_keys(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            table.primary_key.to_create_ddl(writer)

    def generate_foreign_keys(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            self._foreign_keys(table, writer)

    def generate_indexes(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            self._indexes(table, writer)

    def generate_key_generators(self, schema: Schema, writer: DDLWriter) -> None:
        for table in schema.tables:
            self._key_generator(table, writer)

    def _foreign_keys(self, table: Table, writer: DDLWriter) -> None:
        for foreign_key in table.foreign_keys:
            foreign_key.to_create_ddl(writer)

    def _indexes(self, table: Table, writer: DDLWriter) -> None:
        for index in table.indexes:
            index.to_create_ddl(writer)

    def _key_generator(self, table: Table, writer: DDLWriter) -> None:
        generator = table.key_generator
        if generator is None:
            return
        if not any(f.key_generator is generator for f in table.identity_fields):
            logger.debug(f"Key generator {generator.name} unused by table {table.name}, skipped")
            return
        generator.table = table
        generator.to_create_ddl(writer)


__all__ = ["DDLEmitter"]
