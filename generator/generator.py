# ============================================================================
# DDL GENERATOR
# ============================================================================
# STATUS: Generator - Build-then-emit facade
# PURPOSE: One call from mapping document to DDL text for a dialect
# CREATED: 16 OCT 2026
# EXPORTS: DDLGenerator, create_generator
# ============================================================================
"""
DDL Generator

Ties the pieces of one generation run together:

    MappingDocument -> SchemaBuilder -> Schema -> DDLEmitter -> DDLWriter -> stream

Output is buffered and written to the stream only after the schema was
built and fully rendered, so a failing run writes nothing.

Usage:
    from generator import create_generator

    generator = create_generator("postgresql")
    generator.generate_ddl(document, sys.stdout)
"""

from typing import Optional, TextIO

from core.config.defaults import GeneratorDefaults, get_defaults
from core.logging import ComponentType, get_logger, log_context
from core.models.mapping import MappingDocument
from core.schema.factory import SchemaFactory
from core.schema.objects import Schema
from core.schema.types import TypeMapper
from dialects.registry import get_dialect_or_raise
from generator.emitter import DDLEmitter
from generator.key_generators import KeyGeneratorRegistry
from generator.schema_builder import SchemaBuilder
from generator.writer import DDLWriter

logger = get_logger(__name__, ComponentType.EMITTER)


class DDLGenerator:
    """Builds a schema for one dialect and writes its DDL."""

    def __init__(
        self,
        factory: SchemaFactory,
        type_mapper: Optional[TypeMapper] = None,
        config: Optional[GeneratorDefaults] = None,
    ):
        self.config = config or factory.config
        self.factory = factory
        self.type_mapper = type_mapper or factory.create_type_mapper()
        self.key_generators = KeyGeneratorRegistry(factory)
        self.emitter = DDLEmitter(self.config)

    def create_schema(self, document: MappingDocument) -> Schema:
        """Build the schema model without rendering it."""
        builder = SchemaBuilder(self.factory, self.type_mapper, self.key_generators)
        return builder.build(document)

    def render(self, schema: Schema) -> DDLWriter:
        """Render a built schema into a fresh buffered writer."""
        writer = DDLWriter(delimiter=self.config.delimiter)
        self.emitter.emit(
            schema,
            writer,
            header_lines=self.factory.header_lines(),
            comment_prefix=self.factory.comment_prefix,
        )
        return writer

    def generate_ddl(self, document: MappingDocument, output: TextIO) -> int:
        """
        Build, render and write the DDL for a mapping document.

        Returns:
            Number of statements written

        Raises:
            ConfigurationError: unsupported grouping mode (before any work)
            StructuralMappingError, TypeNotFoundError: invalid mapping
        """
        self.emitter.resolve_group_by()
        with log_context(dialect=self.factory.name):
            schema = self.create_schema(document)
            writer = self.render(schema)
            writer.write_to(output)
        return writer.statement_count

    def generate_ddl_string(self, document: MappingDocument) -> str:
        """Build and render, returning the script as a string."""
        self.emitter.resolve_group_by()
        with log_context(dialect=self.factory.name):
            return self.render(self.create_schema(document)).getvalue()


def create_generator(
    dialect: Optional[str] = None,
    config: Optional[GeneratorDefaults] = None,
) -> DDLGenerator:
    """
    Create a generator for a registered dialect.

    Args:
        dialect: Dialect name or alias (defaults to config.dialect)
        config: Generation settings (defaults to get_defaults())

    Raises:
        DialectNotFoundError: unknown dialect
    """
    config = config or get_defaults()
    factory_class = get_dialect_or_raise(dialect or config.dialect)
    return DDLGenerator(factory_class(config), config=config)


__all__ = ["DDLGenerator", "create_generator"]
