# ============================================================================
# SCHEMA OBJECT FACTORY
# ============================================================================
# STATUS: Core - Abstract factory for dialect-specific schema objects
# PURPOSE: Create Schema/Table/Field/keys of one dialect family
# CREATED: 16 OCT 2026
# EXPORTS: SchemaFactory
# ============================================================================
"""
Schema Object Factory

The SchemaBuilder never instantiates schema objects directly. It asks the
factory it was constructed with, so one builder serves every dialect.

A dialect overrides the class attributes:

    class MysqlFactory(SchemaFactory):
        table_class = MysqlTable
        type_mapper_class = MysqlTypeMapper
        supported_strategies = frozenset({...})
"""

from typing import FrozenSet, List, Optional, Type

from __version__ import __version__

from core.config.defaults import GeneratorDefaults
from core.contracts import KeyGeneratorStrategy, RelationType
from core.errors import StructuralMappingError
from core.models.mapping import KeyGeneratorDef
from core.schema.objects import (
    Field,
    ForeignKey,
    Index,
    KeyGenerator,
    PrimaryKey,
    Schema,
    SequenceKeyGenerator,
    Table,
)
from core.schema.types import TypeInfo, TypeMapper


class SchemaFactory:
    """Creates schema objects of a single dialect family."""

    name: str = "generic"
    title: str = "Standard SQL"
    comment_prefix: str = "--"

    schema_class: Type[Schema] = Schema
    table_class: Type[Table] = Table
    field_class: Type[Field] = Field
    primary_key_class: Type[PrimaryKey] = PrimaryKey
    foreign_key_class: Type[ForeignKey] = ForeignKey
    index_class: Type[Index] = Index
    key_generator_class: Type[KeyGenerator] = KeyGenerator
    sequence_key_generator_class: Type[KeyGenerator] = SequenceKeyGenerator
    type_mapper_class: Type[TypeMapper] = TypeMapper

    supported_strategies: FrozenSet[KeyGeneratorStrategy] = frozenset(KeyGeneratorStrategy)

    def __init__(self, config: Optional[GeneratorDefaults] = None):
        self.config = config or GeneratorDefaults()

    def create_type_mapper(self) -> TypeMapper:
        return self.type_mapper_class(self.config.types)

    def create_schema(self, name: Optional[str] = None) -> Schema:
        return self.schema_class(self.config, name or self.config.schema_name or None)

    def create_table(self, name: str) -> Table:
        return self.table_class(self.config, name)

    def create_field(
        self,
        name: str,
        type_info: TypeInfo,
        identity: bool = False,
        required: bool = False,
        key_generator: Optional[KeyGenerator] = None,
    ) -> Field:
        return self.field_class(
            self.config,
            name,
            type_info=type_info,
            identity=identity,
            required=required,
            key_generator=key_generator,
        )

    def create_primary_key(self, table: Table) -> PrimaryKey:
        """Create the (empty) primary key pk_<table> and attach it to the table."""
        primary_key = self.primary_key_class(self.config, f"pk_{table.name}")
        table.primary_key = primary_key
        return primary_key

    def create_foreign_key(
        self,
        name: str,
        relation_type: RelationType = RelationType.ONE_ONE,
    ) -> ForeignKey:
        return self.foreign_key_class(self.config, name, relation_type=relation_type)

    def create_index(self, name: str, unique: bool = False) -> Index:
        return self.index_class(self.config, name, unique=unique)

    def create_key_generator(self, definition: KeyGeneratorDef) -> KeyGenerator:
        """
        Instantiate a key generator for a declared definition.

        Raises:
            StructuralMappingError: unknown strategy, or not supported here
        """
        strategy = KeyGeneratorStrategy.parse(definition.strategy)
        if strategy is None:
            raise StructuralMappingError(
                f"Unknown key generator strategy '{definition.strategy}' "
                f"for key generator '{definition.name}'"
            )
        if strategy not in self.supported_strategies:
            raise StructuralMappingError(
                f"Key generator strategy {strategy.value} is not supported by "
                f"the {self.name} dialect (key generator '{definition.name}')"
            )

        if strategy == KeyGeneratorStrategy.SEQUENCE:
            generator_class = self.sequence_key_generator_class
        else:
            generator_class = self.key_generator_class

        return generator_class(
            self.config,
            definition.registry_key,
            strategy=strategy,
            params=definition.params,
        )

    def header_lines(self) -> List[str]:
        """Lines of the leading comment block."""
        return [
            f"{self.title} DDL",
            f"Generated by mapping-ddlgen {__version__}",
        ]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} dialect={self.name}>"


__all__ = ["SchemaFactory"]
