# ============================================================================
# SCHEMA MODEL
# ============================================================================
# STATUS: Core - Dialect-agnostic relational schema objects
# PURPOSE: Schema, Table, Field, PrimaryKey, ForeignKey, Index, KeyGenerator
# CREATED: 16 OCT 2026
# EXPORTS: SchemaObject, Schema, Table, Field, PrimaryKey, ForeignKey, Index,
#          KeyGenerator, SequenceKeyGenerator
# ============================================================================
"""
Schema Model

In-memory relational schema assembled by the SchemaBuilder:

    Schema -> Tables -> {Fields, PrimaryKey, ForeignKeys, Indexes, KeyGenerator}

Ownership is strictly top-down. The Schema holds its Tables and a Table
holds its Fields, keys and indexes. The `table` attribute on Fields and
keys is a back-reference only.

The classes here render standard SQL. Dialects subclass them and register
the subclasses with a SchemaFactory.
"""

from typing import Any, Dict, List, Optional, Tuple

from core.config.defaults import GeneratorDefaults
from core.contracts import KeyGeneratorStrategy, RelationType
from core.errors import StructuralMappingError
from core.schema.types import TypeInfo


class SchemaObject:
    """Base for all schema objects; carries the run configuration."""

    def __init__(self, config: Optional[GeneratorDefaults] = None, name: Optional[str] = None):
        self.config = config or GeneratorDefaults()
        self.name = name

    def quote(self, identifier: str) -> str:
        """Render an identifier; standard SQL leaves it as is."""
        return identifier

    def quote_all(self, identifiers) -> str:
        return ", ".join(self.quote(i) for i in identifiers)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


# ============================================================================
# COLUMNS
# ============================================================================

class Field(SchemaObject):
    """A table column."""

    def __init__(
        self,
        config: Optional[GeneratorDefaults] = None,
        name: Optional[str] = None,
        type_info: Optional[TypeInfo] = None,
        identity: bool = False,
        required: bool = False,
        key_generator: Optional["KeyGenerator"] = None,
    ):
        super().__init__(config, name)
        self.table: Optional["Table"] = None
        self.type_info = type_info
        self.identity = identity
        self.required = required
        self.key_generator = key_generator

    @property
    def is_generated_identity(self) -> bool:
        """True if the database assigns this column's value (IDENTITY strategy)."""
        return (
            self.identity
            and self.key_generator is not None
            and self.key_generator.strategy == KeyGeneratorStrategy.IDENTITY
        )

    @property
    def not_null(self) -> bool:
        return self.identity or self.required

    def to_ddl(self) -> str:
        """Column definition inside CREATE TABLE."""
        parts = [self.quote(self.name), self.type_info.to_ddl()]
        if self.not_null:
            parts.append("NOT NULL")
        if self.is_generated_identity:
            parts.append("GENERATED BY DEFAULT AS IDENTITY")
        return " ".join(parts)


# ============================================================================
# KEYS AND INDEXES
# ============================================================================

class PrimaryKey(SchemaObject):
    """Primary key of a table, named pk_<table>."""

    def __init__(self, config: Optional[GeneratorDefaults] = None, name: Optional[str] = None):
        super().__init__(config, name)
        self.table: Optional["Table"] = None
        self._fields: List[Field] = []

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self._fields]

    def add_field(self, field: Field) -> None:
        """Add an identity column; adding the same column twice is a no-op."""
        if any(f is field for f in self._fields):
            return
        self._fields.append(field)

    def __len__(self) -> int:
        return len(self._fields)

    def to_create_ddl(self, writer) -> None:
        if not self._fields:
            return
        writer.print(
            "ALTER TABLE {0} ADD CONSTRAINT {1} PRIMARY KEY ({2})",
            self.quote(self.table.name), self.quote(self.name), self.quote_all(self.field_names),
        )
        writer.end_statement()


class ForeignKey(SchemaObject):
    """
    Foreign key named <table>_<fieldName>.

    fields and reference_fields are parallel: fields[i] references
    reference_fields[i].
    """

    def __init__(
        self,
        config: Optional[GeneratorDefaults] = None,
        name: Optional[str] = None,
        relation_type: RelationType = RelationType.ONE_ONE,
    ):
        super().__init__(config, name)
        self.table: Optional["Table"] = None
        self.reference_table: Optional["Table"] = None
        self.relation_type = relation_type
        self._fields: List[Field] = []
        self._reference_fields: List[Field] = []

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def reference_fields(self) -> Tuple[Field, ...]:
        return tuple(self._reference_fields)

    def add_field(self, field: Field) -> None:
        self._fields.append(field)

    def add_reference_field(self, field: Field) -> None:
        self._reference_fields.append(field)

    def _referential_actions(self) -> str:
        actions = []
        fk_defaults = self.config.foreign_keys
        if fk_defaults.on_delete:
            actions.append(f" ON DELETE {fk_defaults.on_delete.upper()}")
        if fk_defaults.on_update:
            actions.append(f" ON UPDATE {fk_defaults.on_update.upper()}")
        return "".join(actions)

    def to_create_ddl(self, writer) -> None:
        writer.print(
            "ALTER TABLE {0} ADD CONSTRAINT {1} FOREIGN KEY ({2}) REFERENCES {3} ({4}){5}",
            self.quote(self.table.name),
            self.quote(self.name),
            self.quote_all(f.name for f in self._fields),
            self.quote(self.reference_table.name),
            self.quote_all(f.name for f in self._reference_fields),
            self._referential_actions(),
        )
        writer.end_statement()


class Index(SchemaObject):
    """Index over one or more columns."""

    def __init__(
        self,
        config: Optional[GeneratorDefaults] = None,
        name: Optional[str] = None,
        unique: bool = False,
    ):
        super().__init__(config, name)
        self.table: Optional["Table"] = None
        self.unique = unique
        self._fields: List[Field] = []

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    def add_field(self, field: Field) -> None:
        self._fields.append(field)

    def to_create_ddl(self, writer) -> None:
        writer.print(
            "CREATE {0}INDEX {1} ON {2} ({3})",
            "UNIQUE " if self.unique else "",
            self.quote(self.name),
            self.quote(self.table.name),
            self.quote_all(f.name for f in self._fields),
        )
        writer.end_statement()


class KeyGenerator(SchemaObject):
    """
    Key generation strategy, shareable between tables.

    The owning table is bound right before rendering because one
    definition may serve several tables. Strategies that run entirely in
    the persistence layer (MAX, HIGH-LOW, UUID, IDENTITY) emit nothing.
    """

    def __init__(
        self,
        config: Optional[GeneratorDefaults] = None,
        name: Optional[str] = None,
        strategy: KeyGeneratorStrategy = KeyGeneratorStrategy.MAX,
        params: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(config, name)
        self.strategy = strategy
        self.params: Dict[str, Any] = dict(params or {})
        self.table: Optional["Table"] = None

    def to_create_ddl(self, writer) -> None:
        pass


class SequenceKeyGenerator(KeyGenerator):
    """
    SEQUENCE strategy.

    Params:
        sequence:  name pattern, {0} is replaced by the table name
        increment: optional INCREMENT BY value
    """

    DEFAULT_PATTERN = "{0}_seq"

    def sequence_name_for(self, table_name: str) -> str:
        pattern = str(self.params.get("sequence") or self.DEFAULT_PATTERN)
        return pattern.format(table_name)

    @property
    def sequence_name(self) -> str:
        return self.sequence_name_for(self.table.name if self.table else "")

    @property
    def increment(self) -> Optional[int]:
        value = self.params.get("increment")
        return int(value) if value not in (None, "") else None

    def to_create_ddl(self, writer) -> None:
        writer.print("CREATE SEQUENCE {0}", self.quote(self.sequence_name))
        if self.increment is not None:
            writer.print(" INCREMENT BY {0}", self.increment)
        writer.end_statement()


# ============================================================================
# TABLES
# ============================================================================

class Table(SchemaObject):
    """A table with its columns, keys, indexes and optional key generator."""

    def __init__(self, config: Optional[GeneratorDefaults] = None, name: Optional[str] = None):
        super().__init__(config, name)
        self.schema: Optional["Schema"] = None
        self.key_generator: Optional[KeyGenerator] = None
        self._primary_key: Optional[PrimaryKey] = None
        self._fields: List[Field] = []
        self._foreign_keys: List[ForeignKey] = []
        self._indexes: List[Index] = []

    # -- columns ------------------------------------------------------------

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self._fields]

    @property
    def identity_fields(self) -> List[Field]:
        return [f for f in self._fields if f.identity]

    def add_field(self, field: Field) -> None:
        if self.get_field(field.name) is not None:
            raise StructuralMappingError(
                f"Column '{field.name}' defined twice in table '{self.name}'"
            )
        field.table = self
        self._fields.append(field)

    def get_field(self, name: str) -> Optional[Field]:
        for field in self._fields:
            if field.name == name:
                return field
        return None

    # -- keys and indexes ---------------------------------------------------

    @property
    def primary_key(self) -> Optional[PrimaryKey]:
        return self._primary_key

    @primary_key.setter
    def primary_key(self, primary_key: PrimaryKey) -> None:
        primary_key.table = self
        self._primary_key = primary_key

    @property
    def foreign_keys(self) -> Tuple[ForeignKey, ...]:
        return tuple(self._foreign_keys)

    def add_foreign_key(self, foreign_key: ForeignKey) -> None:
        foreign_key.table = self
        self._foreign_keys.append(foreign_key)

    @property
    def indexes(self) -> Tuple[Index, ...]:
        return tuple(self._indexes)

    def add_index(self, index: Index) -> None:
        index.table = self
        self._indexes.append(index)

    # -- DDL ----------------------------------------------------------------

    def column_definitions(self) -> List[str]:
        return [field.to_ddl() for field in self._fields]

    def to_create_ddl(self, writer) -> None:
        writer.println("CREATE TABLE {0} (", self.quote(self.name))
        columns = self.column_definitions()
        if columns:
            writer.println(",\n".join(writer.indent + c for c in columns))
        writer.print(")")
        writer.end_statement()

    def to_drop_ddl(self, writer) -> None:
        writer.print("DROP TABLE {0}", self.quote(self.name))
        writer.end_statement()


class Schema(SchemaObject):
    """Ordered, name-unique collection of tables."""

    def __init__(self, config: Optional[GeneratorDefaults] = None, name: Optional[str] = None):
        super().__init__(config, name)
        self._tables: List[Table] = []
        self._by_name: Dict[str, Table] = {}

    @property
    def tables(self) -> Tuple[Table, ...]:
        return tuple(self._tables)

    @property
    def table_names(self) -> List[str]:
        return [t.name for t in self._tables]

    def add_table(self, table: Table) -> None:
        if table.name in self._by_name:
            raise StructuralMappingError(f"Table '{table.name}' is mapped more than once")
        table.schema = self
        self._tables.append(table)
        self._by_name[table.name] = table

    def get_table(self, name: str) -> Optional[Table]:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self):
        return iter(self._tables)

    def to_create_ddl(self, writer) -> None:
        """Standard SQL has no portable schema statement."""
        pass


__all__ = [
    "SchemaObject",
    "Schema",
    "Table",
    "Field",
    "PrimaryKey",
    "ForeignKey",
    "Index",
    "KeyGenerator",
    "SequenceKeyGenerator",
]
