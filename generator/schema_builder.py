# ============================================================================
# SCHEMA BUILDER
# ============================================================================
# STATUS: Generator - Mapping document to relational schema model
# PURPOSE: Type resolution, inheritance merge, junction table synthesis
# CREATED: 16 OCT 2026
# EXPORTS: SchemaBuilder, index_name
# ============================================================================
"""
Schema Builder

Derives a Schema from a MappingDocument in three phases:

    1. Key generators   - register every declared generator
    2. Class tables     - one table per class with a `table`, document order
    3. Junction tables  - one table per many_table name, discovery order

Many-to-many fields do not create columns on their class. The first field
naming a many_table queues a synthetic ClassMapping for it; every field
naming it adds the identity columns of both sides. The queued mappings go
through the same table construction as real classes once all class tables
exist, so each side becomes a reference field with its own foreign key.

Column types are resolved in this order:
    sql_type through the TypeMapper
    type as the name of another class (reference field)
    type through the TypeMapper

A reference field mirrors the identity columns of the class it names: one
local column per referenced identity column, with the referenced column's
type, plus a foreign key.

The builder produces no text. Errors abort the whole build; a Schema is
only returned when every class was processed.

Usage:
    builder = SchemaBuilder(factory)
    schema = builder.build(document)
"""

from typing import Dict, List, Optional, Set, Tuple

from core.contracts import RelationType
from core.errors import StructuralMappingError, TypeNotFoundError
from core.logging import ComponentType, get_logger, log_context
from core.models.mapping import ClassMapping, FieldMapping, IndexDef, MappingDocument
from core.schema.factory import SchemaFactory
from core.schema.objects import Field, KeyGenerator, Schema, Table
from core.schema.types import TypeInfo, TypeMapper
from generator.key_generators import KeyGeneratorRegistry
from generator.mapping_helper import MappingHelper

logger = get_logger(__name__, ComponentType.BUILDER)


def index_name(table: str, columns: List[str], unique: bool = False) -> str:
    """Conventional index name: idx_<table>_<cols> or idx_unique_<table>_<cols>."""
    prefix = "idx_unique" if unique else "idx"
    return f"{prefix}_{table}_{'_'.join(columns)}"


def _type_signature(info: TypeInfo) -> Tuple:
    """Resolved column type without its abstract name, so aliases compare equal."""
    return (info.sql_type, info.param_style, info.length, info.precision, info.decimals)


class SchemaBuilder:
    """
    Builds a Schema from a MappingDocument.

    The factory, type mapper and key generator registry are injected so a
    builder is independent of global state. Per-build state lives only for
    the duration of build().
    """

    def __init__(
        self,
        factory: SchemaFactory,
        type_mapper: Optional[TypeMapper] = None,
        key_generators: Optional[KeyGeneratorRegistry] = None,
    ):
        self.factory = factory
        self.type_mapper = type_mapper or factory.create_type_mapper()
        self.key_generators = key_generators or KeyGeneratorRegistry(factory)

        self._helper: Optional[MappingHelper] = None
        self._schema: Optional[Schema] = None
        self._pending: Dict[str, ClassMapping] = {}

    # ======================================================================
    # ENTRY POINT
    # ======================================================================

    def build(self, document: MappingDocument) -> Schema:
        """
        Build the schema for a mapping document.

        Raises:
            StructuralMappingError: inconsistent mapping structure
            TypeNotFoundError: unresolvable type or identity column count mismatch
        """
        problems = document.validate_structure()
        if problems:
            raise StructuralMappingError("Invalid mapping: " + "; ".join(problems))

        self._helper = MappingHelper(document)
        self._schema = self.factory.create_schema()
        self._pending = {}

        try:
            self.key_generators.reset()
            self.key_generators.load(document.key_generators)

            for cm in document.classes:
                if not cm.table:
                    logger.debug(f"Class {cm.name} is not mapped to a table, skipped")
                    continue
                self._schema.add_table(self._create_table(cm, RelationType.ONE_ONE))

            for many_table, junction in list(self._pending.items()):
                logger.debug(f"Building junction table {many_table}")
                self._schema.add_table(self._create_table(junction, RelationType.MANY_MANY))

            schema = self._schema
            logger.info(
                f"Built schema: {len(schema)} tables "
                f"({len(self._pending)} junction) from {len(document.classes)} classes"
            )
            return schema
        finally:
            self._helper = None
            self._schema = None
            self._pending = {}

    # ======================================================================
    # TABLE CONSTRUCTION
    # ======================================================================

    def _create_table(self, cm: ClassMapping, relation_type: RelationType) -> Table:
        with log_context(class_name=cm.name, table=cm.table):
            table = self.factory.create_table(cm.table)
            self.factory.create_primary_key(table)

            if not cm.fields:
                logger.debug(f"Class {cm.name} declares no fields")
                return table

            explicit = self._helper.is_using_explicit_field_identity(cm)
            key_generator = self._resolve_key_generator(cm)
            table.key_generator = key_generator

            for fm in cm.fields:
                if fm.is_many_to_many:
                    self._register_junction(cm, fm)
                    continue
                if not fm.has_columns:
                    continue

                identity = fm.identity if explicit else self._helper.is_identity_by_convention(cm, fm)
                types, referenced = self._resolve_column_types(cm, fm)
                columns = self._add_columns(
                    table, fm, types, identity,
                    key_generator if referenced is None else None,
                )
                if referenced is not None:
                    self._add_foreign_key(table, cm, fm, columns, referenced, relation_type)

            parent = self._helper.find_parent(cm)
            if parent is not None:
                self._merge_inherited(table, cm, parent, {cm.name})

            for index_def in cm.indexes:
                self._add_index(table, index_def)

            logger.debug(
                f"Table {table.name}: {len(table.fields)} columns, "
                f"primary key {table.primary_key.field_names}, "
                f"{len(table.foreign_keys)} foreign keys"
            )
            return table

    def _resolve_key_generator(self, cm: ClassMapping) -> Optional[KeyGenerator]:
        if not cm.key_generator:
            return None
        generator = self.key_generators.get(cm.key_generator)
        if generator is None:
            logger.warning(
                f"Class {cm.name} uses unknown key generator '{cm.key_generator}', "
                f"no key generator attached"
            )
        return generator

    def _resolve_column_types(
        self,
        cm: ClassMapping,
        fm: FieldMapping,
    ) -> Tuple[List[TypeInfo], Optional[ClassMapping]]:
        """
        Column types of a field, one per column.

        Returns:
            (types, referenced class or None for plain columns)
        """
        if fm.sql_type:
            info = self.type_mapper.get_type(fm.sql_type)
            if info is not None:
                return [info] * len(fm.columns), None
            logger.debug(f"sql_type '{fm.sql_type}' of field {fm.name} is not a column type")

        referenced = self._helper.find_class_by_name(fm.type)
        if referenced is not None:
            type_names = self._helper.resolve_identity_type_names(referenced)
            if len(type_names) != len(fm.columns):
                raise TypeNotFoundError(
                    f"Field '{fm.name}' of class '{cm.name}' has {len(fm.columns)} "
                    f"column(s) but class '{referenced.name}' has {len(type_names)} "
                    f"identity column(s)",
                    type_name=fm.type,
                    class_name=cm.name,
                    field_name=fm.name,
                )
            types = []
            for type_name in type_names:
                info = self.type_mapper.get_type(type_name)
                if info is None:
                    raise TypeNotFoundError(
                        f"Cannot resolve identity type '{type_name}' of class "
                        f"'{referenced.name}' referenced by field '{fm.name}' of class '{cm.name}'",
                        type_name=type_name,
                        class_name=cm.name,
                        field_name=fm.name,
                    )
                types.append(info)
            return types, referenced

        info = self.type_mapper.get_type(fm.type)
        if info is None:
            raise TypeNotFoundError(
                f"Cannot resolve type '{fm.type}' of field '{fm.name}' in class '{cm.name}'",
                type_name=fm.type,
                class_name=cm.name,
                field_name=fm.name,
            )
        return [info] * len(fm.columns), None

    def _add_columns(
        self,
        table: Table,
        fm: FieldMapping,
        types: List[TypeInfo],
        identity: bool,
        key_generator: Optional[KeyGenerator],
    ) -> List[Field]:
        fields = []
        for column, type_info in zip(fm.columns, types):
            field = self.factory.create_field(
                column,
                type_info,
                identity=identity,
                required=fm.required,
                key_generator=key_generator,
            )
            table.add_field(field)
            if identity:
                table.primary_key.add_field(field)
            fields.append(field)
        return fields

    def _add_index(self, table: Table, index_def: IndexDef) -> None:
        name = index_def.name or index_name(table.name, index_def.columns, index_def.unique)
        index = self.factory.create_index(name, unique=index_def.unique)
        for column in index_def.columns:
            field = table.get_field(column)
            if field is None:
                raise StructuralMappingError(
                    f"Index '{name}' names unknown column '{column}' of table '{table.name}'"
                )
            index.add_field(field)
        table.add_index(index)

    # ======================================================================
    # ONE-TO-ONE FOREIGN KEYS
    # ======================================================================

    def _add_foreign_key(
        self,
        table: Table,
        cm: ClassMapping,
        fm: FieldMapping,
        local_fields: List[Field],
        referenced: ClassMapping,
        relation_type: RelationType,
    ) -> None:
        if not referenced.table:
            raise StructuralMappingError(
                f"Field '{fm.name}' of class '{cm.name}' references class "
                f"'{referenced.name}' which is not mapped to a table",
                class_name=cm.name,
            )

        if referenced.table == table.name:
            reference_table = table
        else:
            reference_table = self._schema.get_table(referenced.table)
        if reference_table is None:
            raise StructuralMappingError(
                f"Field '{fm.name}' of class '{cm.name}' references table "
                f"'{referenced.table}' which has not been built; map class "
                f"'{referenced.name}' before '{cm.name}'",
                class_name=cm.name,
            )

        reference_columns = fm.many_key or self._helper.sql_identity_column_names(
            referenced, qualified=True
        )
        reference_fields = []
        for column in reference_columns:
            field = reference_table.get_field(column)
            if field is None:
                raise StructuralMappingError(
                    f"Foreign key of field '{fm.name}' in class '{cm.name}' references "
                    f"unknown column '{column}' of table '{reference_table.name}'",
                    class_name=cm.name,
                )
            reference_fields.append(field)

        if len(reference_fields) != len(local_fields):
            raise StructuralMappingError(
                f"Foreign key of field '{fm.name}' in class '{cm.name}' has "
                f"{len(local_fields)} column(s) but references {len(reference_fields)}",
                class_name=cm.name,
            )

        foreign_key = self.factory.create_foreign_key(f"{table.name}_{fm.name}", relation_type)
        for field in local_fields:
            foreign_key.add_field(field)
        foreign_key.reference_table = reference_table
        for field in reference_fields:
            foreign_key.add_reference_field(field)
        table.add_foreign_key(foreign_key)

    # ======================================================================
    # INHERITANCE
    # ======================================================================

    def _merge_inherited(
        self,
        table: Table,
        cm: ClassMapping,
        parent: ClassMapping,
        seen: Set[str],
    ) -> None:
        """Merge the identity columns of `parent` into the table of `cm`."""
        if parent.name in seen:
            raise StructuralMappingError(
                f"Circular extends chain through class '{parent.name}'",
                class_name=cm.name,
            )
        seen.add(parent.name)

        if self._helper.sql_identity_column_names(cm, qualified=False):
            self._check_inherited_identity(cm, parent)
            return

        key_generator = self.key_generators.get(parent.key_generator) if parent.key_generator else None
        if key_generator is not None:
            table.key_generator = key_generator
        else:
            key_generator = table.key_generator

        explicit = self._helper.is_using_explicit_field_identity(parent)
        for parent_fm in parent.fields:
            if not parent_fm.has_columns or parent_fm.is_many_to_many:
                continue
            identity = parent_fm.identity if explicit else self._helper.is_identity_by_convention(parent, parent_fm)
            if not identity:
                continue
            if self._promote_redeclared(table, cm, parent_fm):
                continue

            types, referenced = self._resolve_column_types(parent, parent_fm)
            self._add_columns(
                table, parent_fm, types, True,
                key_generator if referenced is None else None,
            )
            logger.debug(f"Merged identity {parent_fm.columns} from {parent.name}")

        grandparent = self._helper.find_parent(parent)
        if grandparent is not None:
            self._merge_inherited(table, parent, grandparent, seen)

    def _check_inherited_identity(self, cm: ClassMapping, parent: ClassMapping) -> None:
        child_types = self._helper.resolve_identity_type_names(cm)
        parent_types = self._helper.resolve_identity_type_names(parent)
        mismatch = len(child_types) != len(parent_types) or any(
            not self._same_type(c, p) for c, p in zip(child_types, parent_types)
        )
        if mismatch:
            raise StructuralMappingError(
                f"Identity types {child_types} of class '{cm.name}' do not match "
                f"identity types {parent_types} of extended class '{parent.name}'",
                class_name=cm.name,
            )

    def _same_type(self, left: str, right: str) -> bool:
        left_info = self.type_mapper.get_type(left)
        right_info = self.type_mapper.get_type(right)
        if left_info is not None and right_info is not None:
            return _type_signature(left_info) == _type_signature(right_info)
        return left.lower() == right.lower()

    def _promote_redeclared(self, table: Table, cm: ClassMapping, parent_fm: FieldMapping) -> bool:
        """
        Promote a child column that re-declares an inherited identity field.

        Returns:
            True if the child declares the field and its columns were promoted
        """
        child_fm = cm.get_field(parent_fm.name)
        if child_fm is None or not child_fm.has_columns or child_fm.is_many_to_many:
            return False
        fields = [table.get_field(column) for column in child_fm.columns]
        if any(field is None for field in fields):
            return False
        for field in fields:
            field.identity = True
            table.primary_key.add_field(field)
        logger.debug(f"Promoted {child_fm.columns} to identity, re-declared from parent")
        return True

    # ======================================================================
    # MANY-TO-MANY
    # ======================================================================

    def _register_junction(self, cm: ClassMapping, fm: FieldMapping) -> None:
        referenced = self._helper.find_class_by_name(fm.type)
        if referenced is None:
            raise TypeNotFoundError(
                f"Many-to-many field '{fm.name}' of class '{cm.name}' names unknown class '{fm.type}'",
                type_name=fm.type,
                class_name=cm.name,
                field_name=fm.name,
            )
        if not referenced.table:
            raise StructuralMappingError(
                f"Many-to-many field '{fm.name}' of class '{cm.name}' references class "
                f"'{referenced.name}' which is not mapped to a table",
                class_name=cm.name,
            )

        junction = self._pending.get(fm.many_table)
        if junction is None:
            junction = ClassMapping(
                name=fm.many_table,
                table=fm.many_table,
                key_generator=cm.key_generator,
            )
            self._pending[fm.many_table] = junction
            logger.debug(f"Queued junction table {fm.many_table}")

        self._append_junction_side(junction, cm.table, cm, fm.many_key)
        opposite = fm.name if referenced.name == cm.name else referenced.table
        self._append_junction_side(junction, opposite, referenced, fm.columns)

    def _append_junction_side(
        self,
        junction: ClassMapping,
        side: str,
        side_cm: ClassMapping,
        columns: List[str],
    ) -> None:
        if junction.get_field(side) is not None:
            return
        junction.fields.append(FieldMapping(
            name=side,
            type=side_cm.name,
            identity=True,
            columns=list(columns) or self._junction_columns(side_cm, side),
        ))

    def _junction_columns(self, side_cm: ClassMapping, prefix: str) -> List[str]:
        """Junction columns for one side: <prefix>, or <prefix>_<col> per identity column."""
        identity_columns = self._helper.sql_identity_column_names(side_cm, qualified=True)
        if not identity_columns:
            raise StructuralMappingError(
                f"Class '{side_cm.name}' has no identity columns to reference "
                f"from a many-to-many relation",
                class_name=side_cm.name,
            )
        if len(identity_columns) == 1:
            return [prefix]
        return [f"{prefix}_{column}" for column in identity_columns]


__all__ = ["SchemaBuilder", "index_name"]
