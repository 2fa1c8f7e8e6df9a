# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Relational schema model
# PURPOSE: Schema objects, type resolution and the schema object factory
# CREATED: 16 OCT 2026
# ============================================================================

from core.schema.types import TypeInfo, TypeMapper, parse_type_name
from core.schema.objects import (
    SchemaObject,
    Schema,
    Table,
    Field,
    PrimaryKey,
    ForeignKey,
    Index,
    KeyGenerator,
    SequenceKeyGenerator,
)
from core.schema.factory import SchemaFactory

__all__ = [
    # Types
    "TypeInfo",
    "TypeMapper",
    "parse_type_name",
    # Model
    "SchemaObject",
    "Schema",
    "Table",
    "Field",
    "PrimaryKey",
    "ForeignKey",
    "Index",
    "KeyGenerator",
    "SequenceKeyGenerator",
    # Factory
    "SchemaFactory",
]
