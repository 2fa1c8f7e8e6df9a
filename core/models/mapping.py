# ============================================================================
# MAPPING DESCRIPTOR MODELS
# ============================================================================
# STATUS: Core model - Object-to-table mapping description
# PURPOSE: Define classes, fields and key generators loaded from YAML
# CREATED: 16 OCT 2026
# EXPORTS: MappingDocument, ClassMapping, FieldMapping, KeyGeneratorDef, IndexDef
# DEPENDENCIES: pydantic
# ============================================================================
"""
Mapping Descriptor Models

A MappingDocument describes which classes are persisted and how:
- ClassMapping: one persistent class, the table it maps to, its fields
- FieldMapping: one persistent field and the column(s) it occupies
- KeyGeneratorDef: a named key generation strategy shared by classes

Example (YAML):
    key_generators:
      - name: prod_seq
        strategy: SEQUENCE
        params: {sequence: "{0}_seq"}
    classes:
      - name: Product
        table: prod
        key_generator: prod_seq
        fields:
          - {name: id, type: integer, identity: true, columns: id}
          - {name: name, type: string, sql_type: "varchar[64]", columns: name}

The builder only reads these models; synthetic many-to-many descriptors are
created as new instances, never by modifying a loaded document.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


def _as_list(v):
    """Allow single string as shorthand for single-item list."""
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    return v


class KeyGeneratorDef(BaseModel):
    """
    Named key generator declared once per mapping document.

    `name` is what classes reference; `strategy` selects the implementation.
    """
    name: str = Field(..., min_length=1, description="Registry name, case-insensitive")
    strategy: Optional[str] = Field(
        default=None,
        description="MAX, HIGH-LOW, UUID, IDENTITY or SEQUENCE (defaults to name)"
    )
    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def default_strategy(self) -> "KeyGeneratorDef":
        if not self.strategy:
            self.strategy = self.name
        return self

    @property
    def registry_key(self) -> str:
        return self.name.upper()


class IndexDef(BaseModel):
    """Index over one or more columns of the class's table."""
    name: Optional[str] = None
    columns: List[str] = Field(..., min_length=1)
    unique: bool = False

    @field_validator("columns", mode="before")
    @classmethod
    def handle_string_input(cls, v):
        return _as_list(v)


class FieldMapping(BaseModel):
    """
    One persistent field.

    A field without columns and without many_table is not stored.
    """
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Column type name or class name")
    identity: bool = False
    required: bool = False
    columns: List[str] = Field(default_factory=list, description="Column name(s)")
    sql_type: Optional[str] = Field(
        default=None,
        description="Column type override, e.g. 'varchar[64]'"
    )
    many_table: Optional[str] = Field(
        default=None,
        description="Junction table name for many-to-many relations"
    )
    many_key: List[str] = Field(
        default_factory=list,
        description="Junction column(s) referencing the declaring class"
    )

    @field_validator("columns", "many_key", mode="before")
    @classmethod
    def handle_string_input(cls, v):
        return _as_list(v)

    @property
    def is_many_to_many(self) -> bool:
        return self.many_table is not None

    @property
    def has_columns(self) -> bool:
        return len(self.columns) > 0


class ClassMapping(BaseModel):
    """
    One persistent class.

    Classes without a table (abstract bases, value types) produce no table
    but can still be extended or referenced by name.
    """
    name: str = Field(..., min_length=1)
    table: Optional[str] = Field(default=None, description="Mapped table name")
    extends: Optional[str] = Field(default=None, description="Parent class name")
    key_generator: Optional[str] = None
    identity: List[str] = Field(
        default_factory=list,
        description="Identity field names, used when no field sets identity"
    )
    fields: List[FieldMapping] = Field(default_factory=list)
    indexes: List[IndexDef] = Field(default_factory=list)

    @field_validator("identity", mode="before")
    @classmethod
    def handle_string_input(cls, v):
        return _as_list(v)

    def get_field(self, name: str) -> Optional[FieldMapping]:
        """Case-insensitive field lookup."""
        for fm in self.fields:
            if fm.name.lower() == name.lower():
                return fm
        return None


class MappingDocument(BaseModel):
    """Complete mapping description, the input of one generation run."""
    description: Optional[str] = None
    key_generators: List[KeyGeneratorDef] = Field(default_factory=list)
    classes: List[ClassMapping] = Field(default_factory=list)

    def validate_structure(self) -> List[str]:
        """
        Cheap structural checks that need no type information.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        seen = set()
        names = {cm.name for cm in self.classes}
        for cm in self.classes:
            if cm.name in seen:
                errors.append(f"Duplicate class name: {cm.name}")
            seen.add(cm.name)
            if cm.extends and cm.extends not in names:
                errors.append(f"Class '{cm.name}' extends unknown class '{cm.extends}'")
        return errors


__all__ = [
    "MappingDocument",
    "ClassMapping",
    "FieldMapping",
    "KeyGeneratorDef",
    "IndexDef",
]
