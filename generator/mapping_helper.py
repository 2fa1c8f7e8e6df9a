# ============================================================================
# MAPPING HELPER
# ============================================================================
# STATUS: Generator - Read-only queries over a mapping document
# PURPOSE: Class lookup, identity detection, identity column/type resolution
# CREATED: 16 OCT 2026
# EXPORTS: MappingHelper
# ============================================================================
"""
Mapping Helper

Answers the questions the SchemaBuilder asks about a MappingDocument
without touching the schema under construction.

Identity detection has two modes:
- explicit: at least one field of the class sets identity=true, and only
  those fields are identity fields
- convention: no field sets identity, and the class-level `identity` list
  names the identity fields
"""

import logging
from typing import Dict, List, Optional, Set, Union

from core.errors import StructuralMappingError
from core.models.mapping import ClassMapping, FieldMapping, MappingDocument

logger = logging.getLogger(__name__)


class MappingHelper:
    """Lookup and identity resolution over one mapping document."""

    def __init__(self, document: MappingDocument):
        self.document = document
        self._classes: Dict[str, ClassMapping] = {}
        for cm in document.classes:
            self._classes.setdefault(cm.name, cm)

    # ------------------------------------------------------------------
    # Class lookup
    # ------------------------------------------------------------------

    def find_class_by_name(self, name: Optional[str]) -> Optional[ClassMapping]:
        if not name:
            return None
        return self._classes.get(name)

    def find_parent(self, cm: ClassMapping) -> Optional[ClassMapping]:
        """
        Resolve the class a mapping extends.

        Raises:
            StructuralMappingError: extends names an unknown class
        """
        if not cm.extends:
            return None
        parent = self.find_class_by_name(cm.extends)
        if parent is None:
            raise StructuralMappingError(
                f"Class '{cm.name}' extends unknown class '{cm.extends}'",
                class_name=cm.name,
            )
        return parent

    # ------------------------------------------------------------------
    # Identity detection
    # ------------------------------------------------------------------

    def is_using_explicit_field_identity(self, cm: ClassMapping) -> bool:
        return any(fm.identity for fm in cm.fields)

    def is_identity_by_convention(self, cm: ClassMapping, fm: FieldMapping) -> bool:
        wanted = fm.name.lower()
        return any(name.lower() == wanted for name in cm.identity)

    def is_identity(self, cm: ClassMapping, fm: FieldMapping) -> bool:
        if self.is_using_explicit_field_identity(cm):
            return fm.identity
        return self.is_identity_by_convention(cm, fm)

    def identity_fields(self, cm: ClassMapping) -> List[FieldMapping]:
        """Identity fields that occupy columns, in declaration order."""
        return [
            fm for fm in cm.fields
            if self.is_identity(cm, fm) and fm.has_columns and not fm.is_many_to_many
        ]

    # ------------------------------------------------------------------
    # Identity columns and types
    # ------------------------------------------------------------------

    def sql_identity_column_names(self, cm: ClassMapping, qualified: bool = False) -> List[str]:
        """
        Identity column names of a class.

        Args:
            cm: Class mapping
            qualified: Walk the extends chain when the class declares no
                identity columns of its own

        Returns:
            Column names in declaration order
        """
        seen: Set[str] = set()
        current: Optional[ClassMapping] = cm
        while current is not None:
            if current.name in seen:
                raise StructuralMappingError(
                    f"Circular extends chain through class '{current.name}'",
                    class_name=cm.name,
                )
            seen.add(current.name)

            columns = [c for fm in self.identity_fields(current) for c in fm.columns]
            if columns or not qualified:
                return columns
            current = self.find_parent(current)
        return []

    def resolve_identity_type_names(self, cm_or_name: Union[ClassMapping, str]) -> List[str]:
        """
        Type names of a class's identity columns, one per column.

        Reference-typed identity fields are followed to the referenced
        class's identity types. A class without identity fields inherits
        its parent's.

        Raises:
            StructuralMappingError: unknown class, or a circular chain of
                identity references
        """
        if isinstance(cm_or_name, ClassMapping):
            cm = cm_or_name
        else:
            cm = self.find_class_by_name(cm_or_name)
            if cm is None:
                raise StructuralMappingError(f"Unknown class '{cm_or_name}'")
        return self._resolve_identity_types(cm, [])

    def _resolve_identity_types(self, cm: ClassMapping, path: List[str]) -> List[str]:
        if cm.name in path:
            chain = " -> ".join(path + [cm.name])
            raise StructuralMappingError(
                f"Circular identity reference: {chain}",
                class_name=path[0],
            )
        path = path + [cm.name]

        fields = self.identity_fields(cm)
        if not fields:
            parent = self.find_parent(cm)
            if parent is None:
                return []
            return self._resolve_identity_types(parent, path)

        type_names: List[str] = []
        for fm in fields:
            if fm.sql_type:
                type_names.extend([fm.sql_type] * len(fm.columns))
                continue
            referenced = self.find_class_by_name(fm.type)
            if referenced is not None:
                type_names.extend(self._resolve_identity_types(referenced, path))
            else:
                type_names.extend([fm.type] * len(fm.columns))
        return type_names


__all__ = ["MappingHelper"]
