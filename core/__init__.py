# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export contracts, errors, mapping models and the schema model
# CREATED: 16 OCT 2026
# ============================================================================

from core.contracts import GroupBy, KeyGeneratorStrategy, RelationType
from core.errors import (
    GeneratorError,
    TypeNotFoundError,
    StructuralMappingError,
    ConfigurationError,
    MappingLoadError,
)
from core.models import MappingDocument, ClassMapping, FieldMapping
from core.schema import Schema, Table, SchemaFactory

__all__ = [
    # Enums
    "GroupBy",
    "KeyGeneratorStrategy",
    "RelationType",
    # Errors
    "GeneratorError",
    "TypeNotFoundError",
    "StructuralMappingError",
    "ConfigurationError",
    "MappingLoadError",
    # Models
    "MappingDocument",
    "ClassMapping",
    "FieldMapping",
    # Schema
    "Schema",
    "Table",
    "SchemaFactory",
]
