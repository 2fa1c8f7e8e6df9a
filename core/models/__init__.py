# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for mapping descriptor models
# CREATED: 16 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models for the mapping description (the generator's input).
The relational output model lives in core.schema.
"""

from core.models.mapping import (
    MappingDocument,
    ClassMapping,
    FieldMapping,
    KeyGeneratorDef,
    IndexDef,
)

__all__ = [
    "MappingDocument",
    "ClassMapping",
    "FieldMapping",
    "KeyGeneratorDef",
    "IndexDef",
]
