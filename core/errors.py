# ============================================================================
# GENERATOR EXCEPTIONS
# ============================================================================
# STATUS: Core - Error types raised during schema generation
# PURPOSE: Fatal errors for type resolution, mapping structure and config
# CREATED: 16 OCT 2026
# EXPORTS: GeneratorError, TypeNotFoundError, StructuralMappingError,
#          ConfigurationError, MappingLoadError
# ============================================================================
"""
Generator Exceptions

Every error here is fatal to a generation run. Inputs are static, so a
failed run reproduces the same error when repeated; nothing is retried.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for DDL generation errors."""
    pass


class TypeNotFoundError(GeneratorError):
    """
    Raised when a declared type resolves to neither a column type nor a
    persistent class, or when a reference field's column count does not
    match the referenced class's identity columns.
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        class_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.type_name = type_name
        self.class_name = class_name
        self.field_name = field_name
        super().__init__(message)


class StructuralMappingError(GeneratorError):
    """Raised on any other structural inconsistency in a mapping."""

    def __init__(self, message: str, class_name: Optional[str] = None):
        self.class_name = class_name
        super().__init__(message)


class ConfigurationError(StructuralMappingError):
    """Raised for unsupported configuration values (grouping mode, dialect)."""
    pass


class MappingLoadError(GeneratorError):
    """Raised when a mapping file cannot be read or validated."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)


__all__ = [
    "GeneratorError",
    "TypeNotFoundError",
    "StructuralMappingError",
    "ConfigurationError",
    "MappingLoadError",
]
