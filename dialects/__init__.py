# ============================================================================
# DIALECTS MODULE
# ============================================================================
# STATUS: Dialects - Database-specific schema object families
# PURPOSE: Import every dialect so it registers itself
# CREATED: 16 OCT 2026
# ============================================================================
"""
Dialects Module

Importing this package registers all built-in dialects:

    from dialects import get_dialect_or_raise

    factory = get_dialect_or_raise("postgres")(config)
"""

from dialects.registry import (
    DialectNotFoundError,
    DuplicateDialectError,
    register_dialect,
    get_dialect,
    get_dialect_or_raise,
    list_dialects,
)
from dialects.generic import GenericFactory, GenericTypeMapper
from dialects.postgresql import PostgresFactory, PostgresTypeMapper
from dialects.mysql import MysqlFactory, MysqlTypeMapper

__all__ = [
    # Registry
    "DialectNotFoundError",
    "DuplicateDialectError",
    "register_dialect",
    "get_dialect",
    "get_dialect_or_raise",
    "list_dialects",
    # Built-in dialects
    "GenericFactory",
    "GenericTypeMapper",
    "PostgresFactory",
    "PostgresTypeMapper",
    "MysqlFactory",
    "MysqlTypeMapper",
]
