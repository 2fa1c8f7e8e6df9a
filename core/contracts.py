# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Core enums shared by builder, dialects and emitter
# PURPOSE: Define grouping modes, relation types and key generator strategies
# CREATED: 16 OCT 2026
# EXPORTS: GroupBy, RelationType, KeyGeneratorStrategy, ParamStyle
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the DDL generator.

These enums cross every layer:
- Mapping documents (key generator strategy names)
- Schema model (relation types, type parameter styles)
- Emission (grouping mode)
"""

from enum import Enum
from typing import Optional


# ============================================================================
# EMISSION
# ============================================================================

class GroupBy(str, Enum):
    """
    Ordering of emitted statements.

    TABLE:    per table - drop, create, primary key, foreign keys,
              indexes, key generator - then the next table
    DDL_TYPE: all drops, then all creates, then all primary keys, ...
    """
    TABLE = "table"
    DDL_TYPE = "ddltype"

    @classmethod
    def parse(cls, value: str) -> Optional["GroupBy"]:
        """Case-insensitive lookup, None if the value is not a grouping mode."""
        if value is None:
            return None
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


# ============================================================================
# SCHEMA MODEL
# ============================================================================

class RelationType(str, Enum):
    """Relation a foreign key implements."""
    ONE_ONE = "one-one"      # Reference field on the owning table
    MANY_MANY = "many-many"  # Side of a synthesized junction table


class ParamStyle(str, Enum):
    """How a column type takes parameters in DDL."""
    NONE = "none"                              # INTEGER
    LENGTH = "length"                          # VARCHAR(255)
    PRECISION = "precision"                    # FLOAT(53)
    PRECISION_DECIMALS = "precision_decimals"  # NUMERIC(10,2)


# ============================================================================
# KEY GENERATION
# ============================================================================

class KeyGeneratorStrategy(str, Enum):
    """
    Primary key generation strategies.

    Only IDENTITY and SEQUENCE influence the emitted DDL; the others are
    evaluated by the persistence layer at runtime.
    """
    MAX = "MAX"
    HIGH_LOW = "HIGH-LOW"
    UUID = "UUID"
    IDENTITY = "IDENTITY"
    SEQUENCE = "SEQUENCE"

    @classmethod
    def parse(cls, value: str) -> Optional["KeyGeneratorStrategy"]:
        """Case-insensitive lookup, None for unknown strategies."""
        if value is None:
            return None
        normalized = value.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        return None


__all__ = [
    "GroupBy",
    "RelationType",
    "ParamStyle",
    "KeyGeneratorStrategy",
]
