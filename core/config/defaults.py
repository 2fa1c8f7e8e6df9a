# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for dialect, statement toggles, type params
# CREATED: 16 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for a generation run.
These can be overridden via environment variables (DDLGEN_*) or CLI flags.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from core.contracts import GroupBy


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("true"/"false", "1"/"0", "yes"/"no")."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GenerationToggles:
    """
    Which statement kinds are emitted.

    Every kind is on by default.
    """
    schema: bool = True
    drop: bool = True
    create: bool = True
    primary_key: bool = True
    foreign_key: bool = True
    index: bool = True
    key_generator: bool = True

    @classmethod
    def from_env(cls) -> "GenerationToggles":
        """Create from environment variables."""
        return cls(
            schema=_env_bool("DDLGEN_GENERATE_SCHEMA", True),
            drop=_env_bool("DDLGEN_GENERATE_DROP", True),
            create=_env_bool("DDLGEN_GENERATE_CREATE", True),
            primary_key=_env_bool("DDLGEN_GENERATE_PRIMARY_KEY", True),
            foreign_key=_env_bool("DDLGEN_GENERATE_FOREIGN_KEY", True),
            index=_env_bool("DDLGEN_GENERATE_INDEX", True),
            key_generator=_env_bool("DDLGEN_GENERATE_KEY_GENERATOR", True),
        )


@dataclass(frozen=True)
class TypeDefaults:
    """
    Default type parameters.

    Used when a type takes a parameter and the mapping does not supply one.
    """
    char_length: int = 1
    varchar_length: int = 255
    binary_length: int = 255
    numeric_precision: int = 10
    numeric_decimals: int = 0
    float_precision: int = 53

    @classmethod
    def from_env(cls) -> "TypeDefaults":
        """Create from environment variables."""
        return cls(
            char_length=int(os.getenv("DDLGEN_CHAR_LENGTH", 1)),
            varchar_length=int(os.getenv("DDLGEN_VARCHAR_LENGTH", 255)),
            binary_length=int(os.getenv("DDLGEN_BINARY_LENGTH", 255)),
            numeric_precision=int(os.getenv("DDLGEN_NUMERIC_PRECISION", 10)),
            numeric_decimals=int(os.getenv("DDLGEN_NUMERIC_DECIMALS", 0)),
            float_precision=int(os.getenv("DDLGEN_FLOAT_PRECISION", 53)),
        )


@dataclass(frozen=True)
class ForeignKeyDefaults:
    """Referential actions appended to FOREIGN KEY clauses (empty = omitted)."""
    on_delete: str = ""
    on_update: str = ""

    @classmethod
    def from_env(cls) -> "ForeignKeyDefaults":
        """Create from environment variables."""
        return cls(
            on_delete=os.getenv("DDLGEN_FK_ON_DELETE", ""),
            on_update=os.getenv("DDLGEN_FK_ON_UPDATE", ""),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass(frozen=True)
class GeneratorDefaults:
    """Container for all generation settings."""
    dialect: str = "generic"
    group_by: str = GroupBy.TABLE.value  # Validated by the emitter
    delimiter: str = ";"
    schema_name: str = ""  # PostgreSQL schema, empty = default search_path
    mysql_engine: str = ""  # e.g. InnoDB, empty = server default
    toggles: GenerationToggles = field(default_factory=GenerationToggles)
    types: TypeDefaults = field(default_factory=TypeDefaults)
    foreign_keys: ForeignKeyDefaults = field(default_factory=ForeignKeyDefaults)

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create all defaults from environment variables."""
        return cls(
            dialect=os.getenv("DDLGEN_DIALECT", "generic"),
            group_by=os.getenv("DDLGEN_GROUP_BY", GroupBy.TABLE.value),
            delimiter=os.getenv("DDLGEN_DELIMITER", ";"),
            schema_name=os.getenv("DDLGEN_SCHEMA_NAME", ""),
            mysql_engine=os.getenv("DDLGEN_MYSQL_ENGINE", ""),
            toggles=GenerationToggles.from_env(),
            types=TypeDefaults.from_env(),
            foreign_keys=ForeignKeyDefaults.from_env(),
        )


_defaults: Optional[GeneratorDefaults] = None


def get_defaults() -> GeneratorDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = GeneratorDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GenerationToggles",
    "TypeDefaults",
    "ForeignKeyDefaults",
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
