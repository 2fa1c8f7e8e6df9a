# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 16 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for DDL generation.
"""

from core.config.defaults import (
    GenerationToggles,
    TypeDefaults,
    ForeignKeyDefaults,
    GeneratorDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "GenerationToggles",
    "TypeDefaults",
    "ForeignKeyDefaults",
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
