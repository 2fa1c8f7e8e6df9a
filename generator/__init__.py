# ============================================================================
# GENERATOR MODULE
# ============================================================================
# STATUS: Generator - Schema synthesis and DDL emission
# PURPOSE: Export builder, emitter, writer and the generator facade
# CREATED: 16 OCT 2026
# ============================================================================
"""
Generator Module

Importing the package also registers the built-in dialects.
"""

import dialects  # noqa: F401  (registers built-in dialects)

from generator.writer import DDLWriter
from generator.mapping_helper import MappingHelper
from generator.key_generators import KeyGeneratorRegistry
from generator.schema_builder import SchemaBuilder, index_name
from generator.emitter import DDLEmitter
from generator.generator import DDLGenerator, create_generator

__all__ = [
    "DDLWriter",
    "MappingHelper",
    "KeyGeneratorRegistry",
    "SchemaBuilder",
    "index_name",
    "DDLEmitter",
    "DDLGenerator",
    "create_generator",
]
