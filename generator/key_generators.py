# ============================================================================
# KEY GENERATOR REGISTRY
# ============================================================================
# STATUS: Generator - Per-run key generator lookup table
# PURPOSE: Register declared key generators, resolve class references
# CREATED: 16 OCT 2026
# EXPORTS: KeyGeneratorRegistry
# ============================================================================
"""
Key Generator Registry

Holds the key generators of one generation run, keyed by upper-cased
name. The registry starts with one parameterless generator per strategy
the dialect supports, so a class may name "IDENTITY" or "UUID" without a
key_generators entry.

Registering a name twice replaces the earlier generator and logs a
warning.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from core.models.mapping import KeyGeneratorDef
from core.schema.factory import SchemaFactory
from core.schema.objects import KeyGenerator

logger = logging.getLogger(__name__)


class KeyGeneratorRegistry:
    """Name -> KeyGenerator lookup for one generation run."""

    def __init__(self, factory: SchemaFactory):
        self.factory = factory
        self._generators: Dict[str, KeyGenerator] = {}
        self._declared: Set[str] = set()
        self.reset()

    def reset(self) -> None:
        """Drop declared generators and restore the built-in defaults."""
        self._generators.clear()
        self._declared.clear()
        for strategy in sorted(self.factory.supported_strategies, key=lambda s: s.value):
            definition = KeyGeneratorDef(name=strategy.value, strategy=strategy.value)
            self._generators[definition.registry_key] = self.factory.create_key_generator(definition)

    def register(self, definition: KeyGeneratorDef) -> KeyGenerator:
        """
        Register a declared key generator.

        Raises:
            StructuralMappingError: unknown or unsupported strategy
        """
        generator = self.factory.create_key_generator(definition)
        key = definition.registry_key
        if key in self._declared:
            logger.warning(
                f"Key generator '{definition.name}' declared more than once, "
                f"the last declaration replaces the earlier one"
            )
        self._generators[key] = generator
        self._declared.add(key)
        logger.debug(f"Registered key generator {key} ({generator.strategy.value})")
        return generator

    def load(self, definitions: Iterable[KeyGeneratorDef]) -> int:
        """Register definitions in order; returns how many were registered."""
        count = 0
        for definition in definitions:
            self.register(definition)
            count += 1
        return count

    def get(self, name: Optional[str]) -> Optional[KeyGenerator]:
        if not name:
            return None
        return self._generators.get(name.strip().upper())

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    @property
    def names(self) -> List[str]:
        return sorted(self._generators)


__all__ = ["KeyGeneratorRegistry"]
