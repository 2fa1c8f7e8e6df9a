# ============================================================================
# DIALECT REGISTRY
# ============================================================================
# STATUS: Dialects - Registration and lookup of schema factories
# PURPOSE: Register and discover dialect factories by name or alias
# CREATED: 16 OCT 2026
# ============================================================================
"""
Dialect Registry

Central registry for dialect factories. The generator facade and the CLI
use this to look up the SchemaFactory for a configured dialect name.

Design:
- Factories are registered at import time via decorator
- Registry is a simple dict (lower-cased name or alias -> factory class)
- Fail-fast on duplicate registration
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from core.errors import ConfigurationError
from core.logging import ComponentType, get_logger
from core.schema.factory import SchemaFactory

logger = get_logger(__name__, ComponentType.DIALECT)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class DialectNotFoundError(ConfigurationError):
    """Raised when a dialect is not found in the registry."""
    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        known = ", ".join(sorted(_dialect_metadata)) or "none"
        super().__init__(f"Unknown dialect: {dialect_name} (available: {known})")


class DuplicateDialectError(ConfigurationError):
    """Raised when a dialect name or alias is already registered."""
    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Dialect already registered: {dialect_name}")


# ============================================================================
# REGISTRY
# ============================================================================

# Global registry
_dialects: Dict[str, Type[SchemaFactory]] = {}
_dialect_metadata: Dict[str, Dict[str, Any]] = {}


def register_dialect(
    name: str,
    *,
    aliases: Sequence[str] = (),
    description: str = "",
) -> Callable[[Type[SchemaFactory]], Type[SchemaFactory]]:
    """
    Decorator to register a dialect factory class.

    Args:
        name: Dialect name (must be unique, case-insensitive)
        aliases: Alternative names
        description: Human-readable description

    Returns:
        Decorator function

    Example:
        @register_dialect("mysql", description="MySQL 5.7+")
        class MysqlFactory(SchemaFactory):
            table_class = MysqlTable
    """
    def decorator(factory_class: Type[SchemaFactory]) -> Type[SchemaFactory]:
        keys = [name.lower()] + [a.lower() for a in aliases]
        for key in keys:
            if key in _dialects:
                raise DuplicateDialectError(key)

        factory_class.name = name.lower()
        for key in keys:
            _dialects[key] = factory_class
        _dialect_metadata[name.lower()] = {
            "name": name.lower(),
            "aliases": list(aliases),
            "description": description,
            "factory": factory_class.__name__,
            "module": factory_class.__module__,
        }

        logger.debug(f"Registered dialect: {name} ({factory_class.__module__}.{factory_class.__name__})")
        return factory_class

    return decorator


def get_dialect(name: str) -> Optional[Type[SchemaFactory]]:
    """
    Get a dialect factory class by name or alias.

    Returns:
        Factory class or None if not found
    """
    if not name:
        return None
    return _dialects.get(name.strip().lower())


def get_dialect_or_raise(name: str) -> Type[SchemaFactory]:
    """
    Get a dialect factory class, raising if not found.

    Raises:
        DialectNotFoundError if dialect not found
    """
    factory_class = get_dialect(name)
    if factory_class is None:
        raise DialectNotFoundError(name)
    return factory_class


def list_dialects() -> List[Dict[str, Any]]:
    """
    List all registered dialects with metadata.

    Returns:
        List of dialect metadata dicts, sorted by name
    """
    return [_dialect_metadata[key] for key in sorted(_dialect_metadata)]


__all__ = [
    "DialectNotFoundError",
    "DuplicateDialectError",
    "register_dialect",
    "get_dialect",
    "get_dialect_or_raise",
    "list_dialects",
]
