# ============================================================================
# SERVICES MODULE
# ============================================================================
# STATUS: Services - Input loading layer
# PURPOSE: Mapping document loading
# CREATED: 16 OCT 2026
# ============================================================================
"""
Services Module

Usage:
    from services import MappingService

    document = MappingService().load("mappings/shop.yaml")
"""

from .mapping_service import MappingService

__all__ = [
    "MappingService",
]
