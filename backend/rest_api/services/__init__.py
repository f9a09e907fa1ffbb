"""
Services module for business logic.

CLEAN ARCHITECTURE:
- base_service: EntityService, the generic business contract shared by all entities
- crud/: Entity descriptors, mapping and validation rules
- domain/: One descriptor per entity, collected in REGISTRY

Usage:
    from rest_api.services import EntityService
    from rest_api.services.domain import CATEGORY

    service = EntityService(CATEGORY, db)
    categories = service.get_all()
"""

from .base_service import EntityService

__all__ = [
    "EntityService",
]
