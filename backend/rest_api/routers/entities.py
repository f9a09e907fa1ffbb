"""
Entity routers: one CRUD router per registered entity.

Usage:
    from rest_api.routers.entities import entity_routers

    for router in entity_routers:
        app.include_router(router)
"""

from rest_api.routers._common import build_entity_router
from rest_api.services.domain import REGISTRY


entity_routers = [build_entity_router(descriptor) for descriptor in REGISTRY]
