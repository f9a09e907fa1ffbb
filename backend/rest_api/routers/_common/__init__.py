"""
Common utilities shared across routers.

NOTE: Transfer objects live in shared/utils/admin_schemas.py so services
never import from routers.
"""

from .crud import build_entity_router

__all__ = [
    "build_entity_router",
]
