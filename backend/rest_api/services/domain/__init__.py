"""
Domain entities - one descriptor per entity.

Each descriptor declares what differs between entities (fields, rules,
display joins, creation stamps); EntityService supplies the shared behaviour.

Structure:
    Router (thin controller)
        ↓
    EntityService + descriptor  ← YOU ARE HERE
        ↓
    EntityRepository (data access)
        ↓
    Model (table)

Usage:
    from rest_api.services.domain import BRANCH
    from rest_api.services import EntityService

    service = EntityService(BRANCH, db)
    branches = service.get_all()
"""

from .organization import BRANCH, COMPANY, ZONE
from .inventory import CATEGORY, IMAGEN_ITEM, INVENTARY_DETAILS, ITEM
from .access import (
    FORM,
    FORM_MODULE,
    MODULE,
    PERMISSION,
    PERSON,
    ROL,
    ROL_FORM_PERMISSION,
    ROL_USER,
    USER,
)
from .audit import LOG_ACTIVITY

# Every exposed entity, in route registration order
REGISTRY = (
    BRANCH,
    CATEGORY,
    COMPANY,
    FORM,
    FORM_MODULE,
    IMAGEN_ITEM,
    INVENTARY_DETAILS,
    ITEM,
    LOG_ACTIVITY,
    MODULE,
    PERMISSION,
    PERSON,
    ROL,
    ROL_FORM_PERMISSION,
    ROL_USER,
    USER,
    ZONE,
)

__all__ = [
    "BRANCH",
    "CATEGORY",
    "COMPANY",
    "FORM",
    "FORM_MODULE",
    "IMAGEN_ITEM",
    "INVENTARY_DETAILS",
    "ITEM",
    "LOG_ACTIVITY",
    "MODULE",
    "PERMISSION",
    "PERSON",
    "ROL",
    "ROL_FORM_PERMISSION",
    "ROL_USER",
    "USER",
    "ZONE",
    "REGISTRY",
]
