"""
CRUD Services - Generic building blocks for entity management.

Provides:
- EntityDescriptor: Declarative per-entity configuration (fields, rules, joins)
- DisplayJoin: Read-only label pulled from a referenced table
- validate: Rule checks run before any store access
"""

from .descriptor import COMMON_FIELDS, DisplayJoin, EntityDescriptor
from .validation import (
    require_dto,
    require_positive_fk,
    require_positive_id,
    require_text,
    validate,
)

__all__ = [
    # Descriptor
    "COMMON_FIELDS",
    "DisplayJoin",
    "EntityDescriptor",
    # Validation
    "require_dto",
    "require_positive_fk",
    "require_positive_id",
    "require_text",
    "validate",
]
