"""
Repository Pattern implementation.
Centralizes data access: one generic repository serves every entity table.

Usage:
    from rest_api.repositories import EntityRepository

    repo = EntityRepository(Branch, db, joins=BRANCH.display_joins)
    rows = repo.find_all_active()
    row = repo.find_by_id(123)
"""

from .base import EntityRepository

__all__ = [
    "EntityRepository",
]
