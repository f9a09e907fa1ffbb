"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class and ActiveMixin
- organization: Company, Branch, Zone
- inventory: Category, Item, ImagenItem, InventaryDetails
- access: Person, User, Rol, Permission, Form, Module, RolUser, RolFormPermission, FormModule
- audit: LogActivity
"""

# Base classes
from .base import Base, ActiveMixin

# Organization
from .organization import Company, Branch, Zone

# Inventory
from .inventory import Category, Item, ImagenItem, InventaryDetails

# Access control
from .access import (
    Person,
    User,
    Rol,
    Permission,
    Form,
    Module,
    RolUser,
    RolFormPermission,
    FormModule,
)

# Activity log
from .audit import LogActivity

__all__ = [
    "Base",
    "ActiveMixin",
    "Company",
    "Branch",
    "Zone",
    "Category",
    "Item",
    "ImagenItem",
    "InventaryDetails",
    "Person",
    "User",
    "Rol",
    "Permission",
    "Form",
    "Module",
    "RolUser",
    "RolFormPermission",
    "FormModule",
    "LogActivity",
]
