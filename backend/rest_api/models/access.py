"""
Access Control Models: Person, User, Rol, Permission, Form, Module
and the link tables RolUser, RolFormPermission, FormModule.

The tables describe who may do what on which form; nothing in this
service evaluates them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import ActiveMixin, Base


class Person(ActiveMixin, Base):
    """
    Natural person behind a user account.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "person"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(Text)
    number_identification: Mapped[Optional[int]] = mapped_column(Integer)
    phone: Mapped[Optional[str]] = mapped_column(Text)


class User(ActiveMixin, Base):
    """
    Login account of a person.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[Optional[str]] = mapped_column(Text)
    creation_date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    person_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("person.id"), index=True
    )


class Rol(ActiveMixin, Base):
    """Named role granted to users."""

    __tablename__ = "rol"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[Optional[int]] = mapped_column(Integer)
    description: Mapped[Optional[str]] = mapped_column(Text)


class Permission(ActiveMixin, Base):
    """Action a role may perform on a form (read, write, delete...)."""

    __tablename__ = "permission"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[Optional[int]] = mapped_column(Integer)
    description: Mapped[Optional[str]] = mapped_column(Text)


class Form(ActiveMixin, Base):
    """Screen of the back office."""

    __tablename__ = "form"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)


class Module(ActiveMixin, Base):
    """Group of forms."""

    __tablename__ = "module"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    creation_date: Mapped[Optional[datetime]] = mapped_column(DateTime)


# =============================================================================
# Link tables
# =============================================================================


class RolUser(ActiveMixin, Base):
    """M:N between roles and users."""

    __tablename__ = "rol_user"

    rol_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rol.id"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id"), nullable=False, index=True
    )


class RolFormPermission(ActiveMixin, Base):
    """M:N:N between roles, forms and permissions."""

    __tablename__ = "rol_form_permission"

    rol_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rol.id"), nullable=False, index=True
    )
    form_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("form.id"), nullable=False, index=True
    )
    permission_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("permission.id"), nullable=False, index=True
    )


class FormModule(ActiveMixin, Base):
    """M:N between forms and modules."""

    __tablename__ = "form_module"

    form_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("form.id"), nullable=False, index=True
    )
    module_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("module.id"), nullable=False, index=True
    )
