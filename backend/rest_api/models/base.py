"""
Base class and ActiveMixin for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ActiveMixin:
    """
    Mixin providing the identity and logical-delete flag shared by every entity.

    Fields added:
    - id: Store-assigned integer primary key
    - active: Logical delete flag (False = deleted, True = visible)
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Logical delete flag (False = deleted/inactive, True = active)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        id_val = getattr(self, "id", None)
        state = "active" if self.active else "deleted"
        return f"<{class_name}(id={id_val}, {state})>"
