"""
Organization Models: Company, Branch, Zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import ActiveMixin, Base


class Company(ActiveMixin, Base):
    """
    Top-level organization owning branches.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "company"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    email: Mapped[Optional[str]] = mapped_column(Text)
    logo: Mapped[Optional[str]] = mapped_column(Text)  # URL or path
    data_registry: Mapped[Optional[datetime]] = mapped_column(DateTime)


class Branch(ActiveMixin, Base):
    """
    Physical location of a company.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "branch"

    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("company.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    email: Mapped[Optional[str]] = mapped_column(Text)
    incharge: Mapped[Optional[int]] = mapped_column(Integer)  # Person in charge
    location_furrow: Mapped[Optional[str]] = mapped_column(Text)


class Zone(ActiveMixin, Base):
    """
    Storage area inside a branch. Items and inventory records live in zones.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "zone"

    branch_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("branch.id"), nullable=False, index=True
    )
