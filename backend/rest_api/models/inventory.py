"""
Inventory Models: Category, Item, ImagenItem, InventaryDetails.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import ActiveMixin, Base


class Category(ActiveMixin, Base):
    """
    Classification for items.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)


class Item(ActiveMixin, Base):
    """
    An inventoried asset, located in a zone and classified by category.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "item"

    code: Mapped[Optional[str]] = mapped_column(Text)
    code_qr: Mapped[Optional[str]] = mapped_column(Text)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime)
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("category.id"), index=True
    )
    zone_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("zone.id"), index=True
    )


class ImagenItem(ActiveMixin, Base):
    """
    Picture attached to an item.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "imagen_item"

    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("item.id"), nullable=False, index=True
    )
    url_image: Mapped[str] = mapped_column(Text, nullable=False)
    date_registry: Mapped[Optional[datetime]] = mapped_column(DateTime)


class InventaryDetails(ActiveMixin, Base):
    """
    One inventory check of a zone: status transition plus observations.
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "inventary_details"

    status_previous: Mapped[Optional[str]] = mapped_column(Text)
    status_new: Mapped[Optional[str]] = mapped_column(Text)
    observations: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[Optional[datetime]] = mapped_column(DateTime)
    description: Mapped[Optional[str]] = mapped_column(Text)
    zone_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("zone.id"), nullable=False, index=True
    )
