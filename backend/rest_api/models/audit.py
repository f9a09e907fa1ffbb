"""
Activity Log Model.

Rows are written through the LogActivity endpoints like any other entity;
no other operation records into this table automatically.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import ActiveMixin, Base


class LogActivity(ActiveMixin, Base):
    """
    Before/after snapshot of a change, as free text (usually JSON).
    Inherits: id, active from ActiveMixin.
    """

    __tablename__ = "log_activity"

    action: Mapped[str] = mapped_column(Text, nullable=False)  # CREATE, UPDATE, DELETE
    data_previous: Mapped[Optional[str]] = mapped_column(Text)
    data_new: Mapped[Optional[str]] = mapped_column(Text)
    data: Mapped[Optional[datetime]] = mapped_column(DateTime)  # When it happened
