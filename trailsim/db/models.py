"""SQLAlchemy declarative base for all ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all database models."""


class SaveSlotModel(Base):
    """ORM model for a named save slot holding one engine snapshot."""

    __tablename__ = "save_slots"

    slot_name: Mapped[str] = mapped_column(String, primary_key=True)
    theme_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    theme_version: Mapped[str] = mapped_column(String, nullable=False)
    snapshot: Mapped[dict] = mapped_column(JSON, nullable=False)
    saved_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
