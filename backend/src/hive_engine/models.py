"""SQLAlchemy models for the member/event directory.

The directory is the engine's input store. List-valued fields are kept as
JSON text in the order the engine expects them back.
"""
import json
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Integer, Text, DateTime, Float
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def utc_now():
    """Timezone-aware UTC now (replaces deprecated datetime.utcnow)."""
    return datetime.now(timezone.utc)


def _load_list(raw: Optional[str]) -> tuple:
    if not raw:
        return ()
    return tuple(json.loads(raw))


class Member(Base):
    """Hive member - canonical record."""
    __tablename__ = "members"

    member_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    interests_json: Mapped[str] = mapped_column(Text, default="[]")  # Ordered category names
    events_attended_json: Mapped[str] = mapped_column(Text, default="[]")  # Ordered event IDs
    connection_strength: Mapped[float] = mapped_column(Float, default=0.0)
    joined_at: Mapped[str] = mapped_column(String(32), default="")
    hive_level: Mapped[int] = mapped_column(Integer, default=1)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)
    last_seen_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    @property
    def interests(self) -> tuple:
        return _load_list(self.interests_json)

    @property
    def events_attended(self) -> tuple:
        return _load_list(self.events_attended_json)


class HostedEvent(Base):
    """Event record with its attendee list."""
    __tablename__ = "events"

    event_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    category: Mapped[str] = mapped_column(String(32), index=True)
    attendees_json: Mapped[str] = mapped_column(Text, default="[]")  # Ordered member IDs
    host_id: Mapped[str] = mapped_column(String(64), default="")
    date: Mapped[str] = mapped_column(String(32), default="")
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)

    @property
    def attendees(self) -> tuple:
        return _load_list(self.attendees_json)
