from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ecell.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

EVENT_STATUSES = ("upcoming", "past")
DEFAULT_EVENT_IMAGE = "/assets/events/default.jpg"


class Event(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)        # texto curto do card
    status: Mapped[str] = mapped_column(String(20), nullable=False)       # upcoming | past
    registration_link: Mapped[str | None] = mapped_column(Text, nullable=True)   # eventos futuros
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)             # pop-up de eventos passados
    image: Mapped[str | None] = mapped_column(Text, nullable=True, default=DEFAULT_EVENT_IMAGE)
