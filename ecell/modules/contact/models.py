from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ecell.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ContactSubmission(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "contact_submissions"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
