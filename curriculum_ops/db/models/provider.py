"""Provider model: AI tool vendors, keyed by name."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from curriculum_ops.db.base import Base, new_id


class Provider(Base):
    __tablename__ = "providers"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False, unique=True)  # human-facing join key
    category = Column(String(50), nullable=True)  # llm, image, video, audio, research, data, automation, nocode
    website_url = Column(String(500), nullable=True)
    changelog_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
