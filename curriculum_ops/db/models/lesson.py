"""Lesson model: catalog lessons matched against provider updates."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text

from curriculum_ops.db.base import Base, new_id


class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(300), nullable=False, index=True)
    provider_id = Column(String(36), ForeignKey("providers.id"), nullable=True)
    provider_name = Column(String(100), nullable=True, index=True)  # denormalized join key
    level = Column(String(20), nullable=False, default="beginner")  # beginner, intermediate, advanced

    video_url = Column(String(500), nullable=True)
    caption_url = Column(String(500), nullable=True)
    slides_url = Column(String(500), nullable=True)

    objective = Column(Text, nullable=True)
    key_topics = Column(JSON, nullable=False, default=list)  # ordered list of strings
    practice_assessment = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
