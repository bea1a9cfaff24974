"""Update model: fetched provider announcements awaiting analysis."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Text

from curriculum_ops.db.base import Base, new_id


class Update(Base):
    __tablename__ = "updates"

    id = Column(String(36), primary_key=True, default=new_id)
    provider_id = Column(String(36), ForeignKey("providers.id"), nullable=True)
    provider = Column(String(100), nullable=False, index=True)

    title = Column(String(500), nullable=False)
    summary = Column(Text, nullable=True)
    raw_text = Column(Text, nullable=True)
    source_url = Column(String(1000), nullable=False, unique=True)  # natural idempotency key
    doc_urls = Column(JSON, nullable=False, default=list)  # [{label, url}]

    published_at = Column(DateTime(timezone=True), nullable=True)
    fetched_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    processed = Column(Boolean, nullable=False, default=False, index=True)
