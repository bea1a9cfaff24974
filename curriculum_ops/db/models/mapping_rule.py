"""MappingRule model: append-only version log per (question_id, answer_value)."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text

from curriculum_ops.db.base import Base, new_id


class MappingRule(Base):
    """One version of a questionnaire answer -> course/track recommendation.

    Rows are never edited except to flip ``is_active`` off when a newer
    version supersedes them.
    """

    __tablename__ = "mapping_rules"

    id = Column(String(36), primary_key=True, default=new_id)
    version = Column(Integer, nullable=False, default=1)

    question_id = Column(String(50), nullable=False)
    question_text = Column(Text, nullable=True)
    answer_value = Column(String(200), nullable=False)

    recommended_course = Column(String(300), nullable=True)
    recommended_track = Column(String(50), nullable=True)
    priority = Column(Integer, nullable=False, default=5)  # tie-break weight
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    created_by = Column(String(100), nullable=True)
    # NO updated_at -- versions are immutable

    __table_args__ = (Index("ix_mapping_rules_key", "question_id", "answer_value", "version", unique=True),)
