"""ImpactReport model: the analyzer's verdict on one update."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text

from curriculum_ops.db.base import Base, new_id


class ImpactReport(Base):
    __tablename__ = "impact_reports"

    id = Column(String(36), primary_key=True, default=new_id)
    # Unique: at most one report per update, also the replay dedup key
    update_id = Column(String(36), ForeignKey("updates.id"), nullable=False, unique=True)
    provider = Column(String(100), nullable=False, index=True)

    severity = Column(String(20), nullable=False)  # critical, high, medium, low, info
    recommended_action = Column(String(30), nullable=False)  # update_lesson, create_lesson, update_mapping, no_action

    affected_lessons = Column(JSON, nullable=False, default=list)  # [{lesson_id, lesson_title, relevance_score, suggested_changes}]
    mapping_suggestions = Column(JSON, nullable=False, default=list)
    rationale = Column(Text, nullable=False, default="")
    citations = Column(JSON, nullable=False, default=list)  # [{text, url}]

    # Review workflow
    status = Column(String(20), nullable=False, default="new", index=True)  # new, approved, rejected, assigned, done
    assignee = Column(String(100), nullable=True)
    reviewed_by = Column(String(100), nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
