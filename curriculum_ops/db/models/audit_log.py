"""AuditLog model: append-only record of every tracked mutation."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Index, Integer, String

from curriculum_ops.db.base import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)  # monotonic, doubles as ordering key
    entity_type = Column(String(50), nullable=False)  # mapping_rule, impact_report, course
    entity_id = Column(String(36), nullable=False)
    action = Column(String(50), nullable=False)  # create, update, approve, reject, assign, course_generated, auto_generated

    previous_value = Column(JSON, nullable=True)  # snapshot before, null for creations
    new_value = Column(JSON, nullable=True)
    actor = Column(String(100), nullable=False)

    timestamp = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    # NO updated_at -- entries are immutable (append-only)

    __table_args__ = (Index("ix_audit_logs_entity", "entity_type", "entity_id"),)
