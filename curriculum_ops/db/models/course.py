"""Course model and the position-indexed course <-> lesson join table."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from curriculum_ops.db.base import Base, new_id


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(300), nullable=False)
    track = Column(String(50), nullable=False, default="everyone")  # high_school, college, early_career, ...
    level = Column(String(20), nullable=False, default="beginner")

    # Must always match course_lessons ordered by position
    lesson_ids = Column(JSON, nullable=False, default=list)
    lesson_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class CourseLesson(Base):
    __tablename__ = "course_lessons"

    course_id = Column(String(36), ForeignKey("courses.id"), primary_key=True)
    lesson_id = Column(String(36), ForeignKey("lessons.id"), primary_key=True)
    position = Column(Integer, nullable=False)  # 1-based

    __table_args__ = (UniqueConstraint("course_id", "position", name="uq_course_lesson_position"),)
