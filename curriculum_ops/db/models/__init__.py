"""Re-export all models so Base.metadata sees them."""

from curriculum_ops.db.models.audit_log import AuditLog
from curriculum_ops.db.models.course import Course, CourseLesson
from curriculum_ops.db.models.impact_report import ImpactReport
from curriculum_ops.db.models.lesson import Lesson
from curriculum_ops.db.models.mapping_rule import MappingRule
from curriculum_ops.db.models.provider import Provider
from curriculum_ops.db.models.update import Update

__all__ = [
    "AuditLog",
    "Course",
    "CourseLesson",
    "ImpactReport",
    "Lesson",
    "MappingRule",
    "Provider",
    "Update",
]
