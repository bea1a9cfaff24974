"""Typed catalog records.

These models are the serialization boundary of the catalog store: JSON
columns are encoded from them on write and decoded into them on read, so
callers never handle raw serialized strings.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curriculum_ops.domain.recommendations import RecommendedAction
from curriculum_ops.domain.review import ReportStatus
from curriculum_ops.domain.severity import Severity

LESSON_LEVELS = ("beginner", "intermediate", "advanced")


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ──────────────────────────────────────────────────────────────────────────────
# Providers, lessons, courses
# ──────────────────────────────────────────────────────────────────────────────


class ProviderCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: str | None = None
    website_url: str | None = None
    changelog_url: str | None = None


class ProviderRecord(_Record):
    id: str
    name: str
    category: str | None
    website_url: str | None
    changelog_url: str | None
    created_at: datetime
    updated_at: datetime


class LessonCreate(BaseModel):
    title: str = Field(..., min_length=1)
    provider_id: str | None = None
    provider_name: str | None = None
    level: str = "beginner"
    objective: str | None = None
    key_topics: list[str] = Field(default_factory=list)
    practice_assessment: dict[str, Any] | None = None
    video_url: str | None = None
    caption_url: str | None = None
    slides_url: str | None = None

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        if value not in LESSON_LEVELS:
            raise ValueError(f"level must be one of {LESSON_LEVELS}")
        return value


class LessonRecord(_Record):
    id: str
    title: str
    provider_id: str | None
    provider_name: str | None
    level: str
    objective: str | None
    key_topics: list[str]
    practice_assessment: dict[str, Any] | None
    video_url: str | None
    caption_url: str | None
    slides_url: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def match_text(self) -> str:
        """Lowercased title + objective + key topics, the text updates are scored against."""
        return f"{self.title} {self.objective or ''} {' '.join(self.key_topics)}".lower()


class PositionedLesson(LessonRecord):
    position: int


class CourseCreate(BaseModel):
    name: str = Field(..., min_length=1)
    track: str = "everyone"
    level: str = "beginner"
    lesson_ids: list[str] = Field(default_factory=list)


class CourseRecord(_Record):
    id: str
    name: str
    track: str
    level: str
    lesson_ids: list[str]
    lesson_count: int
    created_at: datetime
    updated_at: datetime


# ──────────────────────────────────────────────────────────────────────────────
# Mapping rules
# ──────────────────────────────────────────────────────────────────────────────


class MappingRuleCreate(BaseModel):
    question_id: str = Field(..., min_length=1)
    question_text: str | None = None
    answer_value: str = Field(..., min_length=1)
    recommended_course: str | None = None
    recommended_track: str | None = None
    priority: int = 5


class MappingRuleChanges(BaseModel):
    """Fields a new version may change. The (question_id, answer_value) key is immutable."""

    model_config = ConfigDict(extra="forbid")

    question_text: str | None = None
    recommended_course: str | None = None
    recommended_track: str | None = None
    priority: int | None = None


class MappingRuleRecord(_Record):
    id: str
    version: int
    question_id: str
    question_text: str | None
    answer_value: str
    recommended_course: str | None
    recommended_track: str | None
    priority: int
    is_active: bool
    created_at: datetime
    created_by: str | None

    def snapshot(self) -> dict[str, Any]:
        """Rule body as recorded in the audit log."""
        return self.model_dump(mode="json")


# ──────────────────────────────────────────────────────────────────────────────
# Updates
# ──────────────────────────────────────────────────────────────────────────────


class DocLink(BaseModel):
    label: str = ""
    url: str


class UpdateCreate(BaseModel):
    provider: str = Field(..., min_length=1)
    provider_id: str | None = None
    title: str = Field(..., min_length=1)
    summary: str | None = None
    raw_text: str | None = None
    source_url: str = Field(..., min_length=1)
    published_at: datetime | None = None
    doc_urls: list[DocLink] = Field(default_factory=list)

    @field_validator("doc_urls", mode="before")
    @classmethod
    def coerce_plain_urls(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"label": item, "url": item} if isinstance(item, str) else item for item in value]
        return value


class UpdateRecord(_Record):
    id: str
    provider_id: str | None
    provider: str
    title: str
    summary: str | None
    raw_text: str | None
    source_url: str
    doc_urls: list[DocLink]
    published_at: datetime | None
    fetched_at: datetime
    processed: bool


# ──────────────────────────────────────────────────────────────────────────────
# Impact reports
# ──────────────────────────────────────────────────────────────────────────────


class AffectedLesson(BaseModel):
    lesson_id: str
    lesson_title: str
    relevance_score: float = Field(..., ge=0.0, le=1.0)
    suggested_changes: str


class MappingSuggestion(BaseModel):
    rule_id: str | None = None
    question_id: str
    current_value: str | None = None
    suggested_value: str
    rationale: str


class Citation(BaseModel):
    text: str
    url: str


class ImpactReportCreate(BaseModel):
    update_id: str
    provider: str
    severity: Severity
    recommended_action: RecommendedAction
    affected_lessons: list[AffectedLesson] = Field(default_factory=list)
    mapping_suggestions: list[MappingSuggestion] = Field(default_factory=list)
    rationale: str = ""
    citations: list[Citation] = Field(default_factory=list)


class ImpactReportRecord(_Record):
    id: str
    update_id: str
    provider: str
    severity: Severity
    recommended_action: RecommendedAction
    affected_lessons: list[AffectedLesson]
    mapping_suggestions: list[MappingSuggestion]
    rationale: str
    citations: list[Citation]
    status: ReportStatus
    assignee: str | None
    reviewed_by: str | None
    reviewed_at: datetime | None
    created_at: datetime
    updated_at: datetime


class ReportStats(BaseModel):
    total: int
    by_status: dict[str, int]
    by_severity: dict[str, int]
    by_action: dict[str, int]


# ──────────────────────────────────────────────────────────────────────────────
# Audit log
# ──────────────────────────────────────────────────────────────────────────────


class AuditLogRecord(_Record):
    id: int
    entity_type: str
    entity_id: str
    action: str
    previous_value: Any | None
    new_value: Any | None
    actor: str
    timestamp: datetime
