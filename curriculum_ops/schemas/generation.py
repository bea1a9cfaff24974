"""Pydantic schemas for generated course plans and slide documents.

Generation output uses the camelCase keys the prompts ask for (courseName,
keyTopics, companionDoc); fields accept either the alias or the snake_case name.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curriculum_ops.schemas.catalog import LESSON_LEVELS

SlideType = Literal[
    "title",
    "overview",
    "step",
    "screenshot",
    "advanced",
    "tips",
    "mistakes",
    "inspiration",
    "challenge",
    "summary",
    "closing",
]

DEFAULT_PLAN_LEVEL = "intermediate"


class _Generated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LessonPlan(_Generated):
    """Phase-1 outline of one lesson."""

    title: str = Field(..., min_length=1)
    provider: str = Field(..., min_length=1)
    level: str = DEFAULT_PLAN_LEVEL
    scenario: str = ""
    objectives: list[str] = Field(default_factory=list)
    key_topics: list[str] = Field(default_factory=list, alias="keyTopics")
    difficulty_notes: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> str:
        level = str(value or "").strip().lower()
        return level if level in LESSON_LEVELS else DEFAULT_PLAN_LEVEL


class CoursePlan(_Generated):
    """Phase-1 course architecture."""

    course_name: str = Field(..., min_length=1, alias="courseName")
    course_description: str = Field("", alias="courseDescription")
    track: str = "everyone"
    level: str = DEFAULT_PLAN_LEVEL
    lessons: list[LessonPlan] = Field(default_factory=list)


class Slide(BaseModel):
    """One slide. Only ``type`` and ``header`` are fixed; variant fields pass through."""

    model_config = ConfigDict(extra="allow")

    type: SlideType
    header: str = ""
    content: str | None = None


class SlideDocument(_Generated):
    """A generated lesson deck plus its companion documentation."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = ""
    slides: list[Slide] = Field(..., min_length=1)
    companion_doc: str = Field("", alias="companionDoc")
    metadata: dict[str, Any] = Field(default_factory=dict)


class LessonRequest(BaseModel):
    """Input for generating a single lesson deck outside a course."""

    title: str = Field(..., min_length=1)
    provider: str = Field(..., min_length=1)
    level: str = Field(..., min_length=1)
    audience: str = Field(..., min_length=1)
    objectives: str = Field(..., min_length=1)
    project: str | None = None
    additional_details: str | None = None


# ──────────────────────────────────────────────────────────────────────────────
# Course synthesis result
# ──────────────────────────────────────────────────────────────────────────────


class GeneratedCourseSummary(BaseModel):
    id: str
    name: str
    description: str
    track: str
    level: str
    lesson_count: int


class GeneratedLesson(BaseModel):
    id: str
    title: str
    provider: str | None
    level: str
    slide_count: int
    slides: list[Slide]
    companion_doc: str
    metadata: dict[str, Any]


class CourseGenerationResult(BaseModel):
    course: GeneratedCourseSummary
    lessons: list[GeneratedLesson]
    reports_processed: int
    providers_included: list[str]


class ExportedDeck(BaseModel):
    filename: str
    content: str
    content_type: str
