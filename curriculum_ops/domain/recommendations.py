"""Recommended action, mapping suggestions and rationale for impact reports.

Pure domain functions. No DB access, fully deterministic.
"""

from dataclasses import dataclass
from enum import StrEnum

from curriculum_ops.domain.severity import Severity

NEW_CAPABILITY_KEYWORDS = ("new", "launch", "introducing", "now", "feature", "capability")

# Audience segments (tracks) and the words that signal each one
SEGMENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "high_school": ("student", "teen", "education", "school", "learning"),
    "college": ("university", "college", "academic", "research", "student"),
    "early_career": ("professional", "workplace", "enterprise", "business", "productivity"),
    "creative": ("creative", "design", "art", "visual", "content", "media"),
    "entrepreneur": ("business", "startup", "entrepreneur", "founder", "company"),
    "everyone": ("everyone", "consumer", "personal", "everyday"),
}

MAX_MAPPING_SUGGESTIONS = 3
SUGGESTION_QUESTION_ID = "Q4"


class RecommendedAction(StrEnum):
    UPDATE_LESSON = "update_lesson"
    CREATE_LESSON = "create_lesson"
    UPDATE_MAPPING = "update_mapping"
    NO_ACTION = "no_action"


@dataclass
class MappingHint:
    """Advisory mapping-rule suggestion. Never mutates a rule."""

    question_id: str
    suggested_value: str
    rationale: str
    current_value: str | None = None
    rule_id: str | None = None


def determine_action(severity: Severity, affected_count: int) -> RecommendedAction:
    """Derive the recommended action from severity and affected-lesson presence.

    Rules:
        - critical: update_lesson if lessons are affected, else update_mapping
        - high: update_lesson if lessons are affected, else create_lesson
        - medium with affected lessons: update_lesson
        - anything else: no_action
    """
    has_lessons = affected_count > 0
    if severity == Severity.CRITICAL:
        return RecommendedAction.UPDATE_LESSON if has_lessons else RecommendedAction.UPDATE_MAPPING
    if severity == Severity.HIGH:
        return RecommendedAction.UPDATE_LESSON if has_lessons else RecommendedAction.CREATE_LESSON
    if severity == Severity.MEDIUM and has_lessons:
        return RecommendedAction.UPDATE_LESSON
    return RecommendedAction.NO_ACTION


def mapping_suggestions(text: str, update_title: str) -> list[MappingHint]:
    """Suggest tracks worth routing towards when an update announces new capabilities.

    Returns an empty list unless the text carries a new-capability signal word.
    At most three suggestions, in segment-table order.
    """
    lowered = text.lower()
    if not any(keyword in lowered for keyword in NEW_CAPABILITY_KEYWORDS):
        return []

    hints = []
    for track, keywords in SEGMENT_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            hints.append(
                MappingHint(
                    question_id=SUGGESTION_QUESTION_ID,
                    suggested_value=f"Consider {track} track for users interested in: {update_title}",
                    rationale=f"Update mentions capabilities relevant to {track} track users",
                )
            )
    return hints[:MAX_MAPPING_SUGGESTIONS]


_SEVERITY_SENTENCES = {
    Severity.CRITICAL: (
        "This update appears to contain breaking changes or deprecated features "
        "that may affect existing lessons."
    ),
    Severity.HIGH: "This update introduces significant new features that should be covered in the curriculum.",
    Severity.MEDIUM: "This update contains enhancements that may be worth mentioning in relevant lessons.",
    Severity.LOW: "This is a minor update that may not require curriculum changes.",
    Severity.INFO: "This update is informational and likely does not require curriculum changes.",
}


def compose_rationale(
    provider: str,
    title: str,
    severity: Severity,
    affected_titles: list[str],
    has_mapping_suggestions: bool,
) -> str:
    """Short human-readable paragraph explaining the report."""
    parts = [f'Update from {provider}: "{title}"', _SEVERITY_SENTENCES[severity]]
    if affected_titles:
        parts.append(
            f"{len(affected_titles)} lesson(s) may be affected, "
            f'with the most relevant being "{affected_titles[0]}".'
        )
    if has_mapping_suggestions:
        parts.append("Consider reviewing course mapping rules for potential updates.")
    return " ".join(parts)


def build_citations(title: str, source_url: str) -> list[dict[str, str]]:
    """Citation list for a report; one entry per source document."""
    return [{"text": title, "url": source_url}]
