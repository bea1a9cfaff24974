"""Unit tests for lesson matching rules."""

import pytest

from curriculum_ops.domain.matching import (
    MAX_AFFECTED_LESSONS,
    LessonMatch,
    mentioned_providers,
    rank_matches,
    relevance_score,
    suggested_changes,
    tokenize,
)
from curriculum_ops.domain.severity import Severity

pytestmark = pytest.mark.unit


def test_alias_mentions_resolve_to_provider():
    assert mentioned_providers("new sonnet model released") == ["Claude"]


def test_declared_provider_appended_once():
    assert mentioned_providers("claude gets projects", "Claude") == ["Claude"]
    assert mentioned_providers("nothing relevant", "HeyGen") == ["HeyGen"]


def test_multiple_providers_follow_alias_table_order():
    providers = mentioned_providers("gemini and chatgpt compared")
    assert providers == ["ChatGPT", "Gemini"]


def test_tokenize_drops_short_words():
    assert tokenize("The new API is live today") == ["live", "today"]


def test_relevance_score_is_fraction_of_matching_tokens():
    score = relevance_score("sonnet coding improvements", "coding with claude sonnet")
    assert score == pytest.approx(2 / 3)


def test_relevance_score_bounds():
    assert relevance_score("", "anything") == 0.0
    assert relevance_score("claude claude", "claude") == 1.0


@pytest.mark.parametrize(
    ("severity", "prefix"),
    [
        (Severity.CRITICAL, "URGENT:"),
        (Severity.HIGH, "Consider adding new content"),
        (Severity.MEDIUM, "Review"),
        (Severity.LOW, "Optional:"),
        (Severity.INFO, "Optional:"),
    ],
)
def test_suggested_changes_depend_on_severity(severity, prefix):
    assert suggested_changes(severity, "Update", "Lesson").startswith(prefix)


def test_rank_matches_sorts_and_caps():
    matches = [
        LessonMatch(lesson_id=str(i), lesson_title=f"L{i}", relevance_score=i / 20, suggested_changes="")
        for i in range(15)
    ]
    ranked = rank_matches(matches)
    assert len(ranked) == MAX_AFFECTED_LESSONS
    scores = [match.relevance_score for match in ranked]
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].lesson_id == "14"
