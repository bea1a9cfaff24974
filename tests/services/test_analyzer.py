"""Integration tests for ImpactAnalyzer."""

import pytest

from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.domain.matching import KEYWORD_MATCH_SCORE, RELEVANCE_THRESHOLD
from curriculum_ops.domain.recommendations import RecommendedAction
from curriculum_ops.domain.severity import Severity
from curriculum_ops.services.analyzer import ANALYZER_ACTOR, ImpactAnalyzer
from curriculum_ops.store.repositories import UpdateRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def analyzer(seeded_store):
    return ImpactAnalyzer(seeded_store)


async def test_alias_match_recommends_lesson_update(seeded_store, analyzer, make_update):
    update = await make_update(
        provider="Anthropic",
        title="Sonnet improved coding",
        summary="Claude Sonnet writes code with better refactoring",
    )

    report = await analyzer.analyze(update)

    assert report.severity == Severity.MEDIUM
    by_title = {lesson.lesson_title: lesson for lesson in report.affected_lessons}
    assert "Coding with Claude Sonnet" in by_title
    assert by_title["Coding with Claude Sonnet"].relevance_score > RELEVANCE_THRESHOLD
    assert report.recommended_action == RecommendedAction.UPDATE_LESSON
    assert report.citations[0].url == update.source_url
    assert [lesson.lesson_title for lesson in report.affected_lessons] == [
        "Coding with Claude Sonnet",
        "Claude for Writing Assistance",
    ]
    # 7 of 10 update words appear in the coding lesson, 4 of 10 in the writing lesson
    assert [lesson.relevance_score for lesson in report.affected_lessons] == pytest.approx([0.7, 0.4])
    assert report.rationale == (
        'Update from Anthropic: "Sonnet improved coding" '
        "This update contains enhancements that may be worth mentioning in relevant lessons. "
        '2 lesson(s) may be affected, with the most relevant being "Coding with Claude Sonnet".'
    )


async def test_keyword_only_lessons_get_fixed_score(analyzer, make_update):
    # "n8n" finds the lesson through provider-name search; no title words overlap
    update = await make_update(provider="n8n", title="Launch of hosted runners")

    report = await analyzer.analyze(update)

    assert report.severity == Severity.HIGH
    assert [lesson.lesson_title for lesson in report.affected_lessons] == ["Automating Reports with n8n"]
    assert report.affected_lessons[0].relevance_score == KEYWORD_MATCH_SCORE
    assert report.affected_lessons[0].suggested_changes.startswith("Review lesson content")


async def test_no_lessons_critical_update_targets_mapping(analyzer, make_update):
    update = await make_update(provider="HeyGen", title="Legacy avatars discontinued")

    report = await analyzer.analyze(update)

    assert report.severity == Severity.CRITICAL
    assert report.affected_lessons == []
    assert report.recommended_action == RecommendedAction.UPDATE_MAPPING


async def test_affected_lessons_sorted_and_bounded(analyzer, make_update):
    update = await make_update(
        provider="Claude",
        title="Claude Sonnet coding writing drafting revision refactoring",
    )
    report = await analyzer.analyze(update)

    scores = [lesson.relevance_score for lesson in report.affected_lessons]
    assert scores == sorted(scores, reverse=True)
    assert len(scores) <= 10
    assert all(0.0 <= score <= 1.0 for score in scores)


async def test_analysis_marks_processed_and_audits(seeded_store, analyzer, make_update):
    update = await make_update(title="Introducing projects")
    report = await analyzer.analyze(update)

    async with seeded_store.transaction() as catalog:
        stored = await catalog.updates.get(update.id)
        trail = await catalog.audit_logs.for_entity("impact_report", report.id)

    assert stored.processed is True
    assert [entry.action for entry in trail] == ["create"]
    assert trail[0].actor == ANALYZER_ACTOR


async def test_analyze_is_idempotent_per_update(seeded_store, analyzer, make_update):
    update = await make_update(title="Introducing projects")
    first = await analyzer.analyze(update)
    second = await analyzer.analyze(update)

    assert second.id == first.id
    async with seeded_store.transaction() as catalog:
        assert (await catalog.impact_reports.stats()).total == 1


async def test_analyze_by_id_unknown_update(analyzer):
    with pytest.raises(NotFoundError):
        await analyzer.analyze_by_id("missing")


async def test_mapping_suggestions_for_new_capabilities(analyzer, make_update):
    update = await make_update(
        provider="Gemini",
        title="New feature for students",
        summary="Gemini launches a study mode for school learning",
    )
    report = await analyzer.analyze(update)

    assert report.mapping_suggestions
    assert report.mapping_suggestions[0].question_id == "Q4"
    assert "mapping rules" in report.rationale


async def test_batch_continues_after_failure(seeded_store, analyzer, make_update, monkeypatch):
    good = await make_update(title="Introducing projects")
    bad = await make_update(title="Faster uploads")

    original = analyzer._analyze

    async def flaky(catalog, update):
        if update.id == bad.id:
            raise RuntimeError("lesson lookup failed")
        return await original(catalog, update)

    monkeypatch.setattr(analyzer, "_analyze", flaky)

    result = await analyzer.analyze_all_unprocessed()

    assert [report.update_id for report in result.reports] == [good.id]
    assert len(result.failures) == 1
    assert result.failures[0].update_id == bad.id
    assert "lesson lookup failed" in result.failures[0].error

    async with seeded_store.transaction() as catalog:
        pending = await catalog.updates.find_all(processed=False)
    assert [update.id for update in pending] == [bad.id]


async def test_get_stats(analyzer, make_update):
    await analyzer.analyze(await make_update(title="Introducing projects"))
    stats = await analyzer.get_stats()
    assert stats.total == 1
    assert stats.by_status["new"] == 1


async def test_failed_processed_flag_rolls_back_report_and_audit(seeded_store, analyzer, make_update, monkeypatch):
    update = await make_update(title="Introducing projects")

    async def fail_mark_processed(self, update_id):
        raise RuntimeError("disk full")

    monkeypatch.setattr(UpdateRepository, "mark_processed", fail_mark_processed)

    with pytest.raises(RuntimeError, match="disk full"):
        await analyzer.analyze(update)

    async with seeded_store.transaction() as catalog:
        report = await catalog.impact_reports.get_by_update_id(update.id)
        trail = await catalog.audit_logs.find_all(entity_type="impact_report")
        stored = await catalog.updates.get(update.id)

    assert report is None
    assert trail == []
    assert stored.processed is False
