"""Integration tests for CourseSynthesizer with the scenario-based generation fake."""

import pytest

from curriculum_ops.core.exceptions import BadRequestError, GenerationParseError, NotFoundError
from curriculum_ops.domain.review import ReportStatus
from curriculum_ops.generation.client_fake import FakeGenerationClient
from curriculum_ops.generation.generator import CourseContentGenerator
from curriculum_ops.generation.json_repair import REPAIRED_COMPANION_DOC
from curriculum_ops.integrations.update_feed import SeededUpdateSource
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.services.course_synthesizer import SYNTHESIZER_ACTOR, CourseSynthesizer, source_urls_for
from curriculum_ops.services.ingest_service import UpdateIngestService
from curriculum_ops.services.review_service import ReviewService
from curriculum_ops.store.repositories import CourseRepository

pytestmark = pytest.mark.integration


@pytest.fixture
async def reports(seeded_store):
    """Impact reports for the five seeded updates, all still ``new``."""
    pending = await UpdateIngestService(seeded_store).ingest(SeededUpdateSource())
    analyzer = ImpactAnalyzer(seeded_store)
    return [await analyzer.analyze(update) for update in pending]


@pytest.fixture
async def approved(seeded_store, reports):
    """Claude and Gemini reports approved."""
    review = ReviewService(seeded_store)
    chosen = [report for report in reports if report.provider in {"Claude", "Gemini"}]
    return [await review.approve(report.id, actor="alice") for report in chosen]


def _synthesizer(store, scenario="happy_path"):
    client = FakeGenerationClient(scenario=scenario)
    return CourseSynthesizer(store, CourseContentGenerator(client, delay_seconds=0)), client


async def test_generates_course_from_all_approved_reports(seeded_store, approved):
    synthesizer, client = _synthesizer(seeded_store)

    result = await synthesizer.generate_course()

    assert result.reports_processed == 2
    assert sorted(result.providers_included) == ["Claude", "Gemini"]
    assert result.course.name == "What's New in AI Tools"
    assert result.course.lesson_count == 2
    assert {lesson.provider for lesson in result.lessons} == {"Claude", "Gemini"}
    assert all(lesson.slide_count == 5 for lesson in result.lessons)
    # one plan call plus one call per lesson
    assert len(client.calls) == 3

    lesson = result.lessons[0]
    assert lesson.metadata["generatedFromCourse"] is True
    assert lesson.metadata["slideCount"] == 5
    assert lesson.metadata["audience"] == "Professional learners"


async def test_course_persisted_with_reports_done_and_audited(seeded_store, approved):
    synthesizer, _ = _synthesizer(seeded_store)
    result = await synthesizer.generate_course([report.id for report in approved])

    async with seeded_store.transaction() as catalog:
        ordered = await catalog.courses.lessons_in_order(result.course.id)
        course_trail = await catalog.audit_logs.for_entity("course", result.course.id)
        report_trails = [await catalog.audit_logs.for_entity("impact_report", report.id) for report in approved]
        stored_reports = [await catalog.impact_reports.get(report.id) for report in approved]

    assert [lesson.id for lesson in ordered] == [lesson.id for lesson in result.lessons]
    assert ordered[0].practice_assessment["generatedFromCourse"] is True
    assert ordered[0].objective.startswith("Configure the new")

    assert [entry.action for entry in course_trail] == ["auto_generated"]
    assert course_trail[0].new_value["lessonCount"] == 2
    assert sorted(course_trail[0].new_value["reportIds"]) == sorted(report.id for report in approved)

    for report, trail in zip(stored_reports, report_trails):
        assert report.status == ReportStatus.DONE
        assert report.reviewed_by == SYNTHESIZER_ACTOR
        assert trail[0].action == "course_generated"
        assert trail[0].new_value["course_id"] == result.course.id
        assert sum(1 for entry in trail if entry.action == "course_generated") == 1


async def test_malformed_once_retries_and_succeeds(seeded_store, approved):
    synthesizer, client = _synthesizer(seeded_store, "malformed_once")

    result = await synthesizer.generate_course()

    assert result.course.lesson_count == 2
    assert len(client.calls) == 4


async def test_malformed_output_fails_after_one_retry(seeded_store, approved):
    synthesizer, client = _synthesizer(seeded_store, "malformed")

    with pytest.raises(GenerationParseError):
        await synthesizer.generate_course()

    assert len(client.calls) == 2
    async with seeded_store.transaction() as catalog:
        assert await catalog.courses.count() == 0
        still_approved = await catalog.impact_reports.find_all(status="approved")
    assert len(still_approved) == 2


async def test_truncated_decks_are_repaired(seeded_store, approved):
    synthesizer, _ = _synthesizer(seeded_store, "truncated")

    result = await synthesizer.generate_course()

    for lesson in result.lessons:
        assert lesson.slide_count == 4
        assert lesson.slides[-1].type == "screenshot"
        assert lesson.companion_doc == REPAIRED_COMPANION_DOC


async def test_empty_plan_is_a_parse_error(seeded_store, approved):
    synthesizer, _ = _synthesizer(seeded_store, "empty_plan")

    with pytest.raises(GenerationParseError, match="no lessons"):
        await synthesizer.generate_course()


async def test_requires_approved_reports(seeded_store, reports):
    synthesizer, client = _synthesizer(seeded_store)

    with pytest.raises(BadRequestError, match="not approved"):
        await synthesizer.generate_course([reports[0].id])
    with pytest.raises(BadRequestError, match="No approved impact reports"):
        await synthesizer.generate_course()
    with pytest.raises(BadRequestError):
        await synthesizer.generate_course([])
    assert client.calls == []


async def test_unknown_report_id(seeded_store, approved):
    synthesizer, _ = _synthesizer(seeded_store)
    with pytest.raises(NotFoundError):
        await synthesizer.generate_course([approved[0].id, "missing"])


async def test_source_urls_deduplicated_in_order(seeded_store, approved):
    synthesizer, _ = _synthesizer(seeded_store)
    _, groups = await synthesizer._collect([report.id for report in approved])

    urls = source_urls_for(groups, "Claude")

    assert urls[0] == "https://www.anthropic.com/news/claude-ios"
    assert len(urls) == len(set(urls))
    assert "https://docs.anthropic.com/en/release-notes/overview" in urls
    assert source_urls_for(groups, "Sora") == []


async def test_failed_course_insert_leaves_no_lessons_and_reports_approved(seeded_store, approved, monkeypatch):
    async with seeded_store.transaction() as catalog:
        lessons_before = sum((await catalog.lessons.count_by_level()).values())

    async def fail_create(self, data):
        raise RuntimeError("course insert failed")

    monkeypatch.setattr(CourseRepository, "create", fail_create)
    synthesizer, client = _synthesizer(seeded_store)

    with pytest.raises(RuntimeError, match="course insert failed"):
        await synthesizer.generate_course([report.id for report in approved])

    async with seeded_store.transaction() as catalog:
        lessons_after = sum((await catalog.lessons.count_by_level()).values())
        stored = [await catalog.impact_reports.get(report.id) for report in approved]
        course_trail = await catalog.audit_logs.find_all(entity_type="course")

    # generation itself ran; only the final write failed
    assert len(client.calls) == 3
    assert lessons_after == lessons_before
    assert all(report.status == ReportStatus.APPROVED for report in stored)
    assert course_trail == []
