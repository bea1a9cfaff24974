"""Integration tests for the catalog store repositories."""

import pytest

from curriculum_ops.core.exceptions import BadRequestError, ConflictError, NotFoundError
from curriculum_ops.db.seed import PROVIDERS, seed_providers
from curriculum_ops.domain.recommendations import RecommendedAction
from curriculum_ops.domain.review import ReportStatus
from curriculum_ops.domain.severity import Severity
from curriculum_ops.schemas.catalog import (
    CourseCreate,
    ImpactReportCreate,
    LessonCreate,
    UpdateCreate,
)
from curriculum_ops.store import CatalogStore

pytestmark = pytest.mark.integration


def _report(update_id: str, **overrides) -> ImpactReportCreate:
    data = {
        "update_id": update_id,
        "provider": "Claude",
        "severity": Severity.HIGH,
        "recommended_action": RecommendedAction.CREATE_LESSON,
        "rationale": "New capability",
        "citations": [{"text": "Announcement", "url": "https://example.com/a"}],
    }
    data.update(overrides)
    return ImpactReportCreate(**data)


# ==================== LIFECYCLE ====================


async def test_session_factory_requires_init(tmp_path):
    store = CatalogStore(f"sqlite+aiosqlite:///{tmp_path / 'lazy.db'}")
    with pytest.raises(RuntimeError):
        store.session_factory


async def test_init_is_idempotent_and_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "catalog.db"
    async with CatalogStore(f"sqlite+aiosqlite:///{path}") as store:
        await store.init()
        async with store.transaction() as catalog:
            assert await catalog.providers.count() == 0
    assert path.exists()


async def test_transaction_rolls_back_on_error(store):
    with pytest.raises(RuntimeError):
        async with store.transaction() as catalog:
            await catalog.lessons.create(LessonCreate(title="Temporary"))
            raise RuntimeError("abort")

    async with store.transaction() as catalog:
        assert await catalog.lessons.get_by_title("Temporary") is None


# ==================== PROVIDERS / LESSONS ====================


async def test_seed_providers_is_idempotent(store):
    assert await seed_providers(store) == len(PROVIDERS)
    assert await seed_providers(store) == len(PROVIDERS)

    async with store.transaction() as catalog:
        names = [provider.name for provider in await catalog.providers.find_all()]
    assert names == sorted(names)
    assert "Claude" in names


async def test_lesson_filters_and_search(seeded_store):
    async with seeded_store.transaction() as catalog:
        claude = await catalog.lessons.find_all(provider_name="Claude")
        beginners = await catalog.lessons.find_all(level="beginner")
        by_topic = await catalog.lessons.search("REFACTORING")
        by_provider = await catalog.lessons.search("midjourney")
        nothing = await catalog.lessons.search("")

    assert [lesson.title for lesson in claude] == ["Claude for Writing Assistance", "Coding with Claude Sonnet"]
    assert {lesson.level for lesson in beginners} == {"beginner"}
    assert [lesson.title for lesson in by_topic] == ["Coding with Claude Sonnet"]
    assert [lesson.title for lesson in by_provider] == ["MidJourney Image Prompting"]
    assert nothing == []


async def test_search_matches_non_ascii_key_topics(store):
    async with store.transaction() as catalog:
        await catalog.lessons.create(
            LessonCreate(title="Menu Design", key_topics=["Café signage", "Prix fixe résumé"])
        )

    async with store.transaction() as catalog:
        found = await catalog.lessons.search("résumé")

    assert [lesson.title for lesson in found] == ["Menu Design"]


async def test_lesson_level_is_validated():
    with pytest.raises(ValueError):
        LessonCreate(title="Bad", level="expert")


# ==================== COURSES ====================


async def test_course_lessons_come_back_in_position_order(seeded_store):
    async with seeded_store.transaction() as catalog:
        first = await catalog.lessons.get_by_title("MidJourney Image Prompting")
        second = await catalog.lessons.get_by_title("ChatGPT Custom GPTs")
        third = await catalog.lessons.get_by_title("Automating Reports with n8n")
        course = await catalog.courses.create(
            CourseCreate(name="Creative Toolkit", track="creative", lesson_ids=[first.id, second.id, third.id])
        )

    async with seeded_store.transaction() as catalog:
        ordered = await catalog.courses.lessons_in_order(course.id)
        stored = await catalog.courses.get(course.id)

    assert [lesson.id for lesson in ordered] == [first.id, second.id, third.id]
    assert [lesson.position for lesson in ordered] == [1, 2, 3]
    assert stored.lesson_ids == [first.id, second.id, third.id]
    assert stored.lesson_count == 3


async def test_course_rejects_unknown_or_repeated_lessons(seeded_store):
    async with seeded_store.transaction() as catalog:
        lesson = await catalog.lessons.get_by_title("ChatGPT Custom GPTs")

    with pytest.raises(NotFoundError):
        async with seeded_store.transaction() as catalog:
            await catalog.courses.create(CourseCreate(name="Broken", lesson_ids=[lesson.id, "missing"]))

    with pytest.raises(BadRequestError):
        async with seeded_store.transaction() as catalog:
            await catalog.courses.create(CourseCreate(name="Twice", lesson_ids=[lesson.id, lesson.id]))

    async with seeded_store.transaction() as catalog:
        assert await catalog.courses.count() == 0


async def test_lessons_in_order_unknown_course(store):
    with pytest.raises(NotFoundError):
        async with store.transaction() as catalog:
            await catalog.courses.lessons_in_order("missing")


# ==================== UPDATES ====================


async def test_reingesting_source_url_returns_original_row(store):
    async with store.transaction() as catalog:
        original = await catalog.updates.create(
            UpdateCreate(provider="Claude", title="Original title", source_url="https://example.com/news/1")
        )

    async with store.transaction() as catalog:
        again = await catalog.updates.create(
            UpdateCreate(provider="Claude", title="Different title", source_url="https://example.com/news/1")
        )
        total = (await catalog.updates.counts())["count"]

    assert again.id == original.id
    assert again.title == "Original title"
    assert total == 1


async def test_update_doc_urls_accept_plain_strings(store):
    async with store.transaction() as catalog:
        update = await catalog.updates.create(
            UpdateCreate(
                provider="Gemini",
                title="Docs",
                source_url="https://example.com/gemini",
                doc_urls=["https://ai.google.dev/docs", {"label": "Guide", "url": "https://example.com/guide"}],
            )
        )
    assert [doc.url for doc in update.doc_urls] == ["https://ai.google.dev/docs", "https://example.com/guide"]
    assert update.doc_urls[1].label == "Guide"


async def test_update_listing_and_processing(store, make_update):
    latest = await make_update(title="Latest")
    earlier = await make_update(title="Earlier", provider="Gemini")
    async with store.transaction() as catalog:
        ordered = await catalog.updates.find_all()
        await catalog.updates.mark_processed(latest.id)

    assert [update.id for update in ordered] == [latest.id, earlier.id]

    async with store.transaction() as catalog:
        pending = await catalog.updates.find_all(processed=False)
        gemini = await catalog.updates.find_all(provider="Gemini")
        counts = await catalog.updates.counts()

    assert [update.id for update in pending] == [earlier.id]
    assert [update.id for update in gemini] == [earlier.id]
    assert counts == {"count": 2, "unprocessed": 1}


async def test_mark_processed_unknown_update(store):
    with pytest.raises(NotFoundError):
        async with store.transaction() as catalog:
            await catalog.updates.mark_processed("missing")


# ==================== IMPACT REPORTS ====================


async def test_report_create_writes_audit_row(store, make_update):
    update = await make_update()
    async with store.transaction() as catalog:
        report = await catalog.impact_reports.create(_report(update.id), actor="impact-analyzer")
        trail = await catalog.audit_logs.for_entity("impact_report", report.id)

    assert report.status == ReportStatus.NEW
    assert report.citations[0].url == "https://example.com/a"
    assert len(trail) == 1
    assert trail[0].action == "create"
    assert trail[0].actor == "impact-analyzer"
    assert trail[0].new_value["status"] == "new"


async def test_one_report_per_update(store, make_update):
    update = await make_update()
    async with store.transaction() as catalog:
        await catalog.impact_reports.create(_report(update.id), actor="impact-analyzer")

    with pytest.raises(ConflictError):
        async with store.transaction() as catalog:
            await catalog.impact_reports.create(_report(update.id), actor="impact-analyzer")


async def test_status_change_records_before_and_after(store, make_update):
    update = await make_update()
    async with store.transaction() as catalog:
        report = await catalog.impact_reports.create(_report(update.id), actor="impact-analyzer")

    async with store.transaction() as catalog:
        approved = await catalog.impact_reports.update_status(report.id, ReportStatus.APPROVED, "alice")
        assigned = await catalog.impact_reports.assign(report.id, "bob", "alice")
        trail = await catalog.audit_logs.for_entity("impact_report", report.id)

    assert approved.reviewed_by == "alice"
    assert approved.reviewed_at is not None
    assert assigned.status == ReportStatus.ASSIGNED
    assert assigned.assignee == "bob"
    assert [entry.action for entry in trail] == ["assign", "approve", "create"]
    assert trail[1].previous_value == {"status": "new"}
    assert trail[1].new_value == {"status": "approved"}
    assert trail[0].previous_value == {"assignee": None}
    assert trail[0].new_value == {"assignee": "bob"}


async def test_report_stats_include_empty_buckets(store, make_update):
    first = await make_update()
    second = await make_update()
    async with store.transaction() as catalog:
        await catalog.impact_reports.create(_report(first.id), actor="impact-analyzer")
        await catalog.impact_reports.create(
            _report(second.id, severity=Severity.CRITICAL, recommended_action=RecommendedAction.UPDATE_MAPPING),
            actor="impact-analyzer",
        )
        stats = await catalog.impact_reports.stats()

    assert stats.total == 2
    assert stats.by_status == {"new": 2, "approved": 0, "rejected": 0, "assigned": 0, "done": 0}
    assert stats.by_severity["critical"] == 1
    assert stats.by_severity["info"] == 0
    assert stats.by_action["create_lesson"] == 1
    assert stats.by_action["no_action"] == 0


async def test_report_filters(store, make_update):
    first = await make_update()
    second = await make_update(provider="Sora")
    async with store.transaction() as catalog:
        await catalog.impact_reports.create(_report(first.id), actor="impact-analyzer")
        sora = await catalog.impact_reports.create(_report(second.id, provider="Sora"), actor="impact-analyzer")
        await catalog.impact_reports.update_status(sora.id, ReportStatus.REJECTED, "carol")

    async with store.transaction() as catalog:
        rejected = await catalog.impact_reports.find_all(status="rejected")
        by_provider = await catalog.impact_reports.find_all(provider="Claude")
        by_action = await catalog.impact_reports.find_all(recommended_action="update_lesson")

    assert [report.id for report in rejected] == [sora.id]
    assert [report.provider for report in by_provider] == ["Claude"]
    assert by_action == []


# ==================== AUDIT LOG / DASHBOARD ====================


async def test_audit_log_ids_increase_and_filter(store):
    async with store.transaction() as catalog:
        first = await catalog.record_audit("course", "c1", "auto_generated", "course-generator", new_value={"name": "A"})
        second = await catalog.record_audit("course", "c2", "auto_generated", "course-generator")
        await catalog.record_audit("mapping_rule", "r1", "create", "alice")
        courses = await catalog.audit_logs.find_all(entity_type="course")
        creates = await catalog.audit_logs.find_all(action="create")
        limited = await catalog.audit_logs.find_all(limit=1)

    assert second.id > first.id
    assert [entry.entity_id for entry in courses] == ["c2", "c1"]
    assert [entry.entity_id for entry in creates] == ["r1"]
    assert len(limited) == 1


async def test_dashboard_stats(seeded_store, make_update):
    await make_update()
    async with seeded_store.transaction() as catalog:
        stats = await catalog.dashboard_stats()

    assert stats["providers"]["count"] == len(PROVIDERS)
    assert stats["lessons"] == {"count": 5, "by_level": {"beginner": 2, "intermediate": 2, "advanced": 1}}
    assert stats["courses"]["count"] == 0
    assert stats["mapping_rules"]["count"] == 0
    assert stats["updates"] == {"count": 1, "unprocessed": 1}
    assert stats["impact_reports"]["total"] == 0
