"""CourseSynthesizer: approved impact reports -> generated lessons + course.

Flow:
1. Resolve the approved reports (explicit ids or every approved report)
2. Group by provider with the underlying updates (deduplicated)
3. Phase 1: course plan from the generation collaborator
4. Phase 2: one slide deck per planned lesson, with a fixed delay between calls
5. Persist lessons, course, join rows, report transitions and audit rows in one transaction
"""

from datetime import UTC, datetime
from typing import Literal

import structlog

from curriculum_ops.core.exceptions import BadRequestError, GenerationParseError, NotFoundError
from curriculum_ops.domain.review import ReportStatus
from curriculum_ops.generation.generator import CourseContentGenerator
from curriculum_ops.schemas.catalog import CourseCreate, ImpactReportRecord, LessonCreate, UpdateRecord
from curriculum_ops.schemas.generation import (
    CourseGenerationResult,
    CoursePlan,
    GeneratedCourseSummary,
    GeneratedLesson,
    LessonPlan,
    SlideDocument,
)
from curriculum_ops.services.review_service import ReviewService
from curriculum_ops.store import CatalogStore

logger = structlog.get_logger(__name__)

SYNTHESIZER_ACTOR = "course-generator"
ALL_APPROVED = "all_approved"

ReportGroups = dict[str, tuple[list[ImpactReportRecord], list[UpdateRecord]]]


def source_urls_for(groups: ReportGroups, provider: str) -> list[str]:
    """Unique documentation URLs for a provider: update sources, doc links, then citations."""
    reports, updates = groups.get(provider, ([], []))
    urls: list[str] = []
    for update in updates:
        urls.append(update.source_url)
        urls.extend(doc.url for doc in update.doc_urls)
    for report in reports:
        urls.extend(citation.url for citation in report.citations)
    return list(dict.fromkeys(url for url in urls if url))


class CourseSynthesizer:
    """Builds a course from approved impact reports via the generation collaborator."""

    def __init__(
        self,
        store: CatalogStore,
        generator: CourseContentGenerator,
        review: ReviewService | None = None,
    ):
        self.store = store
        self.generator = generator
        self.review = review or ReviewService(store)

    async def generate_course(
        self,
        report_ids: list[str] | Literal["all_approved"] = ALL_APPROVED,
        actor: str = SYNTHESIZER_ACTOR,
    ) -> CourseGenerationResult:
        """Generate and persist a course from approved reports.

        Raises:
            NotFoundError: An explicit report id does not exist
            BadRequestError: A selected report is not approved, or nothing is selected
            GenerationParseError: Generation output unusable after one retry, or a plan with no lessons
            ConfigError: The generation client has no credential
        """
        reports, groups = await self._collect(report_ids)

        plan = await self.generator.generate_course_plan(groups)
        if not plan.lessons:
            raise GenerationParseError("Course architecture returned no lessons")

        generated: list[tuple[LessonPlan, SlideDocument]] = []
        for index, lesson_plan in enumerate(plan.lessons):
            if index > 0:
                await self.generator.pause()
            logger.info(
                "lesson_generation_started",
                position=index + 1,
                total=len(plan.lessons),
                title=lesson_plan.title,
            )
            document = await self.generator.generate_lesson(lesson_plan, source_urls_for(groups, lesson_plan.provider))
            document.metadata = {
                "generatedAt": datetime.now(UTC).isoformat(),
                "provider": lesson_plan.provider,
                "level": lesson_plan.level,
                "audience": "Professional learners",
                "slideCount": len(document.slides),
                "scenario": lesson_plan.scenario,
                "generatedFromCourse": True,
            }
            generated.append((lesson_plan, document))

        return await self._persist(plan, generated, reports, list(groups), actor)

    async def _collect(self, report_ids: list[str] | str) -> tuple[list[ImpactReportRecord], ReportGroups]:
        async with self.store.transaction() as catalog:
            if report_ids == ALL_APPROVED:
                reports = await catalog.impact_reports.find_all(status=ReportStatus.APPROVED.value)
            elif isinstance(report_ids, str):
                raise BadRequestError(f"report_ids must be a list of ids or '{ALL_APPROVED}'")
            else:
                reports = []
                for report_id in dict.fromkeys(report_ids):
                    report = await catalog.impact_reports.get(report_id)
                    if report is None:
                        raise NotFoundError("Impact report", report_id)
                    if report.status != ReportStatus.APPROVED:
                        raise BadRequestError(f"Report {report_id} is not approved (status: {report.status.value})")
                    reports.append(report)

            if not reports:
                raise BadRequestError(
                    "No approved impact reports found. Approve at least one report before generating a course."
                )

            groups: ReportGroups = {}
            for report in reports:
                provider_reports, provider_updates = groups.setdefault(report.provider, ([], []))
                provider_reports.append(report)
                update = await catalog.updates.get(report.update_id)
                if update is not None and all(existing.id != update.id for existing in provider_updates):
                    provider_updates.append(update)

        return reports, groups

    async def _persist(
        self,
        plan: CoursePlan,
        generated: list[tuple[LessonPlan, SlideDocument]],
        reports: list[ImpactReportRecord],
        providers: list[str],
        actor: str,
    ) -> CourseGenerationResult:
        track = plan.track or "everyone"
        lessons: list[GeneratedLesson] = []

        async with self.store.transaction() as catalog:
            lesson_ids = []
            for lesson_plan, document in generated:
                provider = await catalog.providers.get_by_name(lesson_plan.provider)
                lesson = await catalog.lessons.create(
                    LessonCreate(
                        title=document.title or lesson_plan.title,
                        provider_id=provider.id if provider else None,
                        provider_name=lesson_plan.provider,
                        level=lesson_plan.level,
                        objective="; ".join(lesson_plan.objectives) or document.companion_doc[:200],
                        key_topics=lesson_plan.key_topics,
                        practice_assessment={
                            "scenario": lesson_plan.scenario,
                            "slideCount": len(document.slides),
                            "generatedFromCourse": True,
                        },
                    )
                )
                lesson_ids.append(lesson.id)
                lessons.append(
                    GeneratedLesson(
                        id=lesson.id,
                        title=lesson.title,
                        provider=lesson.provider_name,
                        level=lesson.level,
                        slide_count=len(document.slides),
                        slides=document.slides,
                        companion_doc=document.companion_doc,
                        metadata=document.metadata,
                    )
                )

            course = await catalog.courses.create(
                CourseCreate(name=plan.course_name, track=track, level=plan.level, lesson_ids=lesson_ids)
            )

            for report in reports:
                await self.review.transition(
                    catalog,
                    report.id,
                    ReportStatus.DONE,
                    actor,
                    audit_action="course_generated",
                    audit_detail={"course_id": course.id, "course_name": course.name},
                )

            await catalog.record_audit(
                "course",
                course.id,
                "auto_generated",
                actor,
                new_value={
                    "name": course.name,
                    "lessonCount": len(lesson_ids),
                    "reportIds": [report.id for report in reports],
                },
            )

        logger.info(
            "course_generated",
            course_id=course.id,
            course_name=course.name,
            lessons=len(lesson_ids),
            reports=len(reports),
        )
        return CourseGenerationResult(
            course=GeneratedCourseSummary(
                id=course.id,
                name=course.name,
                description=plan.course_description,
                track=course.track,
                level=course.level,
                lesson_count=course.lesson_count,
            ),
            lessons=lessons,
            reports_processed=len(reports),
            providers_included=providers,
        )
