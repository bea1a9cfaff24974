"""Per-entity repositories over one AsyncSession.

Repositories flush but never commit; the surrounding CatalogStore.transaction()
owns commit/rollback so multi-entity writes (report + processed flag + audit
row) land atomically. Every mutation of a mapping rule or impact report appends
exactly one audit row.
"""

from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import String, cast, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from curriculum_ops.core.exceptions import BadRequestError, ConflictError, NotFoundError
from curriculum_ops.db.models import (
    AuditLog,
    Course,
    CourseLesson,
    ImpactReport,
    Lesson,
    MappingRule,
    Provider,
    Update,
)
from curriculum_ops.domain.recommendations import RecommendedAction
from curriculum_ops.domain.review import ReportStatus, audit_action_for_status
from curriculum_ops.domain.severity import Severity
from curriculum_ops.schemas.catalog import (
    LESSON_LEVELS,
    AuditLogRecord,
    CourseCreate,
    CourseRecord,
    ImpactReportCreate,
    ImpactReportRecord,
    LessonCreate,
    LessonRecord,
    MappingRuleChanges,
    MappingRuleCreate,
    MappingRuleRecord,
    PositionedLesson,
    ProviderCreate,
    ProviderRecord,
    ReportStats,
    UpdateCreate,
    UpdateRecord,
)

logger = structlog.get_logger(__name__)

AUDIT_LOG_DEFAULT_LIMIT = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AuditLogRepository:
    """Append-only audit trail. Entries are never updated or deleted."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(
        self,
        entity_type: str,
        entity_id: str,
        action: str,
        actor: str,
        new_value: Any | None = None,
        previous_value: Any | None = None,
    ) -> AuditLogRecord:
        entry = AuditLog(
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            previous_value=previous_value,
            new_value=new_value,
            actor=actor,
        )
        self.session.add(entry)
        await self.session.flush()
        return AuditLogRecord.model_validate(entry)

    async def for_entity(self, entity_type: str, entity_id: str) -> list[AuditLogRecord]:
        result = await self.session.execute(
            select(AuditLog)
            .where(AuditLog.entity_type == entity_type, AuditLog.entity_id == entity_id)
            .order_by(AuditLog.id.desc())
        )
        return [AuditLogRecord.model_validate(row) for row in result.scalars()]

    async def find_all(
        self,
        entity_type: str | None = None,
        action: str | None = None,
        limit: int = AUDIT_LOG_DEFAULT_LIMIT,
    ) -> list[AuditLogRecord]:
        query = select(AuditLog)
        if entity_type:
            query = query.where(AuditLog.entity_type == entity_type)
        if action:
            query = query.where(AuditLog.action == action)
        result = await self.session.execute(query.order_by(AuditLog.id.desc()).limit(limit))
        return [AuditLogRecord.model_validate(row) for row in result.scalars()]


class ProviderRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: ProviderCreate) -> ProviderRecord:
        provider = Provider(**data.model_dump())
        self.session.add(provider)
        await self.session.flush()
        return ProviderRecord.model_validate(provider)

    async def upsert(self, data: ProviderCreate) -> ProviderRecord:
        """Idempotent create keyed by name; an existing provider is returned unchanged."""
        existing = await self.get_by_name(data.name)
        if existing is not None:
            return existing
        return await self.create(data)

    async def get(self, provider_id: str) -> ProviderRecord | None:
        provider = await self.session.get(Provider, provider_id)
        return ProviderRecord.model_validate(provider) if provider else None

    async def get_by_name(self, name: str) -> ProviderRecord | None:
        result = await self.session.execute(select(Provider).where(Provider.name == name))
        provider = result.scalar_one_or_none()
        return ProviderRecord.model_validate(provider) if provider else None

    async def find_all(self) -> list[ProviderRecord]:
        result = await self.session.execute(select(Provider).order_by(Provider.name))
        return [ProviderRecord.model_validate(row) for row in result.scalars()]

    async def count(self) -> int:
        return await self.session.scalar(select(func.count()).select_from(Provider)) or 0


class LessonRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: LessonCreate) -> LessonRecord:
        lesson = Lesson(**data.model_dump())
        self.session.add(lesson)
        await self.session.flush()
        return LessonRecord.model_validate(lesson)

    async def get(self, lesson_id: str) -> LessonRecord | None:
        lesson = await self.session.get(Lesson, lesson_id)
        return LessonRecord.model_validate(lesson) if lesson else None

    async def get_by_title(self, title: str) -> LessonRecord | None:
        result = await self.session.execute(select(Lesson).where(Lesson.title == title).limit(1))
        lesson = result.scalar_one_or_none()
        return LessonRecord.model_validate(lesson) if lesson else None

    async def find_all(self, level: str | None = None, provider_name: str | None = None) -> list[LessonRecord]:
        query = select(Lesson)
        if level:
            query = query.where(Lesson.level == level)
        if provider_name:
            query = query.where(Lesson.provider_name == provider_name)
        result = await self.session.execute(query.order_by(Lesson.title))
        return [LessonRecord.model_validate(row) for row in result.scalars()]

    async def search(self, keyword: str) -> list[LessonRecord]:
        """Case-insensitive free-text search over title, objective, key topics and provider."""
        if not keyword:
            return []
        result = await self.session.execute(
            select(Lesson)
            .where(
                or_(
                    Lesson.title.icontains(keyword, autoescape=True),
                    Lesson.objective.icontains(keyword, autoescape=True),
                    cast(Lesson.key_topics, String).icontains(keyword, autoescape=True),
                    Lesson.provider_name.icontains(keyword, autoescape=True),
                )
            )
            .order_by(Lesson.title)
        )
        return [LessonRecord.model_validate(row) for row in result.scalars()]

    async def count_by_level(self) -> dict[str, int]:
        result = await self.session.execute(select(Lesson.level, func.count()).group_by(Lesson.level))
        counts = {level: 0 for level in LESSON_LEVELS}
        counts.update({level: count for level, count in result.all()})
        return counts


class CourseRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: CourseCreate) -> CourseRecord:
        """Create a course and its position join rows in the same flush.

        Raises:
            BadRequestError: A lesson id is repeated
            NotFoundError: A lesson id does not exist
        """
        if len(set(data.lesson_ids)) != len(data.lesson_ids):
            raise BadRequestError("Course lesson_ids must not repeat a lesson")
        for lesson_id in data.lesson_ids:
            if await self.session.get(Lesson, lesson_id) is None:
                raise NotFoundError("Lesson", lesson_id)

        course = Course(
            name=data.name,
            track=data.track,
            level=data.level,
            lesson_ids=list(data.lesson_ids),
            lesson_count=len(data.lesson_ids),
        )
        self.session.add(course)
        await self.session.flush()

        for position, lesson_id in enumerate(data.lesson_ids, start=1):
            self.session.add(CourseLesson(course_id=course.id, lesson_id=lesson_id, position=position))
        await self.session.flush()
        return CourseRecord.model_validate(course)

    async def get(self, course_id: str) -> CourseRecord | None:
        course = await self.session.get(Course, course_id)
        return CourseRecord.model_validate(course) if course else None

    async def get_by_name(self, name: str) -> CourseRecord | None:
        result = await self.session.execute(select(Course).where(Course.name == name).limit(1))
        course = result.scalar_one_or_none()
        return CourseRecord.model_validate(course) if course else None

    async def find_all(self, track: str | None = None, level: str | None = None) -> list[CourseRecord]:
        query = select(Course)
        if track:
            query = query.where(Course.track == track)
        if level:
            query = query.where(Course.level == level)
        result = await self.session.execute(query.order_by(Course.track, Course.level))
        return [CourseRecord.model_validate(row) for row in result.scalars()]

    async def lessons_in_order(self, course_id: str) -> list[PositionedLesson]:
        """Lessons of a course ordered by join-table position."""
        if await self.session.get(Course, course_id) is None:
            raise NotFoundError("Course", course_id)
        result = await self.session.execute(
            select(Lesson, CourseLesson.position)
            .join(CourseLesson, CourseLesson.lesson_id == Lesson.id)
            .where(CourseLesson.course_id == course_id)
            .order_by(CourseLesson.position.asc())
        )
        return [
            PositionedLesson(**LessonRecord.model_validate(lesson).model_dump(), position=position)
            for lesson, position in result.all()
        ]

    async def count(self) -> int:
        return await self.session.scalar(select(func.count()).select_from(Course)) or 0


class MappingRuleRepository:
    """Versioned mapping rules: updates append a new row and retire the old one."""

    ENTITY_TYPE = "mapping_rule"

    def __init__(self, session: AsyncSession, audit: AuditLogRepository):
        self.session = session
        self.audit = audit

    async def create(self, data: MappingRuleCreate, actor: str) -> MappingRuleRecord:
        """Insert version 1 of a rule key.

        Raises:
            ConflictError: The key already has an active version (use update)
        """
        if await self._active_row(data.question_id, data.answer_value) is not None:
            raise ConflictError(
                f"Mapping rule for ({data.question_id}, {data.answer_value}) already exists; update it instead"
            )
        rule = MappingRule(**data.model_dump(), version=1, is_active=True, created_by=actor)
        self.session.add(rule)
        await self.session.flush()
        record = MappingRuleRecord.model_validate(rule)

        await self.audit.append(
            entity_type=self.ENTITY_TYPE,
            entity_id=record.id,
            action="create",
            actor=actor,
            new_value=record.snapshot(),
        )
        return record

    async def get(self, rule_id: str) -> MappingRuleRecord | None:
        rule = await self.session.get(MappingRule, rule_id)
        return MappingRuleRecord.model_validate(rule) if rule else None

    async def find_all(self, question_id: str | None = None, is_active: bool | None = None) -> list[MappingRuleRecord]:
        query = select(MappingRule)
        if question_id:
            query = query.where(MappingRule.question_id == question_id)
        if is_active is not None:
            query = query.where(MappingRule.is_active == is_active)
        result = await self.session.execute(query.order_by(MappingRule.question_id, MappingRule.priority.desc()))
        return [MappingRuleRecord.model_validate(row) for row in result.scalars()]

    async def update(self, rule_id: str, changes: MappingRuleChanges, actor: str) -> MappingRuleRecord:
        """Supersede a rule with a new version carrying the merged fields.

        Raises:
            NotFoundError: No rule with this id
            ConflictError: The rule is not the active version of its key
        """
        existing = await self.session.get(MappingRule, rule_id)
        if existing is None:
            raise NotFoundError("Mapping rule", rule_id)
        if not existing.is_active:
            raise ConflictError(f"Mapping rule {rule_id} is not the active version of its key")

        previous = MappingRuleRecord.model_validate(existing)
        merged = previous.model_dump(include={"question_text", "recommended_course", "recommended_track", "priority"})
        updates = changes.model_dump(exclude_unset=True)
        # recommendations may be cleared to null; priority always keeps a value
        if updates.get("priority", 0) is None:
            del updates["priority"]
        merged.update(updates)

        existing.is_active = False
        await self.session.flush()

        rule = MappingRule(
            question_id=previous.question_id,
            answer_value=previous.answer_value,
            version=previous.version + 1,
            is_active=True,
            created_by=actor,
            **merged,
        )
        self.session.add(rule)
        await self.session.flush()
        record = MappingRuleRecord.model_validate(rule)

        await self.audit.append(
            entity_type=self.ENTITY_TYPE,
            entity_id=record.id,
            action="update",
            actor=actor,
            previous_value=previous.snapshot(),
            new_value=record.snapshot(),
        )
        logger.info(
            "mapping_rule_versioned",
            question_id=record.question_id,
            answer_value=record.answer_value,
            version=record.version,
            actor=actor,
        )
        return record

    async def version_history(self, question_id: str, answer_value: str) -> list[MappingRuleRecord]:
        """All versions of a key, newest first."""
        result = await self.session.execute(
            select(MappingRule)
            .where(MappingRule.question_id == question_id, MappingRule.answer_value == answer_value)
            .order_by(MappingRule.version.desc())
        )
        return [MappingRuleRecord.model_validate(row) for row in result.scalars()]

    async def get_active(self, question_id: str, answer_value: str) -> MappingRuleRecord | None:
        rule = await self._active_row(question_id, answer_value)
        return MappingRuleRecord.model_validate(rule) if rule else None

    async def count_active(self) -> int:
        return await self.session.scalar(
            select(func.count()).select_from(MappingRule).where(MappingRule.is_active.is_(True))
        ) or 0

    async def _active_row(self, question_id: str, answer_value: str) -> MappingRule | None:
        result = await self.session.execute(
            select(MappingRule).where(
                MappingRule.question_id == question_id,
                MappingRule.answer_value == answer_value,
                MappingRule.is_active.is_(True),
            )
        )
        return result.scalar_one_or_none()


class UpdateRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: UpdateCreate) -> UpdateRecord:
        """Idempotent create keyed by source_url.

        Re-ingesting a known source_url returns the stored row unchanged.
        """
        existing = await self.get_by_source_url(data.source_url)
        if existing is not None:
            return existing

        row = Update(**data.model_dump(exclude={"doc_urls"}), doc_urls=[doc.model_dump() for doc in data.doc_urls])
        self.session.add(row)
        await self.session.flush()
        return UpdateRecord.model_validate(row)

    async def get(self, update_id: str) -> UpdateRecord | None:
        row = await self.session.get(Update, update_id)
        return UpdateRecord.model_validate(row) if row else None

    async def get_by_source_url(self, source_url: str) -> UpdateRecord | None:
        result = await self.session.execute(select(Update).where(Update.source_url == source_url))
        row = result.scalar_one_or_none()
        return UpdateRecord.model_validate(row) if row else None

    async def find_all(
        self,
        provider: str | None = None,
        processed: bool | None = None,
        limit: int | None = None,
    ) -> list[UpdateRecord]:
        """Updates, most recently published (then fetched) first."""
        query = select(Update)
        if provider:
            query = query.where(Update.provider == provider)
        if processed is not None:
            query = query.where(Update.processed == processed)
        query = query.order_by(Update.published_at.desc(), Update.fetched_at.desc())
        if limit:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return [UpdateRecord.model_validate(row) for row in result.scalars()]

    async def mark_processed(self, update_id: str) -> None:
        result = await self.session.execute(update(Update).where(Update.id == update_id).values(processed=True))
        if result.rowcount == 0:
            raise NotFoundError("Update", update_id)

    async def counts(self) -> dict[str, int]:
        total = await self.session.scalar(select(func.count()).select_from(Update)) or 0
        unprocessed = await self.session.scalar(
            select(func.count()).select_from(Update).where(Update.processed.is_(False))
        ) or 0
        return {"count": total, "unprocessed": unprocessed}


class ImpactReportRepository:
    ENTITY_TYPE = "impact_report"

    def __init__(self, session: AsyncSession, audit: AuditLogRepository):
        self.session = session
        self.audit = audit

    async def create(self, data: ImpactReportCreate, actor: str) -> ImpactReportRecord:
        """Insert a report with status ``new``.

        Raises:
            ConflictError: A report already exists for this update
        """
        if await self.get_by_update_id(data.update_id) is not None:
            raise ConflictError(f"Impact report already exists for update {data.update_id}")

        report = ImpactReport(
            update_id=data.update_id,
            provider=data.provider,
            severity=data.severity.value,
            recommended_action=data.recommended_action.value,
            affected_lessons=[lesson.model_dump() for lesson in data.affected_lessons],
            mapping_suggestions=[hint.model_dump() for hint in data.mapping_suggestions],
            rationale=data.rationale,
            citations=[citation.model_dump() for citation in data.citations],
            status=ReportStatus.NEW.value,
        )
        self.session.add(report)
        await self.session.flush()
        record = ImpactReportRecord.model_validate(report)

        await self.audit.append(
            entity_type=self.ENTITY_TYPE,
            entity_id=record.id,
            action="create",
            actor=actor,
            new_value={
                "update_id": record.update_id,
                "status": record.status.value,
                "severity": record.severity.value,
                "recommended_action": record.recommended_action.value,
            },
        )
        return record

    async def get(self, report_id: str) -> ImpactReportRecord | None:
        report = await self.session.get(ImpactReport, report_id)
        return ImpactReportRecord.model_validate(report) if report else None

    async def get_by_update_id(self, update_id: str) -> ImpactReportRecord | None:
        result = await self.session.execute(select(ImpactReport).where(ImpactReport.update_id == update_id))
        report = result.scalar_one_or_none()
        return ImpactReportRecord.model_validate(report) if report else None

    async def find_all(
        self,
        status: str | None = None,
        provider: str | None = None,
        recommended_action: str | None = None,
    ) -> list[ImpactReportRecord]:
        query = select(ImpactReport)
        if status:
            query = query.where(ImpactReport.status == status)
        if provider:
            query = query.where(ImpactReport.provider == provider)
        if recommended_action:
            query = query.where(ImpactReport.recommended_action == recommended_action)
        result = await self.session.execute(query.order_by(ImpactReport.created_at.desc()))
        return [ImpactReportRecord.model_validate(row) for row in result.scalars()]

    async def update_status(
        self,
        report_id: str,
        status: ReportStatus,
        actor: str,
        audit_action: str | None = None,
        audit_detail: dict[str, Any] | None = None,
    ) -> ImpactReportRecord:
        """Set status + reviewer fields and append one audit row.

        Args:
            report_id: Report to change
            status: Target status
            actor: Who made the change (recorded as reviewed_by)
            audit_action: Override for the derived approve/reject/update action
            audit_detail: Extra fields merged into the audit new_value

        Raises:
            NotFoundError: No report with this id
        """
        report = await self._load(report_id)
        previous_status = report.status
        timestamp = _now()

        report.status = status.value
        report.reviewed_by = actor
        report.reviewed_at = timestamp
        report.updated_at = timestamp
        await self.session.flush()

        await self.audit.append(
            entity_type=self.ENTITY_TYPE,
            entity_id=report_id,
            action=audit_action or audit_action_for_status(status),
            actor=actor,
            previous_value={"status": previous_status},
            new_value={"status": status.value, **(audit_detail or {})},
        )
        return ImpactReportRecord.model_validate(report)

    async def assign(self, report_id: str, assignee: str, actor: str) -> ImpactReportRecord:
        """Move a report to ``assigned`` and record the assignee.

        Raises:
            NotFoundError: No report with this id
        """
        report = await self._load(report_id)
        previous_assignee = report.assignee

        report.status = ReportStatus.ASSIGNED.value
        report.assignee = assignee
        report.updated_at = _now()
        await self.session.flush()

        await self.audit.append(
            entity_type=self.ENTITY_TYPE,
            entity_id=report_id,
            action="assign",
            actor=actor,
            previous_value={"assignee": previous_assignee},
            new_value={"assignee": assignee},
        )
        return ImpactReportRecord.model_validate(report)

    async def stats(self) -> ReportStats:
        """Report counts by status, severity and action; every bucket is present."""
        by_status = {status.value: 0 for status in ReportStatus}
        by_severity = {severity.value: 0 for severity in Severity}
        by_action = {action.value: 0 for action in RecommendedAction}

        for column, buckets in (
            (ImpactReport.status, by_status),
            (ImpactReport.severity, by_severity),
            (ImpactReport.recommended_action, by_action),
        ):
            result = await self.session.execute(select(column, func.count()).group_by(column))
            buckets.update({value: count for value, count in result.all()})

        return ReportStats(
            total=sum(by_status.values()),
            by_status=by_status,
            by_severity=by_severity,
            by_action=by_action,
        )

    async def _load(self, report_id: str) -> ImpactReport:
        report = await self.session.get(ImpactReport, report_id)
        if report is None:
            raise NotFoundError("Impact report", report_id)
        return report
