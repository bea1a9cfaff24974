"""ImpactAnalyzer: turns a raw provider update into a scored, auditable impact report."""

from dataclasses import asdict, dataclass, field

import structlog

from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.domain.matching import (
    KEYWORD_MATCH_SCORE,
    RELEVANCE_THRESHOLD,
    LessonMatch,
    keyword_match_changes,
    mentioned_providers,
    rank_matches,
    relevance_score,
    suggested_changes,
)
from curriculum_ops.domain.recommendations import (
    build_citations,
    compose_rationale,
    determine_action,
    mapping_suggestions,
)
from curriculum_ops.domain.severity import Severity, classify_severity, update_text
from curriculum_ops.schemas.catalog import (
    AffectedLesson,
    Citation,
    ImpactReportCreate,
    ImpactReportRecord,
    MappingSuggestion,
    ReportStats,
    UpdateRecord,
)
from curriculum_ops.store import CatalogSession, CatalogStore

logger = structlog.get_logger(__name__)

ANALYZER_ACTOR = "impact-analyzer"


@dataclass
class AnalysisFailure:
    update_id: str
    error: str


@dataclass
class BatchAnalysisResult:
    """Outcome of draining the unprocessed queue. One failure never aborts the batch."""

    reports: list[ImpactReportRecord] = field(default_factory=list)
    failures: list[AnalysisFailure] = field(default_factory=list)


class ImpactAnalyzer:
    """Service layer for update analysis.

    Every analysis runs in a single store transaction: the report, its
    ``create`` audit row and the update's processed flag commit together or
    not at all.
    """

    def __init__(self, store: CatalogStore):
        self.store = store

    async def analyze(self, update: UpdateRecord) -> ImpactReportRecord:
        """Analyze one update and persist its impact report.

        Idempotent per update: when a report already exists for ``update.id``
        it is returned unchanged and the update is marked processed.

        Raises:
            NotFoundError: The update is not in the store
        """
        async with self.store.transaction() as catalog:
            return await self._analyze(catalog, update)

    async def analyze_by_id(self, update_id: str) -> ImpactReportRecord:
        async with self.store.transaction() as catalog:
            update = await catalog.updates.get(update_id)
            if update is None:
                raise NotFoundError("Update", update_id)
            return await self._analyze(catalog, update)

    async def analyze_all_unprocessed(self) -> BatchAnalysisResult:
        """Analyze every unprocessed update, newest first, each in its own transaction."""
        async with self.store.transaction() as catalog:
            pending = await catalog.updates.find_all(processed=False)

        logger.info("batch_analysis_started", pending=len(pending))
        result = BatchAnalysisResult()
        for update in pending:
            try:
                result.reports.append(await self.analyze(update))
            except Exception as e:
                logger.error(
                    "update_analysis_failed",
                    update_id=update.id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                result.failures.append(AnalysisFailure(update_id=update.id, error=str(e)))

        logger.info("batch_analysis_complete", reports=len(result.reports), failures=len(result.failures))
        return result

    async def get_stats(self) -> ReportStats:
        async with self.store.transaction() as catalog:
            return await catalog.impact_reports.stats()

    async def find_affected_lessons(
        self,
        catalog: CatalogSession,
        update: UpdateRecord,
        severity: Severity | None = None,
    ) -> list[LessonMatch]:
        """Union of the provider-alias pass and the provider keyword search.

        Alias-pass lessons are scored by word overlap and kept only above the
        relevance threshold; keyword-only lessons get a fixed score. The first
        occurrence of a lesson wins. Result is ranked and capped.
        """
        text = update_text(update.title, update.summary, update.raw_text)
        severity = severity or classify_severity(text)
        matches: dict[str, LessonMatch] = {}

        for provider in mentioned_providers(text, update.provider):
            for lesson in await catalog.lessons.find_all(provider_name=provider):
                if lesson.id in matches:
                    continue
                score = relevance_score(text, lesson.match_text)
                if score > RELEVANCE_THRESHOLD:
                    matches[lesson.id] = LessonMatch(
                        lesson_id=lesson.id,
                        lesson_title=lesson.title,
                        relevance_score=score,
                        suggested_changes=suggested_changes(severity, update.title, lesson.title),
                    )

        for lesson in await catalog.lessons.search(update.provider):
            if lesson.id not in matches:
                matches[lesson.id] = LessonMatch(
                    lesson_id=lesson.id,
                    lesson_title=lesson.title,
                    relevance_score=KEYWORD_MATCH_SCORE,
                    suggested_changes=keyword_match_changes(update.title),
                )

        return rank_matches(list(matches.values()))

    async def _analyze(self, catalog: CatalogSession, update: UpdateRecord) -> ImpactReportRecord:
        existing = await catalog.impact_reports.get_by_update_id(update.id)
        if existing is not None:
            await catalog.updates.mark_processed(update.id)
            logger.info("update_already_analyzed", update_id=update.id, report_id=existing.id)
            return existing

        text = update_text(update.title, update.summary, update.raw_text)
        severity = classify_severity(text)
        affected = await self.find_affected_lessons(catalog, update, severity)
        action = determine_action(severity, len(affected))
        hints = mapping_suggestions(text, update.title)

        report = await catalog.impact_reports.create(
            ImpactReportCreate(
                update_id=update.id,
                provider=update.provider,
                severity=severity,
                recommended_action=action,
                affected_lessons=[AffectedLesson(**asdict(match)) for match in affected],
                mapping_suggestions=[MappingSuggestion(**asdict(hint)) for hint in hints],
                rationale=compose_rationale(
                    update.provider,
                    update.title,
                    severity,
                    [match.lesson_title for match in affected],
                    bool(hints),
                ),
                citations=[Citation(**citation) for citation in build_citations(update.title, update.source_url)],
            ),
            actor=ANALYZER_ACTOR,
        )
        await catalog.updates.mark_processed(update.id)

        logger.info(
            "update_analyzed",
            update_id=update.id,
            report_id=report.id,
            severity=severity.value,
            recommended_action=action.value,
            affected_lessons=len(affected),
        )
        return report
