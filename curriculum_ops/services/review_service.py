"""ReviewService: approve / reject / assign / done transitions on impact reports."""

from typing import Any

import structlog

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.exceptions import BadRequestError, InvalidTransitionError, NotFoundError
from curriculum_ops.domain.review import ReportStatus, TransitionPolicy, select_transition_policy
from curriculum_ops.schemas.catalog import ImpactReportRecord
from curriculum_ops.store import CatalogSession, CatalogStore

logger = structlog.get_logger(__name__)


class ReviewService:
    """Review workflow over impact reports.

    Every status change goes through ``policy(current, target)``. The default
    policy allows any transition; ``strict_review_transitions`` swaps in the
    lifecycle table without touching callers.
    """

    def __init__(
        self,
        store: CatalogStore,
        policy: TransitionPolicy | None = None,
        default_actor: str | None = None,
    ):
        settings = get_settings()
        self.store = store
        self.policy = policy or select_transition_policy(settings.strict_review_transitions)
        self.default_actor = default_actor or settings.default_actor

    async def approve(self, report_id: str, actor: str | None = None) -> ImpactReportRecord:
        return await self.update_status(report_id, ReportStatus.APPROVED, actor)

    async def reject(self, report_id: str, actor: str | None = None) -> ImpactReportRecord:
        return await self.update_status(report_id, ReportStatus.REJECTED, actor)

    async def mark_done(self, report_id: str, actor: str | None = None) -> ImpactReportRecord:
        return await self.update_status(report_id, ReportStatus.DONE, actor)

    async def update_status(
        self,
        report_id: str,
        status: ReportStatus,
        actor: str | None = None,
    ) -> ImpactReportRecord:
        """Move a report to ``status`` and record one audit row.

        Raises:
            NotFoundError: No report with this id
            InvalidTransitionError: The active policy forbids the change
        """
        actor = actor or self.default_actor
        async with self.store.transaction() as catalog:
            return await self.transition(catalog, report_id, status, actor)

    async def assign(self, report_id: str, assignee: str | None, actor: str | None = None) -> ImpactReportRecord:
        """Assign a report to a person; status becomes ``assigned``.

        Raises:
            BadRequestError: Assignee is empty
            NotFoundError: No report with this id
            InvalidTransitionError: The active policy forbids moving to ``assigned``
        """
        if not assignee or not assignee.strip():
            raise BadRequestError("Assignee is required")

        actor = actor or self.default_actor
        async with self.store.transaction() as catalog:
            current = await self._current_status(catalog, report_id)
            self._check(report_id, current, ReportStatus.ASSIGNED)
            report = await catalog.impact_reports.assign(report_id, assignee.strip(), actor)

        logger.info("report_assigned", report_id=report_id, assignee=report.assignee, actor=actor)
        return report

    async def transition(
        self,
        catalog: CatalogSession,
        report_id: str,
        status: ReportStatus,
        actor: str,
        audit_action: str | None = None,
        audit_detail: dict[str, Any] | None = None,
    ) -> ImpactReportRecord:
        """Policy-checked status change inside a caller-owned transaction."""
        current = await self._current_status(catalog, report_id)
        self._check(report_id, current, status)
        report = await catalog.impact_reports.update_status(
            report_id,
            status,
            actor,
            audit_action=audit_action,
            audit_detail=audit_detail,
        )
        logger.info(
            "report_status_changed",
            report_id=report_id,
            previous_status=current.value,
            status=status.value,
            actor=actor,
        )
        return report

    async def _current_status(self, catalog: CatalogSession, report_id: str) -> ReportStatus:
        report = await catalog.impact_reports.get(report_id)
        if report is None:
            raise NotFoundError("Impact report", report_id)
        return report.status

    def _check(self, report_id: str, current: ReportStatus, target: ReportStatus) -> None:
        if not self.policy(current, target):
            raise InvalidTransitionError(report_id, current.value, target.value)
