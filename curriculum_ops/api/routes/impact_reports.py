"""Impact report review API.

Endpoints:
- GET  /impact-reports                 - Reports, filtered by status / provider / action
- GET  /impact-reports/stats           - Counts by status, severity and action
- GET  /impact-reports/{id}            - One report
- POST /impact-reports/analyze         - Analyze every unprocessed update
- POST /impact-reports/{id}/approve    - Approve
- POST /impact-reports/{id}/reject     - Reject
- POST /impact-reports/{id}/assign     - Assign to a reviewer
- POST /impact-reports/{id}/done       - Mark done

Every status change writes exactly one audit row. The actor comes from the
request body, falling back to the configured default actor.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from curriculum_ops.api.deps import get_analyzer, get_review_service, get_store
from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.schemas.api import (
    ActorRequest,
    AssignRequest,
    BatchAnalysisResponse,
    DataResponse,
    ListResponse,
)
from curriculum_ops.schemas.catalog import ImpactReportRecord, ReportStats
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.services.review_service import ReviewService
from curriculum_ops.store import CatalogStore

router = APIRouter()


def _actor(body: ActorRequest | None) -> str | None:
    return body.actor if body else None


@router.get("", response_model=ListResponse[ImpactReportRecord])
async def list_reports(
    status: str | None = None,
    provider: str | None = None,
    recommended_action: str | None = None,
    store: CatalogStore = Depends(get_store),
):
    async with store.transaction() as catalog:
        reports = await catalog.impact_reports.find_all(
            status=status,
            provider=provider,
            recommended_action=recommended_action,
        )
    return ListResponse(data=reports, total=len(reports))


@router.get("/stats", response_model=DataResponse[ReportStats])
async def report_stats(analyzer: ImpactAnalyzer = Depends(get_analyzer)):
    return DataResponse(data=await analyzer.get_stats())


@router.post("/analyze", response_model=DataResponse[BatchAnalysisResponse])
async def analyze_unprocessed(analyzer: ImpactAnalyzer = Depends(get_analyzer)):
    result = await analyzer.analyze_all_unprocessed()
    return DataResponse(
        data=BatchAnalysisResponse(
            reports=result.reports,
            failures=[asdict(failure) for failure in result.failures],
        ),
        message=f"Analyzed {len(result.reports)} updates, {len(result.failures)} failed",
    )


@router.get("/{report_id}", response_model=DataResponse[ImpactReportRecord])
async def get_report(report_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        report = await catalog.impact_reports.get(report_id)
    if report is None:
        raise NotFoundError("Impact report", report_id)
    return DataResponse(data=report)


@router.post("/{report_id}/approve", response_model=DataResponse[ImpactReportRecord])
async def approve_report(
    report_id: str,
    body: ActorRequest | None = None,
    review: ReviewService = Depends(get_review_service),
):
    return DataResponse(data=await review.approve(report_id, _actor(body)))


@router.post("/{report_id}/reject", response_model=DataResponse[ImpactReportRecord])
async def reject_report(
    report_id: str,
    body: ActorRequest | None = None,
    review: ReviewService = Depends(get_review_service),
):
    return DataResponse(data=await review.reject(report_id, _actor(body)))


@router.post("/{report_id}/assign", response_model=DataResponse[ImpactReportRecord])
async def assign_report(
    report_id: str,
    body: AssignRequest,
    review: ReviewService = Depends(get_review_service),
):
    report = await review.assign(report_id, body.assignee, body.actor)
    return DataResponse(data=report, message=f"Assigned to {report.assignee}")


@router.post("/{report_id}/done", response_model=DataResponse[ImpactReportRecord])
async def mark_report_done(
    report_id: str,
    body: ActorRequest | None = None,
    review: ReviewService = Depends(get_review_service),
):
    return DataResponse(data=await review.mark_done(report_id, _actor(body)))
