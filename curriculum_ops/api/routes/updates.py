"""Provider update API.

GET  /api/updates                 - Stored updates, newest first
GET  /api/updates/{id}            - One update
POST /api/updates/fetch           - Ingest the configured update source
POST /api/updates/{id}/analyze    - Analyze one update into an impact report
"""

from fastapi import APIRouter, Depends, Query

from curriculum_ops.api.deps import get_analyzer, get_ingest_service, get_store, get_update_source
from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.integrations.update_feed import UpdateSource
from curriculum_ops.schemas.api import DataResponse, ListResponse
from curriculum_ops.schemas.catalog import ImpactReportRecord, UpdateRecord
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.services.ingest_service import UpdateIngestService
from curriculum_ops.store import CatalogStore

router = APIRouter()


@router.get("", response_model=ListResponse[UpdateRecord])
async def list_updates(
    provider: str | None = None,
    processed: bool | None = None,
    limit: int | None = Query(None, ge=1, le=500),
    store: CatalogStore = Depends(get_store),
):
    async with store.transaction() as catalog:
        updates = await catalog.updates.find_all(provider=provider, processed=processed, limit=limit)
    return ListResponse(data=updates, total=len(updates))


@router.post("/fetch", response_model=ListResponse[UpdateRecord])
async def fetch_updates(
    ingest: UpdateIngestService = Depends(get_ingest_service),
    source: UpdateSource = Depends(get_update_source),
):
    """Store every candidate from the source; returns those still awaiting analysis."""
    pending = await ingest.ingest(source)
    return ListResponse(data=pending, total=len(pending))


@router.get("/{update_id}", response_model=DataResponse[UpdateRecord])
async def get_update(update_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        update = await catalog.updates.get(update_id)
    if update is None:
        raise NotFoundError("Update", update_id)
    return DataResponse(data=update)


@router.post("/{update_id}/analyze", response_model=DataResponse[ImpactReportRecord])
async def analyze_update(update_id: str, analyzer: ImpactAnalyzer = Depends(get_analyzer)):
    report = await analyzer.analyze_by_id(update_id)
    return DataResponse(data=report, message=f"Impact report {report.id} ({report.severity})")
