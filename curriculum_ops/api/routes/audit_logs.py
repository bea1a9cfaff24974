from fastapi import APIRouter, Depends, Query

from curriculum_ops.api.deps import get_store
from curriculum_ops.schemas.api import ListResponse
from curriculum_ops.schemas.catalog import AuditLogRecord
from curriculum_ops.store import CatalogStore

router = APIRouter()


@router.get("", response_model=ListResponse[AuditLogRecord])
async def list_audit_logs(
    entity_type: str | None = None,
    action: str | None = None,
    limit: int = Query(100, ge=1, le=1000),
    store: CatalogStore = Depends(get_store),
):
    async with store.transaction() as catalog:
        entries = await catalog.audit_logs.find_all(entity_type=entity_type, action=action, limit=limit)
    return ListResponse(data=entries, total=len(entries))


@router.get("/{entity_type}/{entity_id}", response_model=ListResponse[AuditLogRecord])
async def entity_audit_trail(entity_type: str, entity_id: str, store: CatalogStore = Depends(get_store)):
    """Audit rows for one entity, newest first."""
    async with store.transaction() as catalog:
        entries = await catalog.audit_logs.for_entity(entity_type, entity_id)
    return ListResponse(data=entries, total=len(entries))
