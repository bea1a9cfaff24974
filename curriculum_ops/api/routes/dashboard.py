from typing import Any

from fastapi import APIRouter, Depends

from curriculum_ops.api.deps import get_store
from curriculum_ops.schemas.api import DataResponse
from curriculum_ops.store import CatalogStore

router = APIRouter()


@router.get("/stats", response_model=DataResponse[dict[str, Any]])
async def dashboard_stats(store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        stats = await catalog.dashboard_stats()
    return DataResponse(data=stats)
