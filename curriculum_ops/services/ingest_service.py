"""UpdateIngestService: stores candidate updates from a source, idempotently by source_url."""

import structlog

from curriculum_ops.integrations.update_feed import UpdateSource
from curriculum_ops.schemas.catalog import UpdateRecord
from curriculum_ops.store import CatalogStore

logger = structlog.get_logger(__name__)


class UpdateIngestService:
    def __init__(self, store: CatalogStore):
        self.store = store

    async def ingest(self, source: UpdateSource) -> list[UpdateRecord]:
        """Fetch from ``source`` and store every candidate.

        Known source URLs keep their stored row untouched. Returns the stored
        updates that still await analysis.
        """
        candidates = await source.fetch()
        pending: list[UpdateRecord] = []

        async with self.store.transaction() as catalog:
            for candidate in candidates:
                if candidate.provider_id is None:
                    provider = await catalog.providers.get_by_name(candidate.provider)
                    if provider is not None:
                        candidate = candidate.model_copy(update={"provider_id": provider.id})
                stored = await catalog.updates.create(candidate)
                if not stored.processed:
                    pending.append(stored)

        logger.info(
            "updates_ingested",
            source=type(source).__name__,
            fetched=len(candidates),
            pending=len(pending),
        )
        return pending
