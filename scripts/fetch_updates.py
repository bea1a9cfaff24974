"""Ingest the seeded provider update feed.

Updates already stored (same source URL) are skipped.

Run from repo root:
    python -m scripts.fetch_updates
"""

import asyncio

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.logging import configure_structlog
from curriculum_ops.integrations.update_feed import SeededUpdateSource
from curriculum_ops.services.ingest_service import UpdateIngestService
from curriculum_ops.store import CatalogStore


async def main() -> None:
    settings = get_settings()
    async with CatalogStore(settings.database_url) as store:
        pending = await UpdateIngestService(store).ingest(SeededUpdateSource())

    print(f"{len(pending)} update(s) awaiting analysis:")
    for update in pending:
        print(f"  {update.id} | {update.provider} | {update.title}")


if __name__ == "__main__":
    configure_structlog(log_level=get_settings().log_level, json_logs=False)
    asyncio.run(main())
