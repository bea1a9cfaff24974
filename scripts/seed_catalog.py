"""Seed providers, lessons, courses and mapping rules into the configured database.

Idempotent: rows that already exist are left as they are.

Run from repo root:
    python -m scripts.seed_catalog
"""

import asyncio

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.logging import configure_structlog
from curriculum_ops.db.seed import seed_catalog
from curriculum_ops.store import CatalogStore


async def main() -> None:
    settings = get_settings()
    async with CatalogStore(settings.database_url) as store:
        results = await seed_catalog(store)
    print(f"Catalog holds {results['providers']} provider(s).")
    print(
        f"Created {results['lessons']} lesson(s), {results['courses']} course(s) "
        f"and {results['mapping_rules']} mapping rule(s)."
    )


if __name__ == "__main__":
    configure_structlog(log_level=get_settings().log_level, json_logs=False)
    asyncio.run(main())
