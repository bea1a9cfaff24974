"""Analyze every unprocessed update into an impact report.

Run from repo root:
    python -m scripts.analyze_updates
"""

import asyncio
import sys

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.logging import configure_structlog
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.store import CatalogStore


async def main() -> int:
    settings = get_settings()
    async with CatalogStore(settings.database_url) as store:
        result = await ImpactAnalyzer(store).analyze_all_unprocessed()

    for report in result.reports:
        print(
            f"  {report.id} | {report.provider} | severity={report.severity} "
            f"| action={report.recommended_action} | lessons={len(report.affected_lessons)}"
        )
    for failure in result.failures:
        print(f"  FAILED {failure.update_id}: {failure.error}")

    print(f"\nAnalyzed {len(result.reports)} update(s), {len(result.failures)} failure(s).")
    return 1 if result.failures else 0


if __name__ == "__main__":
    configure_structlog(log_level=get_settings().log_level, json_logs=False)
    sys.exit(asyncio.run(main()))
