"""CatalogStore: explicitly constructed handle over the embedded catalog database.

There is no module-level engine. Callers build one store, call ``init()``
before use and ``close()`` on shutdown, and pass the instance to the services
that need it.
"""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from curriculum_ops.db import models  # noqa: F401  (registers tables on Base.metadata)
from curriculum_ops.db.base import Base
from curriculum_ops.schemas.catalog import AuditLogRecord
from curriculum_ops.store.repositories import (
    AuditLogRepository,
    CourseRepository,
    ImpactReportRepository,
    LessonRepository,
    MappingRuleRepository,
    ProviderRepository,
    UpdateRepository,
)

logger = structlog.get_logger(__name__)


@dataclass
class CatalogSession:
    """Repositories bound to one session (one transaction)."""

    session: AsyncSession
    audit_logs: AuditLogRepository = field(init=False)
    providers: ProviderRepository = field(init=False)
    lessons: LessonRepository = field(init=False)
    courses: CourseRepository = field(init=False)
    mapping_rules: MappingRuleRepository = field(init=False)
    updates: UpdateRepository = field(init=False)
    impact_reports: ImpactReportRepository = field(init=False)

    def __post_init__(self) -> None:
        self.audit_logs = AuditLogRepository(self.session)
        self.providers = ProviderRepository(self.session)
        self.lessons = LessonRepository(self.session)
        self.courses = CourseRepository(self.session)
        self.mapping_rules = MappingRuleRepository(self.session, self.audit_logs)
        self.updates = UpdateRepository(self.session)
        self.impact_reports = ImpactReportRepository(self.session, self.audit_logs)

    async def dashboard_stats(self) -> dict:
        """Catalog-wide counts for the operations dashboard."""
        by_level = await self.lessons.count_by_level()
        report_stats = await self.impact_reports.stats()
        return {
            "providers": {"count": await self.providers.count()},
            "lessons": {"count": sum(by_level.values()), "by_level": by_level},
            "courses": {"count": await self.courses.count()},
            "mapping_rules": {"count": await self.mapping_rules.count_active()},
            "updates": await self.updates.counts(),
            "impact_reports": report_stats.model_dump(),
        }

    async def record_audit(self, entity_type: str, entity_id: str, action: str, actor: str, **values) -> AuditLogRecord:
        return await self.audit_logs.append(entity_type, entity_id, action, actor, **values)


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


class CatalogStore:
    """Owns the async engine, session factory and schema for the catalog."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    async def init(self) -> None:
        """Create the engine and all tables. Safe to call more than once."""
        if self._engine is not None:
            return

        _ensure_sqlite_directory(self.database_url)
        # Unescaped JSON keeps non-ASCII key topics matchable by search()
        self._engine = create_async_engine(
            self.database_url,
            echo=self.echo,
            json_serializer=partial(json.dumps, ensure_ascii=False),
        )
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("catalog_store_initialized", database_url=make_url(self.database_url).render_as_string())

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("catalog_store_closed")
        self._engine = None
        self._session_factory = None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("CatalogStore not initialized. Call init() first.")
        return self._session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[CatalogSession]:
        """Yield repositories sharing one transaction.

        Commits when the block exits normally and rolls back if it raises.
        """
        async with self.session_factory() as session:
            async with session.begin():
                yield CatalogSession(session)

    async def __aenter__(self) -> "CatalogStore":
        await self.init()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
