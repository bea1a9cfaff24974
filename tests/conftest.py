"""Shared test fixtures for all test groups."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from curriculum_ops.api.deps import get_generation_client, get_update_source
from curriculum_ops.core.config import get_settings
from curriculum_ops.db.seed import seed_providers
from curriculum_ops.generation.client_fake import FakeGenerationClient
from curriculum_ops.integrations.update_feed import SeededUpdateSource
from curriculum_ops.schemas.catalog import LessonCreate, UpdateCreate
from curriculum_ops.store import CatalogStore

SAMPLE_LESSONS = [
    {
        "title": "Claude for Writing Assistance",
        "provider_name": "Claude",
        "level": "beginner",
        "objective": "Draft and revise documents with Claude Sonnet",
        "key_topics": ["drafting", "revision", "tone"],
    },
    {
        "title": "Coding with Claude Sonnet",
        "provider_name": "Claude",
        "level": "intermediate",
        "objective": "Use Claude Sonnet to write, review and refactor code",
        "key_topics": ["coding", "refactoring", "code review"],
    },
    {
        "title": "ChatGPT Custom GPTs",
        "provider_name": "ChatGPT",
        "level": "intermediate",
        "objective": "Build custom GPTs for repeated team workflows",
        "key_topics": ["custom gpts", "instructions", "knowledge files"],
    },
    {
        "title": "MidJourney Image Prompting",
        "provider_name": "MidJourney",
        "level": "beginner",
        "objective": "Write image prompts and use style references",
        "key_topics": ["prompting", "style reference", "aspect ratio"],
    },
    {
        "title": "Automating Reports with n8n",
        "provider_name": "n8n",
        "level": "advanced",
        "objective": "Chain triggers and AI nodes into a reporting workflow",
        "key_topics": ["workflows", "triggers", "ai nodes"],
    },
]


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Zero generation delays and a clean settings cache for every test."""
    monkeypatch.setenv("GENERATION_CALL_DELAY_SECONDS", "0")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.setenv("STRICT_REVIEW_TRANSITIONS", "false")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
async def store(tmp_path):
    """Initialized catalog store backed by a temp-file SQLite database."""
    catalog_store = CatalogStore(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await catalog_store.init()
    yield catalog_store
    await catalog_store.close()


@pytest.fixture
async def seeded_store(store):
    """Store with the provider catalog and a handful of lessons."""
    await seed_providers(store)
    async with store.transaction() as catalog:
        for lesson in SAMPLE_LESSONS:
            provider = await catalog.providers.get_by_name(lesson["provider_name"])
            await catalog.lessons.create(LessonCreate(provider_id=provider.id if provider else None, **lesson))
    return store


@pytest.fixture
def make_update(store):
    """Factory storing an update; source_url defaults to a unique value per call."""
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        data = {
            "provider": "Claude",
            "title": "Minor documentation refresh",
            "source_url": f"https://example.com/updates/{counter['n']}",
            "published_at": datetime.now(UTC) - timedelta(hours=counter["n"]),
        }
        data.update(overrides)
        async with store.transaction() as catalog:
            return await catalog.updates.create(UpdateCreate(**data))

    return _make


@pytest.fixture
def generation_client():
    """Fresh FakeGenerationClient with happy_path scenario (default)."""
    return FakeGenerationClient(scenario="happy_path")


@pytest.fixture
def app(seeded_store, generation_client):
    """Application serving the seeded store, with the fake generation client."""
    from curriculum_ops.main import create_app

    application = create_app(seeded_store)
    application.dependency_overrides[get_generation_client] = lambda: generation_client
    application.dependency_overrides[get_update_source] = lambda: SeededUpdateSource()
    return application


@pytest.fixture
async def api_client(app):
    """In-process HTTP client. The lifespan does not run; the store is already initialized."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
