"""Idempotent catalog seeding: providers, lessons, courses and mapping rules.

Every seeder skips rows that already exist (providers and lessons by name or
title, courses by name, mapping rules by active key), so running it against a
live catalog never duplicates or overwrites data.
"""

import structlog

from curriculum_ops.db.seed_data import COURSES, LESSONS, MAPPING_RULES
from curriculum_ops.schemas.catalog import CourseCreate, LessonCreate, MappingRuleCreate, ProviderCreate
from curriculum_ops.store import CatalogStore

logger = structlog.get_logger(__name__)

SEED_ACTOR = "system"

PROVIDERS = [
    {"name": "ChatGPT", "category": "llm", "website_url": "https://chat.openai.com", "changelog_url": "https://openai.com/blog"},
    {"name": "Claude", "category": "llm", "website_url": "https://claude.ai", "changelog_url": "https://www.anthropic.com/news"},
    {"name": "Gemini", "category": "llm", "website_url": "https://gemini.google.com", "changelog_url": "https://blog.google/technology/ai/"},
    {"name": "NotebookLM", "category": "research", "website_url": "https://notebooklm.google.com", "changelog_url": None},
    {"name": "Perplexity", "category": "research", "website_url": "https://www.perplexity.ai", "changelog_url": "https://www.perplexity.ai/hub"},
    {"name": "MidJourney", "category": "image", "website_url": "https://www.midjourney.com", "changelog_url": "https://docs.midjourney.com/docs/model-versions"},
    {"name": "DALL-E 3", "category": "image", "website_url": "https://openai.com/dall-e-3", "changelog_url": "https://openai.com/blog"},
    {"name": "Imagen", "category": "image", "website_url": "https://deepmind.google/technologies/imagen-3/", "changelog_url": None},
    {"name": "Canva", "category": "image", "website_url": "https://www.canva.com", "changelog_url": "https://www.canva.com/designschool/whats-new/"},
    {"name": "Google Whisk", "category": "image", "website_url": "https://labs.google/fx/tools/whisk", "changelog_url": None},
    {"name": "Runway ML", "category": "video", "website_url": "https://runwayml.com", "changelog_url": "https://runwayml.com/changelog"},
    {"name": "Sora", "category": "video", "website_url": "https://openai.com/sora", "changelog_url": "https://openai.com/blog"},
    {"name": "Veo", "category": "video", "website_url": "https://deepmind.google/technologies/veo/", "changelog_url": "https://blog.google/technology/ai/"},
    {"name": "HeyGen", "category": "video", "website_url": "https://www.heygen.com", "changelog_url": "https://www.heygen.com/changelog"},
    {"name": "ElevenLabs", "category": "audio", "website_url": "https://elevenlabs.io", "changelog_url": "https://elevenlabs.io/changelog"},
    {"name": "Julius AI", "category": "data", "website_url": "https://julius.ai", "changelog_url": None},
    {"name": "Gamma", "category": "data", "website_url": "https://gamma.app", "changelog_url": "https://gamma.app/changelog"},
    {"name": "n8n", "category": "automation", "website_url": "https://n8n.io", "changelog_url": "https://docs.n8n.io/release-notes/"},
    {"name": "Replit", "category": "nocode", "website_url": "https://replit.com", "changelog_url": "https://blog.replit.com"},
    {"name": "Lovable", "category": "nocode", "website_url": "https://lovable.dev", "changelog_url": None},
    {"name": "UX Pilot", "category": "nocode", "website_url": "https://uxpilot.ai", "changelog_url": None},
]


async def seed_providers(store: CatalogStore) -> int:
    """Insert known providers that don't already exist. Returns the provider count afterwards."""
    async with store.transaction() as catalog:
        for provider_data in PROVIDERS:
            await catalog.providers.upsert(ProviderCreate(**provider_data))
        count = await catalog.providers.count()

    logger.info("providers_seeded", count=count)
    return count


async def seed_lessons(store: CatalogStore) -> int:
    """Insert catalog lessons missing by title, linked to their provider when it is known.

    Returns the number of lessons created.
    """
    created = 0
    async with store.transaction() as catalog:
        provider_ids = {provider.name: provider.id for provider in await catalog.providers.find_all()}
        for lesson_data in LESSONS:
            if await catalog.lessons.get_by_title(lesson_data["title"]) is not None:
                continue
            await catalog.lessons.create(
                LessonCreate(provider_id=provider_ids.get(lesson_data["provider_name"]), **lesson_data)
            )
            created += 1

    logger.info("lessons_seeded", created=created, known=len(LESSONS))
    return created


async def seed_courses(store: CatalogStore) -> int:
    """Insert courses missing by name, resolving lesson titles to ids in teaching order.

    Titles with no matching lesson are logged and left out of the course.
    Returns the number of courses created.
    """
    created = 0
    async with store.transaction() as catalog:
        for course_data in COURSES:
            if await catalog.courses.get_by_name(course_data["name"]) is not None:
                continue

            lesson_ids = []
            for title in course_data["lessons"]:
                lesson = await catalog.lessons.get_by_title(title)
                if lesson is None:
                    logger.warning("course_lesson_missing", course=course_data["name"], title=title)
                    continue
                lesson_ids.append(lesson.id)

            await catalog.courses.create(
                CourseCreate(
                    name=course_data["name"],
                    track=course_data["track"],
                    level=course_data["level"],
                    lesson_ids=lesson_ids,
                )
            )
            created += 1

    logger.info("courses_seeded", created=created, known=len(COURSES))
    return created


async def seed_mapping_rules(store: CatalogStore) -> int:
    """Insert version 1 of every mapping rule key that has no active version yet.

    Returns the number of rules created.
    """
    created = 0
    async with store.transaction() as catalog:
        for rule_data in MAPPING_RULES:
            if await catalog.mapping_rules.get_active(rule_data["question_id"], rule_data["answer_value"]):
                continue
            await catalog.mapping_rules.create(MappingRuleCreate(**rule_data), actor=SEED_ACTOR)
            created += 1

    logger.info("mapping_rules_seeded", created=created, known=len(MAPPING_RULES))
    return created


async def seed_catalog(store: CatalogStore) -> dict[str, int]:
    """Run every seeder in dependency order (courses look up lessons by title)."""
    return {
        "providers": await seed_providers(store),
        "lessons": await seed_lessons(store),
        "courses": await seed_courses(store),
        "mapping_rules": await seed_mapping_rules(store),
    }
