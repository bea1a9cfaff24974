"""Catalog read API: providers, lessons, courses.

GET  /api/providers                  - All providers by name
GET  /api/providers/{id}             - One provider
GET  /api/lessons                    - Lessons, optionally filtered by level / provider
GET  /api/lessons/search/{keyword}   - Free-text lesson search
GET  /api/lessons/{id}               - One lesson
GET  /api/courses                    - Courses, optionally filtered by track / level
GET  /api/courses/{id}               - One course
GET  /api/courses/{id}/lessons       - Course lessons in position order
"""

from fastapi import APIRouter, Depends

from curriculum_ops.api.deps import get_store
from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.schemas.api import DataResponse, ListResponse
from curriculum_ops.schemas.catalog import CourseRecord, LessonRecord, PositionedLesson, ProviderRecord
from curriculum_ops.store import CatalogStore

providers_router = APIRouter()
lessons_router = APIRouter()
courses_router = APIRouter()


@providers_router.get("", response_model=ListResponse[ProviderRecord])
async def list_providers(store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        providers = await catalog.providers.find_all()
    return ListResponse(data=providers, total=len(providers))


@providers_router.get("/{provider_id}", response_model=DataResponse[ProviderRecord])
async def get_provider(provider_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        provider = await catalog.providers.get(provider_id)
    if provider is None:
        raise NotFoundError("Provider", provider_id)
    return DataResponse(data=provider)


@lessons_router.get("", response_model=ListResponse[LessonRecord])
async def list_lessons(
    level: str | None = None,
    provider: str | None = None,
    store: CatalogStore = Depends(get_store),
):
    async with store.transaction() as catalog:
        lessons = await catalog.lessons.find_all(level=level, provider_name=provider)
    return ListResponse(data=lessons, total=len(lessons))


@lessons_router.get("/search/{keyword}", response_model=ListResponse[LessonRecord])
async def search_lessons(keyword: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        lessons = await catalog.lessons.search(keyword)
    return ListResponse(data=lessons, total=len(lessons))


@lessons_router.get("/{lesson_id}", response_model=DataResponse[LessonRecord])
async def get_lesson(lesson_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        lesson = await catalog.lessons.get(lesson_id)
    if lesson is None:
        raise NotFoundError("Lesson", lesson_id)
    return DataResponse(data=lesson)


@courses_router.get("", response_model=ListResponse[CourseRecord])
async def list_courses(
    track: str | None = None,
    level: str | None = None,
    store: CatalogStore = Depends(get_store),
):
    async with store.transaction() as catalog:
        courses = await catalog.courses.find_all(track=track, level=level)
    return ListResponse(data=courses, total=len(courses))


@courses_router.get("/{course_id}", response_model=DataResponse[CourseRecord])
async def get_course(course_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        course = await catalog.courses.get(course_id)
    if course is None:
        raise NotFoundError("Course", course_id)
    return DataResponse(data=course)


@courses_router.get("/{course_id}/lessons", response_model=ListResponse[PositionedLesson])
async def get_course_lessons(course_id: str, store: CatalogStore = Depends(get_store)):
    async with store.transaction() as catalog:
        lessons = await catalog.courses.lessons_in_order(course_id)
    return ListResponse(data=lessons, total=len(lessons))
