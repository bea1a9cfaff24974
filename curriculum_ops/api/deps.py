"""FastAPI dependencies.

The catalog store lives on ``app.state.store`` (built by create_app or
injected by tests). Services are constructed per request around it.
Override get_generation_client in tests via app.dependency_overrides.
"""

from fastapi import Depends, Request

from curriculum_ops.generation.client import AnthropicGenerationClient, GenerationClient
from curriculum_ops.generation.generator import CourseContentGenerator
from curriculum_ops.generation.renderer import MarkdownSlideRenderer
from curriculum_ops.integrations.update_feed import SeededUpdateSource, UpdateSource
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.services.course_synthesizer import CourseSynthesizer
from curriculum_ops.services.ingest_service import UpdateIngestService
from curriculum_ops.services.mapping_rule_service import MappingRuleService
from curriculum_ops.services.review_service import ReviewService
from curriculum_ops.store import CatalogStore


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_generation_client() -> GenerationClient:
    return AnthropicGenerationClient()


def get_update_source() -> UpdateSource:
    return SeededUpdateSource()


def get_content_generator(client: GenerationClient = Depends(get_generation_client)) -> CourseContentGenerator:
    return CourseContentGenerator(client)


def get_slide_renderer() -> MarkdownSlideRenderer:
    return MarkdownSlideRenderer()


def get_analyzer(store: CatalogStore = Depends(get_store)) -> ImpactAnalyzer:
    return ImpactAnalyzer(store)


def get_review_service(store: CatalogStore = Depends(get_store)) -> ReviewService:
    return ReviewService(store)


def get_mapping_rule_service(store: CatalogStore = Depends(get_store)) -> MappingRuleService:
    return MappingRuleService(store)


def get_ingest_service(store: CatalogStore = Depends(get_store)) -> UpdateIngestService:
    return UpdateIngestService(store)


def get_course_synthesizer(
    store: CatalogStore = Depends(get_store),
    generator: CourseContentGenerator = Depends(get_content_generator),
) -> CourseSynthesizer:
    return CourseSynthesizer(store, generator)
