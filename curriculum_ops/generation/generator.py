"""CourseContentGenerator: prompt -> completion -> validated course plan or slide deck.

Each generation call is parsed and validated; a GenerationParseError gets
exactly one retry after the fixed inter-call delay, then propagates.
"""

import asyncio
from datetime import UTC, datetime
from typing import TypeVar

import structlog
from pydantic import BaseModel
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.exceptions import GenerationParseError
from curriculum_ops.generation.client import GenerationClient
from curriculum_ops.generation.json_repair import parse_generated
from curriculum_ops.generation.prompts import (
    build_architecture_prompt,
    build_lesson_prompt,
    build_standalone_lesson_prompt,
)
from curriculum_ops.schemas.catalog import ImpactReportRecord, UpdateRecord
from curriculum_ops.schemas.generation import CoursePlan, LessonPlan, LessonRequest, SlideDocument

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

PARSE_ATTEMPTS = 2  # first call + one retry


class CourseContentGenerator:
    """Two-phase content generation over an injected GenerationClient."""

    def __init__(
        self,
        client: GenerationClient,
        delay_seconds: float | None = None,
        architecture_max_tokens: int | None = None,
        lesson_max_tokens: int | None = None,
    ):
        settings = get_settings()
        self.client = client
        self.delay_seconds = settings.generation_call_delay_seconds if delay_seconds is None else delay_seconds
        self.architecture_max_tokens = architecture_max_tokens or settings.architecture_max_tokens
        self.lesson_max_tokens = lesson_max_tokens or settings.lesson_max_tokens

    async def generate_course_plan(
        self,
        groups: dict[str, tuple[list[ImpactReportRecord], list[UpdateRecord]]],
    ) -> CoursePlan:
        """Phase 1: design the course from reports grouped by provider."""
        prompt = build_architecture_prompt(groups)
        plan = await self._complete_and_parse(prompt, self.architecture_max_tokens, CoursePlan, phase="architecture")
        logger.info("course_plan_generated", course_name=plan.course_name, lessons=len(plan.lessons))
        return plan

    async def generate_lesson(self, plan: LessonPlan, source_urls: list[str]) -> SlideDocument:
        """Phase 2: generate the slide deck for one planned lesson."""
        prompt = build_lesson_prompt(plan, source_urls)
        document = await self._complete_and_parse(prompt, self.lesson_max_tokens, SlideDocument, phase="lesson")
        logger.info("lesson_generated", title=plan.title, slides=len(document.slides))
        return document

    async def generate_standalone_lesson(self, request: LessonRequest) -> SlideDocument:
        """Generate one lesson deck from a designer's request, outside any course."""
        prompt = build_standalone_lesson_prompt(request)
        document = await self._complete_and_parse(prompt, self.lesson_max_tokens, SlideDocument, phase="lesson")
        document.metadata = {
            "generatedAt": datetime.now(UTC).isoformat(),
            "provider": request.provider,
            "level": request.level,
            "audience": request.audience,
            "slideCount": len(document.slides),
        }
        return document

    async def pause(self) -> None:
        """Fixed delay between successive generation calls."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def _complete_and_parse(self, prompt: str, max_tokens: int, model: type[ModelT], phase: str) -> ModelT:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(PARSE_ATTEMPTS),
            wait=wait_fixed(self.delay_seconds),
            retry=retry_if_exception_type(GenerationParseError),
            reraise=True,
            before_sleep=lambda rs: logger.warning(
                "generation_parse_failed_retrying",
                phase=phase,
                attempt=rs.attempt_number,
                error=str(rs.outcome.exception()),
            ),
        ):
            with attempt:
                text = await self.client.complete(prompt, max_tokens)
                return parse_generated(text, model)

        raise RuntimeError("generation_exhausted_retries")  # pragma: no cover
