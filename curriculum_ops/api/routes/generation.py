"""Content generation API.

POST /api/lessons/generate  - Generate one slide deck from a lesson request
POST /api/lessons/export    - Render a slide deck to Markdown
POST /api/courses/generate  - Build a course from approved impact reports
"""

import structlog
from fastapi import APIRouter, Depends

from curriculum_ops.api.deps import get_content_generator, get_course_synthesizer, get_slide_renderer
from curriculum_ops.generation.generator import CourseContentGenerator
from curriculum_ops.generation.renderer import MarkdownSlideRenderer
from curriculum_ops.schemas.api import DataResponse, ExportDeckRequest, GenerateCourseRequest
from curriculum_ops.schemas.generation import CourseGenerationResult, ExportedDeck, LessonRequest, SlideDocument
from curriculum_ops.services.course_synthesizer import CourseSynthesizer

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/lessons/generate", response_model=DataResponse[SlideDocument])
async def generate_lesson(
    request: LessonRequest,
    generator: CourseContentGenerator = Depends(get_content_generator),
):
    document = await generator.generate_standalone_lesson(request)
    return DataResponse(data=document, message=f"Generated lesson with {len(document.slides)} slides")


@router.post("/lessons/export", response_model=DataResponse[ExportedDeck])
async def export_lesson(
    body: ExportDeckRequest,
    renderer: MarkdownSlideRenderer = Depends(get_slide_renderer),
):
    deck = renderer.export(body.document)
    logger.info("deck_exported", filename=deck.filename, slides=len(body.document.slides))
    return DataResponse(data=deck)


@router.post("/courses/generate", response_model=DataResponse[CourseGenerationResult], status_code=201)
async def generate_course(
    body: GenerateCourseRequest | None = None,
    synthesizer: CourseSynthesizer = Depends(get_course_synthesizer),
):
    body = body or GenerateCourseRequest()
    result = await synthesizer.generate_course(body.report_ids)
    return DataResponse(
        data=result,
        message=f"Generated {result.course.name} with {result.course.lesson_count} lessons",
    )
