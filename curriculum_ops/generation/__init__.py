"""Generation collaborator package.

Provides:
- GenerationClient: protocol, with AnthropicGenerationClient and FakeGenerationClient
- CourseContentGenerator: two-phase plan/lesson generation with one parse retry
- MarkdownSlideRenderer: slide deck -> Markdown
"""

from curriculum_ops.generation.client import AnthropicGenerationClient, GenerationClient
from curriculum_ops.generation.client_fake import FakeGenerationClient
from curriculum_ops.generation.generator import CourseContentGenerator
from curriculum_ops.generation.renderer import MarkdownSlideRenderer, SlideRenderer

__all__ = [
    "AnthropicGenerationClient",
    "CourseContentGenerator",
    "FakeGenerationClient",
    "GenerationClient",
    "MarkdownSlideRenderer",
    "SlideRenderer",
]
