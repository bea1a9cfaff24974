"""Slide deck rendering.

SlideRenderer turns a SlideDocument into file bytes. MarkdownSlideRenderer
renders one section per slide through a Jinja2 template, followed by the
companion guide.
"""

import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from jinja2 import Environment, FileSystemLoader

from curriculum_ops.schemas.generation import ExportedDeck, SlideDocument

TEMPLATE_DIR = Path(__file__).parent / "templates"

BOX_LABELS = {
    "action": "HANDS-ON",
    "tip": "PRO TIP",
    "bestpractice": "BEST PRACTICE",
    "prompt": "COPY THIS",
    "warning": "WARNING",
}


@runtime_checkable
class SlideRenderer(Protocol):
    media_type: str
    file_extension: str

    def render(self, document: SlideDocument) -> bytes:
        ...


class MarkdownSlideRenderer:
    """Render slide decks as Markdown."""

    media_type = "text/markdown"
    file_extension = "md"

    def __init__(self):
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=False,  # Markdown should NOT be escaped
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_text(self, document: SlideDocument) -> str:
        template = self.env.get_template("slide_deck.md.j2")
        return template.render(
            title=document.title or "Untitled Lesson",
            metadata=document.metadata,
            slides=[slide.model_dump(mode="json") for slide in document.slides],
            companion_doc=document.companion_doc,
            box_labels=BOX_LABELS,
        )

    def render(self, document: SlideDocument) -> bytes:
        return self.render_text(document).encode("utf-8")

    def filename_for(self, document: SlideDocument) -> str:
        stem = re.sub(r"[^a-zA-Z0-9]", "_", document.title or "lesson")
        return f"{stem}_presentation.{self.file_extension}"

    def export(self, document: SlideDocument) -> ExportedDeck:
        return ExportedDeck(
            filename=self.filename_for(document),
            content=self.render_text(document),
            content_type=self.media_type,
        )
