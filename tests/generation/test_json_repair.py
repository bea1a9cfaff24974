"""Unit tests for generation output parsing and truncation repair."""

import json

import pytest

from curriculum_ops.core.exceptions import GenerationParseError
from curriculum_ops.generation.json_repair import (
    REPAIRED_COMPANION_DOC,
    extract_json,
    parse_generated,
    repair_truncated_json,
    strip_json_fences,
)
from curriculum_ops.schemas.generation import CoursePlan, SlideDocument

pytestmark = pytest.mark.unit

DECK = {
    "title": "Voice Mode Workshop",
    "slides": [
        {"type": "title", "header": "Claude", "content": "Voice Mode Workshop"},
        {"type": "step", "header": "Open settings", "content": "Use the {gear} icon \"top right\""},
        {"type": "closing", "header": "Done", "cta": "Go build"},
    ],
    "companionDoc": "# Guide",
}


def test_strip_json_fences():
    assert strip_json_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_json_fences('  {"a": 1}  ') == '{"a": 1}'


def test_extract_json_ignores_surrounding_prose():
    text = f"Here is the deck you asked for:\n{json.dumps(DECK)}\nLet me know if you need changes."
    assert extract_json(text)["title"] == "Voice Mode Workshop"


def test_truncated_deck_keeps_complete_slides():
    text = json.dumps(DECK)
    cut = text.index('{"type": "closing"') + 20

    data = extract_json(text[:cut])

    assert [slide["type"] for slide in data["slides"]] == ["title", "step"]
    assert data["companionDoc"] == REPAIRED_COMPANION_DOC
    # braces inside strings do not confuse the scan
    assert data["slides"][1]["content"] == 'Use the {gear} icon "top right"'


def test_truncated_before_first_slide():
    with pytest.raises(GenerationParseError, match="first complete slide"):
        repair_truncated_json('{"title": "X", "slides": [{"type": "ti')


def test_no_json_at_all():
    with pytest.raises(GenerationParseError, match="No JSON object"):
        extract_json("I cannot help with that.")


def test_broken_json_without_slides():
    with pytest.raises(GenerationParseError, match="no slides array"):
        extract_json('{"courseName": "X", "lessons": [')


def test_parse_generated_validates_schema():
    deck = parse_generated(json.dumps(DECK), SlideDocument)
    assert deck.companion_doc == "# Guide"
    assert deck.slides[2].cta == "Go build"

    with pytest.raises(GenerationParseError, match="SlideDocument"):
        parse_generated('{"title": "Empty", "slides": []}', SlideDocument)


def test_course_plan_accepts_camel_case_and_normalizes_level():
    plan = parse_generated(
        json.dumps(
            {
                "courseName": "New Tools",
                "lessons": [{"title": "A", "provider": "Claude", "level": "expert", "keyTopics": ["x"]}],
            }
        ),
        CoursePlan,
    )
    assert plan.course_name == "New Tools"
    assert plan.lessons[0].level == "intermediate"
    assert plan.lessons[0].key_topics == ["x"]
