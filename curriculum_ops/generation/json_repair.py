"""JSON extraction and truncation repair for generation output.

This module provides:
- strip_json_fences: Remove markdown code fences from model output
- extract_json: Parse the outermost JSON object, repairing truncated slide decks
- parse_generated: extract_json + pydantic validation
"""

import json
import re
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from curriculum_ops.core.exceptions import GenerationParseError

logger = structlog.get_logger(__name__)

REPAIRED_COMPANION_DOC = "See slides for full content."

_SLIDES_ARRAY = re.compile(r'"slides"\s*:\s*\[')

ModelT = TypeVar("ModelT", bound=BaseModel)


def strip_json_fences(content: str) -> str:
    """Remove markdown code fences wrapping JSON output."""
    content = content.strip()
    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1 :]
        if content.endswith("```"):
            content = content[:-3].rstrip()
    return content


def repair_truncated_json(text: str) -> dict[str, Any]:
    """Cut a truncated document back to its last complete slide and re-close it.

    Scans the ``slides`` array tracking brace depth (string- and escape-aware),
    keeps everything up to the last slide object that closed, then appends
    ``]`` and a placeholder ``companionDoc``.

    Raises:
        GenerationParseError: No slides array, no complete slide, or the
            repaired text still does not parse
    """
    match = _SLIDES_ARRAY.search(text)
    if match is None:
        raise GenerationParseError("Generation output is not valid JSON and has no slides array to repair")

    slides_start = match.end()
    depth = 0
    last_complete = slides_start
    in_string = False
    escape = False

    for index in range(slides_start, len(text)):
        char = text[index]
        if escape:
            escape = False
            continue
        if char == "\\":
            escape = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                last_complete = index + 1

    if last_complete <= slides_start:
        raise GenerationParseError("Generation output was truncated before the first complete slide")

    repaired = text[:last_complete] + f'], "companionDoc": "{REPAIRED_COMPANION_DOC}" }}'
    try:
        data = json.loads(repaired)
    except json.JSONDecodeError as e:
        raise GenerationParseError(f"Truncated generation output could not be repaired: {e.msg}") from e

    logger.warning("generation_json_repaired", cut_at=last_complete, original_length=len(text))
    return data


def extract_json(text: str) -> dict[str, Any]:
    """Parse the outermost JSON object in ``text``.

    Fences and wrapper prose are ignored. A document that fails to decode is
    handed to repair_truncated_json.

    Raises:
        GenerationParseError: No object found, or decoding and repair both failed
    """
    content = strip_json_fences(text)
    start = content.find("{")
    if start == -1:
        raise GenerationParseError("No JSON object found in generation output")

    end = content.rfind("}")
    if end > start:
        try:
            data = json.loads(content[start : end + 1])
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            return data

    return repair_truncated_json(content[start:])


def parse_generated(text: str, model: type[ModelT]) -> ModelT:
    """Extract JSON from ``text`` and validate it as ``model``.

    Raises:
        GenerationParseError: Extraction failed or the object does not match the schema
    """
    data = extract_json(text)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise GenerationParseError(
            f"Generation output does not match {model.__name__} ({e.error_count()} validation errors)"
        ) from e
