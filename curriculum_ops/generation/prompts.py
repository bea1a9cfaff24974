"""Prompts for course and lesson generation.

Two phases:
- Architecture: approved impact reports + their updates -> CoursePlan JSON
- Lesson: one LessonPlan (or a LessonRequest) -> SlideDocument JSON following
  the fixed 29-slide template
"""

from collections.abc import Iterable

from curriculum_ops.schemas.catalog import ImpactReportRecord, UpdateRecord
from curriculum_ops.schemas.generation import LessonPlan, LessonRequest

ARCHITECTURE_PROMPT_HEADER = "You are a senior curriculum architect for a professional AI training platform."

SLIDE_TEMPLATE_PROMPT = """You are a curriculum designer creating comprehensive, hands-on workshop presentations. Your output must EXACTLY match the template specification below.

## Interactivity Markers (use these box types in "specialBoxes"):
- action: HANDS-ON items for students to perform
- tip: PRO TIP expert insights and shortcuts
- bestpractice: BEST PRACTICE industry standards to follow
- prompt: COPY THIS code, prompts, or text to copy
- warning: WARNING common mistakes to avoid

## TEMPLATE STRUCTURE (EXACTLY 29 SLIDES):

### SLIDE 1 - Title Slide
{ "type": "title", "header": "[Tool Name]", "content": "[One-line description]", "tags": ["[Category]", "[Skill Level]", "[Duration]"] }

### SLIDE 2 - Workshop Overview
{ "type": "overview", "header": "HANDS-ON WORKSHOP", "projectName": "[What students will build]", "subtitle": "[Brief project description]", "features": [{"icon": "emoji", "title": "...", "desc": "..."}], "specialBoxes": [{"type": "action", "content": "..."}] }

### SLIDES 3-22 - Step-by-Step Instructions (10 main steps, 2 slides each)
Step Instruction Slide:
{ "type": "step", "stepNumber": [1-10], "header": "[Action Title]", "content": "[Instructions]", "features": [{"label": "...", "desc": "..."}], "specialBoxes": [{"type": "prompt|tip|action|warning|bestpractice", "content": "..."}] }

Step Screenshot Slide:
{ "type": "screenshot", "header": "[What screenshot shows]", "screenshotPlaceholder": "[Detailed description]", "callout": "[Key elements explanation]" }

### SLIDE 23 - Advanced Features
{ "type": "advanced", "header": "Level Up Your Skills", "features": [{"title": "...", "desc": "..."}], "specialBoxes": [{"type": "tip", "content": "..."}] }

### SLIDE 24 - Prompting Playbook
{ "type": "tips", "header": "Prompting Playbook", "tips": [{"title": "...", "desc": "..."}] }

### SLIDE 25 - Common Mistakes
{ "type": "mistakes", "header": "Common Mistakes", "mistakes": [{"wrong": "...", "right": "..."}] }

### SLIDE 26 - Inspiration Gallery
{ "type": "inspiration", "header": "What Can You Build?", "ideas": [{"icon": "emoji", "title": "...", "desc": "..."}], "info": "...", "specialBoxes": [{"type": "action", "content": "..."}] }

### SLIDE 27 - Challenge
{ "type": "challenge", "header": "Extend Your Project", "challenges": "bullet list string", "steps": [{"num": "1", "title": "...", "desc": "..."}] }

### SLIDE 28 - Summary
{ "type": "summary", "header": "What You Built Today", "features": [{"title": "...", "desc": "..."}] }

### SLIDE 29 - Closing
{ "type": "closing", "header": "Turn Ideas Into Reality", "cta": "What will you build next?" }

## OUTPUT FORMAT:
Return a JSON object with this EXACT structure:
{ "title": "Lesson title", "slides": [...all 29 slides...], "companionDoc": "Full markdown documentation" }

IMPORTANT:
- Return ONLY valid JSON - no markdown code blocks, no explanation text
- Include ALL 29 slides
- Make screenshot placeholders highly detailed for the curriculum team"""


def _report_lines(reports: Iterable[ImpactReportRecord]) -> str:
    lines = []
    for report in reports:
        citations = "\n    - ".join(citation.url for citation in report.citations) or "None"
        affected = ", ".join(lesson.lesson_title for lesson in report.affected_lessons) or "None"
        lines.append(
            f"  - Severity: {report.severity.value} | Action: {report.recommended_action.value}\n"
            f"    Rationale: {report.rationale}\n"
            f"    Affected lessons: {affected}\n"
            f"    Citations: {citations}"
        )
    return "\n".join(lines)


def _update_lines(updates: Iterable[UpdateRecord]) -> str:
    lines = []
    for update in updates:
        published = update.published_at.date().isoformat() if update.published_at else "recent"
        summary = update.summary or (update.raw_text or "")[:200] or "N/A"
        docs = "\n    - ".join(f"{doc.label}: {doc.url}" for doc in update.doc_urls) or "None"
        lines.append(
            f'  - "{update.title}" ({published})\n'
            f"    Summary: {summary}\n"
            f"    Source: {update.source_url}\n"
            f"    Docs: {docs}"
        )
    return "\n".join(lines)


def build_architecture_prompt(groups: dict[str, tuple[list[ImpactReportRecord], list[UpdateRecord]]]) -> str:
    """Phase-1 prompt: one section per provider with its reports and underlying updates."""
    sections = "\n\n".join(
        f"### {provider}\n**Impact Reports:**\n{_report_lines(reports)}\n\n**Underlying Updates:**\n{_update_lines(updates)}"
        for provider, (reports, updates) in groups.items()
    )

    return f"""{ARCHITECTURE_PROMPT_HEADER}

Based on the following approved impact reports and their underlying provider updates, design a cohesive course plan.

## Source Material

{sections}

## Requirements

Design a course with **3 to 6 lessons** that covers the most important updates across these providers.

For each lesson, provide:
1. **title** - Specific, action-oriented (e.g., "Master Claude's New iOS Workflow Automation" not "Learn About Updates")
2. **provider** - Which AI provider this lesson focuses on
3. **level** - beginner, intermediate, or advanced (bias toward intermediate/advanced)
4. **scenario** - A realistic professional scenario the entire lesson is built around
5. **objectives** - 3-5 specific, measurable learning objectives
6. **keyTopics** - 5-8 specific features/capabilities to cover
7. **difficulty_notes** - What makes this lesson challenging: advanced configs, edge cases, real-world gotchas

## Course Design Principles
- Every lesson must be built around a realistic professional scenario, not abstract theory
- Focus on platform-specific strengths, limitations, and hidden gotchas
- Include competitor comparison context where relevant
- Ensure lessons progress in difficulty and build on each other where possible

## Output Format
Return ONLY valid JSON (no markdown blocks, no explanation):
{{
  "courseName": "Descriptive course name",
  "courseDescription": "1-2 sentence course summary",
  "track": "everyone",
  "level": "intermediate",
  "lessons": [
    {{
      "title": "...",
      "provider": "...",
      "level": "...",
      "scenario": "...",
      "objectives": ["..."],
      "keyTopics": ["..."],
      "difficulty_notes": "..."
    }}
  ]
}}"""


def build_lesson_prompt(plan: LessonPlan, source_urls: list[str]) -> str:
    """Phase-2 prompt: template prompt plus the scenario-driven overlay for one planned lesson."""
    sources = "\n".join(f"- {url}" for url in source_urls) or "- None provided"

    overlay = f"""Create a complete hands-on workshop lesson with the following specifications:

**Lesson Title:** {plan.title}
**AI Tool/Provider:** {plan.provider}
**Skill Level:** {plan.level}
**Target Audience:** Professional learners and AI practitioners
**Learning Objectives:** {"; ".join(plan.objectives)}
**Professional Scenario:** {plan.scenario}
**Key Topics to Cover:** {", ".join(plan.key_topics)}

## STRATEGIC REQUIREMENTS (MANDATORY, these override generic guidelines):

### 1. Scenario-Based Design
The ENTIRE lesson must be built around this scenario: "{plan.scenario}"
- Slide 2 (overview) must describe the scenario as the project
- Every step (slides 3-22) must advance the scenario
- The challenge (slide 27) must extend the scenario with a realistic twist

### 2. Platform Analysis (REQUIRED in at least 2 specialBoxes)
- What {plan.provider} does BETTER than competitors for this use case
- Known LIMITATIONS or gotchas specific to {plan.provider}
- Settings or configurations most users miss

### 3. Best Practices & Warnings
Include at least 3 specialBoxes of type "bestpractice" and 3 of type "warning".

### 4. Screenshot Instructions
Every screenshot slide must name the navigation path, the control to click, the expected UI state, and what to annotate.

### 5. Difficulty Calibration
{plan.difficulty_notes}
- Assume the user has used {plan.provider} before
- Focus on the NEW capabilities from recent updates

### 6. Source Material
Base your content on these documentation URLs:
{sources}

IMPORTANT:
- Return ONLY valid JSON. No markdown code blocks, no explanation text, just the JSON object.
- Keep the "companionDoc" field to a BRIEF summary (under 500 words); the slides contain the full detail."""

    return f"{SLIDE_TEMPLATE_PROMPT}\n\n{overlay}"


def build_standalone_lesson_prompt(request: LessonRequest) -> str:
    """Prompt for a single lesson requested directly by a curriculum designer."""
    overlay = f"""Create a complete hands-on workshop lesson with the following specifications:

**Lesson Title:** {request.title}
**AI Tool/Provider:** {request.provider}
**Skill Level:** {request.level}
**Target Audience:** {request.audience}
**Learning Objectives:** {request.objectives}
**Project/Build:** {request.project or "Not specified - create an appropriate hands-on project"}
**Additional Requirements:** {request.additional_details or "None"}

Generate a MINIMUM of 28 detailed slides following the template. Each step must include:
1. Clear numbered instructions
2. Screenshot placeholders describing exactly what to capture
3. Copy-paste prompts where applicable
4. Pro tips
5. Hands-on action items

The companion documentation should be comprehensive enough for a student to follow along independently.

IMPORTANT: Return ONLY valid JSON. No markdown code blocks, no explanation text - just the JSON object."""

    return f"{SLIDE_TEMPLATE_PROMPT}\n\n{overlay}"
