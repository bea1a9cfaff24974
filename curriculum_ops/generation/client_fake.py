"""FakeGenerationClient: scenario-based test double for GenerationClient.

Provides deterministic, instant responses for named scenarios:
- happy_path: Valid course plan (one lesson per provider section) and valid decks
- malformed_once: First call returns prose instead of JSON, later calls succeed
- malformed: Every call returns prose instead of JSON
- truncated: Valid course plan, lesson decks cut off mid-slide
- empty_plan: Course plan with no lessons
"""

import json
import re

from curriculum_ops.generation.prompts import ARCHITECTURE_PROMPT_HEADER

MALFORMED_RESPONSE = "I'm sorry, I wasn't able to put the course together in the requested format."

_PROVIDER_SECTION = re.compile(r"^### (.+)$", re.MULTILINE)
_LESSON_TITLE = re.compile(r"^\*\*Lesson Title:\*\* (.+)$", re.MULTILINE)
_LESSON_PROVIDER = re.compile(r"^\*\*AI Tool/Provider:\*\* (.+)$", re.MULTILINE)


class FakeGenerationClient:
    """Scenario-based test double for the GenerationClient protocol."""

    VALID_SCENARIOS = {"happy_path", "malformed_once", "malformed", "truncated", "empty_plan"}

    def __init__(self, scenario: str = "happy_path"):
        """Initialize FakeGenerationClient with a named scenario.

        Raises:
            ValueError: If scenario is not recognized
        """
        if scenario not in self.VALID_SCENARIOS:
            raise ValueError(f"Unknown scenario: {scenario}. Valid scenarios: {self.VALID_SCENARIOS}")
        self.scenario = scenario
        self.calls: list[tuple[str, int]] = []

    async def complete(self, prompt: str, max_tokens: int) -> str:
        self.calls.append((prompt, max_tokens))

        if self.scenario == "malformed":
            return MALFORMED_RESPONSE
        if self.scenario == "malformed_once" and len(self.calls) == 1:
            return MALFORMED_RESPONSE

        if prompt.startswith(ARCHITECTURE_PROMPT_HEADER):
            return self._course_plan(prompt)
        return self._lesson_deck(prompt)

    def _course_plan(self, prompt: str) -> str:
        providers = _PROVIDER_SECTION.findall(prompt) or ["Claude"]
        lessons = []
        if self.scenario != "empty_plan":
            lessons = [
                {
                    "title": f"Master {provider}'s Latest Release",
                    "provider": provider,
                    "level": "intermediate",
                    "scenario": f"An operations lead adopts the newest {provider} capability for a weekly report",
                    "objectives": [f"Configure the new {provider} feature", "Compare it with the previous workflow"],
                    "keyTopics": ["setup", "configuration", "limitations"],
                    "difficulty_notes": "Covers edge cases around permissions and rate limits.",
                }
                for provider in providers
            ]
        plan = {
            "courseName": "What's New in AI Tools",
            "courseDescription": "Hands-on coverage of the latest approved provider updates.",
            "track": "everyone",
            "level": "intermediate",
            "lessons": lessons,
        }
        return f"```json\n{json.dumps(plan, indent=2)}\n```"

    def _lesson_deck(self, prompt: str) -> str:
        title_match = _LESSON_TITLE.search(prompt)
        provider_match = _LESSON_PROVIDER.search(prompt)
        title = title_match.group(1).strip() if title_match else "Generated Lesson"
        provider = provider_match.group(1).strip() if provider_match else "AI Tool"

        deck = {
            "title": title,
            "slides": [
                {"type": "title", "header": provider, "content": title, "tags": ["AI", "Intermediate", "45 min"]},
                {
                    "type": "overview",
                    "header": "HANDS-ON WORKSHOP",
                    "projectName": "Weekly report assistant",
                    "features": [{"icon": "*", "title": "Automation", "desc": "Draft the report automatically"}],
                },
                {
                    "type": "step",
                    "stepNumber": 1,
                    "header": "Open the new workspace",
                    "content": "Sign in and open the feature panel.",
                    "specialBoxes": [{"type": "tip", "content": "Pin the panel for quick access."}],
                },
                {
                    "type": "screenshot",
                    "header": "Feature panel",
                    "screenshotPlaceholder": "Settings > Features, with the new toggle highlighted",
                    "callout": "The toggle must be enabled before step 2.",
                },
                {"type": "closing", "header": "Turn Ideas Into Reality", "cta": "What will you build next?"},
            ],
            "companionDoc": f"# {title}\n\nFollow the slides step by step.",
        }
        text = json.dumps(deck)

        if self.scenario == "truncated":
            cut = text.index('{"type": "closing"') + 12
            return text[:cut]
        return text
