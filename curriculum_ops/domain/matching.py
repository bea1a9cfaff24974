"""Lesson matching rules: provider aliases, relevance scoring, change suggestions.

Pure domain functions. The analyzer service feeds these with lessons loaded
from the catalog store.
"""

from dataclasses import dataclass

from curriculum_ops.domain.severity import Severity

RELEVANCE_THRESHOLD = 0.1  # alias-pass lessons must score strictly above this
KEYWORD_MATCH_SCORE = 0.3  # fixed score for lessons found only by keyword search
MAX_AFFECTED_LESSONS = 10
MIN_WORD_LENGTH = 4  # tokens must be longer than 3 characters

PROVIDER_ALIASES: dict[str, tuple[str, ...]] = {
    "ChatGPT": ("chatgpt", "gpt-4", "gpt-4o", "gpt-5", "openai chat"),
    "Claude": ("claude", "anthropic", "claude 3", "sonnet", "opus", "haiku"),
    "Gemini": ("gemini", "google ai", "bard", "gemini pro", "gemini flash"),
    "Veo": ("veo", "google veo", "veo 2", "veo 3"),
    "MidJourney": ("midjourney", "mid journey", "mj"),
    "ElevenLabs": ("elevenlabs", "eleven labs", "11labs"),
    "n8n": ("n8n", "nodemation"),
    "Replit": ("replit", "repl.it"),
    "Sora": ("sora", "openai sora"),
    "NotebookLM": ("notebooklm", "notebook lm", "google notebooklm"),
    "Perplexity": ("perplexity", "perplexity ai"),
    "Canva": ("canva", "magic studio"),
    "Lovable": ("lovable", "lovable.dev"),
    "Julius AI": ("julius", "julius ai"),
    "Gamma": ("gamma", "gamma.app"),
    "Google Whisk": ("whisk", "google whisk"),
}


@dataclass
class LessonMatch:
    """A lesson judged relevant to an update."""

    lesson_id: str
    lesson_title: str
    relevance_score: float
    suggested_changes: str


def mentioned_providers(text: str, declared_provider: str | None = None) -> list[str]:
    """Providers whose aliases appear in ``text``, plus the declared provider.

    Order follows the alias table; the declared provider is appended last if
    no alias already named it.
    """
    lowered = text.lower()
    providers = [
        provider
        for provider, aliases in PROVIDER_ALIASES.items()
        if any(alias in lowered for alias in aliases)
    ]
    if declared_provider and declared_provider not in providers:
        providers.append(declared_provider)
    return providers


def tokenize(text: str) -> list[str]:
    """Whitespace tokens longer than three characters."""
    return [word for word in text.lower().split() if len(word) >= MIN_WORD_LENGTH]


def relevance_score(text: str, lesson_text: str) -> float:
    """Fraction of update tokens found as substrings of the lesson text, clamped to [0, 1]."""
    words = tokenize(text)
    lesson_lower = lesson_text.lower()
    matching = [word for word in words if word in lesson_lower]
    score = len(matching) / max(len(words), 1)
    return min(score, 1.0)


def suggested_changes(severity: Severity, update_title: str, lesson_title: str) -> str:
    """Severity-dependent editing hint for an alias-matched lesson."""
    if severity == Severity.CRITICAL:
        return (
            f'URGENT: Review and update "{lesson_title}" - {update_title} '
            "may affect core functionality taught in this lesson."
        )
    if severity == Severity.HIGH:
        return (
            f'Consider adding new content about "{update_title}" to "{lesson_title}" '
            "- this feature should be covered."
        )
    if severity == Severity.MEDIUM:
        return f'Review "{lesson_title}" and consider mentioning: {update_title}'
    return f'Optional: Check if "{lesson_title}" needs minor updates for: {update_title}'


def keyword_match_changes(update_title: str) -> str:
    return f"Review lesson content for updates related to: {update_title}"


def rank_matches(matches: list[LessonMatch], limit: int = MAX_AFFECTED_LESSONS) -> list[LessonMatch]:
    """Sort by relevance (descending, stable for ties) and keep the top ``limit``."""
    return sorted(matches, key=lambda match: match.relevance_score, reverse=True)[:limit]
