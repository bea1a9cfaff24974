"""Severity classification for provider updates.

Pure domain functions. No DB access, fully deterministic.
"""

from enum import StrEnum


class Severity(StrEnum):
    """How strongly an update is likely to affect existing lessons."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


# Tier order matters (first match wins); keyword order inside a tier does not.
SEVERITY_KEYWORDS: tuple[tuple[Severity, tuple[str, ...]], ...] = (
    (Severity.CRITICAL, ("deprecated", "removed", "breaking", "discontinued", "end of life", "shutdown")),
    (Severity.HIGH, ("new feature", "introducing", "announcing", "launch", "release", "now available")),
    (Severity.MEDIUM, ("improved", "enhanced", "better", "faster", "updated", "upgrade")),
    (Severity.LOW, ("fix", "patch", "minor", "bug fix", "documentation")),
)


def update_text(title: str, summary: str | None = None, raw_text: str | None = None) -> str:
    """Combined, lowercased text every keyword rule scans."""
    return f"{title} {summary or ''} {raw_text or ''}".lower()


def classify_severity(text: str) -> Severity:
    """Return the first severity tier whose keywords appear in ``text``.

    Args:
        text: Combined update text (see update_text); matched case-insensitively

    Returns:
        Matching Severity, or Severity.INFO when no keyword matches
    """
    lowered = text.lower()
    for severity, keywords in SEVERITY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return severity
    return Severity.INFO
