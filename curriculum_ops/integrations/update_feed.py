"""Update Source: where candidate provider updates come from.

The analyzer never cares how updates were obtained. This module provides:
- UpdateSource: protocol every feed implements
- SeededUpdateSource: fixed demo announcement set with real documentation links
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable

from curriculum_ops.schemas.catalog import UpdateCreate


@runtime_checkable
class UpdateSource(Protocol):
    """A feed of candidate updates, not yet stored."""

    async def fetch(self) -> list[UpdateCreate]:
        ...


SEEDED_UPDATES = [
    {
        "provider": "ChatGPT",
        "title": "Operator - AI Agent That Uses the Web for You",
        "summary": (
            "OpenAI launches Operator, a new AI agent that can browse the web and complete tasks "
            "autonomously. Operator can fill out forms, book reservations, shop online, and interact "
            "with websites on your behalf."
        ),
        "source_url": "https://openai.com/index/introducing-operator/",
        "raw_text": (
            "Operator - AI Agent That Uses the Web for You\n\nOpenAI launches Operator, a new AI agent "
            "that can browse the web and complete tasks autonomously."
        ),
        "doc_urls": [
            {"label": "Operator Announcement", "url": "https://openai.com/index/introducing-operator/"},
            {"label": "Operator Safety & Guidelines", "url": "https://openai.com/operator-system-card/"},
            {"label": "ChatGPT Release Notes", "url": "https://help.openai.com/en/articles/6825453-chatgpt-release-notes"},
        ],
        "days_ago": 1,
    },
    {
        "provider": "Claude",
        "title": "Claude Now Available on iPhone with New Mobile App",
        "summary": (
            "Anthropic releases the official Claude iOS app with voice conversations, photo analysis, "
            "and seamless sync with web chats. Includes new features like real-time voice mode and "
            "camera integration."
        ),
        "source_url": "https://www.anthropic.com/news/claude-ios",
        "raw_text": (
            "Claude Now Available on iPhone with New Mobile App\n\nAnthropic releases the official "
            "Claude iOS app with voice conversations, photo analysis, and seamless sync."
        ),
        "doc_urls": [
            {"label": "Claude iOS App Announcement", "url": "https://www.anthropic.com/news/claude-ios"},
            {"label": "Claude Mobile Features", "url": "https://support.anthropic.com/en/collections/4078534-claude-mobile"},
            {"label": "Claude Release Notes", "url": "https://docs.anthropic.com/en/release-notes/overview"},
        ],
        "days_ago": 2,
    },
    {
        "provider": "Gemini",
        "title": "Gemini 2.0 Flash Thinking Mode - Enhanced Reasoning",
        "summary": (
            "Google releases Gemini 2.0 Flash with experimental Thinking Mode that shows the model "
            "reasoning process. Improved performance on complex math, coding, and multi-step problems."
        ),
        "source_url": "https://ai.google.dev/gemini-api/docs/thinking-mode",
        "raw_text": (
            "Gemini 2.0 Flash Thinking Mode - Enhanced Reasoning\n\nGoogle releases Gemini 2.0 Flash "
            "with experimental Thinking Mode that shows model reasoning."
        ),
        "doc_urls": [
            {"label": "Thinking Mode Documentation", "url": "https://ai.google.dev/gemini-api/docs/thinking-mode"},
            {"label": "Gemini 2.0 Flash Guide", "url": "https://ai.google.dev/gemini-api/docs/models/gemini-v2"},
            {
                "label": "Google AI Blog - Gemini 2.0",
                "url": "https://blog.google/technology/google-deepmind/google-gemini-ai-update-december-2024/",
            },
        ],
        "days_ago": 3,
    },
    {
        "provider": "MidJourney",
        "title": "Midjourney V6.1 with Improved Coherence and Text Rendering",
        "summary": (
            "Midjourney releases V6.1 with significantly improved text rendering in images, better hand "
            "anatomy, and more coherent complex scenes. New --style raw parameter for photorealistic outputs."
        ),
        "source_url": "https://docs.midjourney.com/docs/model-versions#v61",
        "raw_text": (
            "Midjourney V6.1 with Improved Coherence and Text Rendering\n\nMidjourney releases V6.1 with "
            "improved text rendering, better hands, and coherent scenes."
        ),
        "doc_urls": [
            {"label": "V6.1 Model Documentation", "url": "https://docs.midjourney.com/docs/model-versions#v61"},
            {"label": "V6.1 Parameter Guide", "url": "https://docs.midjourney.com/docs/parameter-list"},
            {"label": "Midjourney Changelog", "url": "https://docs.midjourney.com/changelog"},
        ],
        "days_ago": 4,
    },
    {
        "provider": "ElevenLabs",
        "title": "ElevenLabs Conversational AI - Build Voice Agents",
        "summary": (
            "ElevenLabs launches Conversational AI platform for building custom voice agents. Features "
            "include low-latency responses, interruption handling, custom knowledge bases, and tool calling."
        ),
        "source_url": "https://elevenlabs.io/docs/conversational-ai/overview",
        "raw_text": (
            "ElevenLabs Conversational AI - Build Voice Agents\n\nElevenLabs launches Conversational AI "
            "platform for building custom voice agents with low-latency responses."
        ),
        "doc_urls": [
            {"label": "Conversational AI Overview", "url": "https://elevenlabs.io/docs/conversational-ai/overview"},
            {"label": "Build Your First Agent", "url": "https://elevenlabs.io/docs/conversational-ai/quickstart"},
            {
                "label": "Conversational AI API Reference",
                "url": "https://elevenlabs.io/docs/api-reference/conversational-ai",
            },
        ],
        "days_ago": 5,
    },
]


class SeededUpdateSource:
    """Demo feed: five recent provider announcements, published 1-5 days before ``now``."""

    def __init__(self, now: datetime | None = None):
        self.now = now

    async def fetch(self) -> list[UpdateCreate]:
        now = self.now or datetime.now(timezone.utc)
        updates = []
        for item in SEEDED_UPDATES:
            data = {key: value for key, value in item.items() if key != "days_ago"}
            updates.append(UpdateCreate(**data, published_at=now - timedelta(days=item["days_ago"])))
        return updates
