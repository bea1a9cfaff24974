"""GenerationClient protocol and the Anthropic-backed implementation.

The content generator only needs "send prompt, receive text". Everything
model-specific (credentials, streaming, overload retry) lives here.
"""

from typing import Protocol, runtime_checkable

import anthropic
import structlog
from anthropic._exceptions import OverloadedError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.exceptions import ConfigError

logger = structlog.get_logger(__name__)


@runtime_checkable
class GenerationClient(Protocol):
    """Text-completion capability used for course and lesson generation."""

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Return the full text of one completion for ``prompt``.

        Raises:
            ConfigError: The client has no credential configured
        """
        ...


class AnthropicGenerationClient:
    """Streams completions from the Anthropic Messages API.

    Long lesson decks use large token budgets, so responses are always
    streamed and concatenated. Only OverloadedError (529) is retried.
    """

    def __init__(self, api_key: str | None = None, model: str | None = None):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.anthropic_api_key
        self.model = model or settings.generation_model
        self._client: anthropic.AsyncAnthropic | None = None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if not self.api_key:
            raise ConfigError(
                "ANTHROPIC_API_KEY environment variable is not set. Set it before restarting the API server."
            )
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    @retry(
        retry=retry_if_exception_type(OverloadedError),
        stop=stop_after_attempt(4),
        wait=wait_exponential(multiplier=2, min=2, max=30),
        reraise=True,
        before_sleep=lambda rs: logger.warning(
            "claude_overloaded_retrying",
            attempt=rs.attempt_number,
            sleep_seconds=rs.next_action.sleep,
        ),
    )
    async def complete(self, prompt: str, max_tokens: int) -> str:
        client = self._get_client()
        chunks: list[str] = []
        async with client.messages.stream(
            model=self.model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        ) as stream:
            async for text in stream.text_stream:
                chunks.append(text)

        response_text = "".join(chunks)
        logger.debug("generation_completed", model=self.model, max_tokens=max_tokens, length=len(response_text))
        return response_text
