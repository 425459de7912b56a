import logging
from typing import AsyncIterator

from fastapi import Request
from openai import AsyncOpenAI, AsyncStream
from openai.types.chat import ChatCompletionChunk

from astrogpt.core.config import Settings
from astrogpt.core.errors import LLMConfigurationError
from astrogpt.core.prompts import ASTROGPT_PROMPT
from astrogpt.core.sse import DONE, format_event

logger = logging.getLogger(__name__)


class CompletionClient:
    """Streams AstroGPT readings from an OpenAI-compatible chat completions API."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Lazily create and return a configured OpenAI client."""
        if self._client is not None:
            return self._client

        if not self.settings.OPENAI_API_KEY:
            raise LLMConfigurationError("OPENAI_API_KEY is not set on the server.")

        self._client = AsyncOpenAI(
            api_key=self.settings.OPENAI_API_KEY,
            base_url=self.settings.OPENAI_BASE_URL,
        )
        return self._client

    async def open_stream(self, user_content: str) -> AsyncStream[ChatCompletionChunk]:
        """
        Start a streaming completion for a single user turn.

        Awaiting this performs the request, so configuration, auth and
        connection failures are raised here, before any event is sent.
        """
        client = self._get_client()
        return await client.chat.completions.create(
            model=self.settings.LLM_MODEL,
            max_tokens=self.settings.LLM_MAX_TOKENS,
            temperature=self.settings.LLM_TEMPERATURE,
            stream=True,
            messages=[
                {"role": "system", "content": ASTROGPT_PROMPT},
                {"role": "user", "content": user_content},
            ],
        )


def get_completion_client(request: Request) -> CompletionClient:
    """Return the client bound to the settings the app was created with."""
    return request.app.state.completion_client


async def relay_completion(stream: AsyncStream[ChatCompletionChunk]) -> AsyncIterator[str]:
    """
    Re-emit each upstream text fragment as an SSE event, then the [DONE] event.

    Upstream errors propagate without a [DONE] event. The upstream stream is
    closed as soon as this generator finishes, fails or is closed by the server.
    """
    try:
        async for chunk in stream:
            if not chunk.choices:
                continue
            text = chunk.choices[0].delta.content
            if text:
                yield format_event(text)
    except Exception as e:
        logger.error(f"LLM stream failed mid-response: {e}", exc_info=True)
        raise
    finally:
        await stream.close()

    yield format_event(DONE)
