import json
from typing import AsyncIterator

from astrogpt.core.models import StreamEvent

DONE = "[DONE]"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_event(content: str) -> str:
    """Encode one fragment as a server-sent event data line."""
    return f"data: {json.dumps(StreamEvent(content=content).model_dump())}\n\n"


async def single_message_stream(content: str) -> AsyncIterator[str]:
    yield format_event(content)
    yield format_event(DONE)
