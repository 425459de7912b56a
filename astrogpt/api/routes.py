import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.datastructures import UploadFile

from astrogpt.core.llm import CompletionClient, get_completion_client, relay_completion
from astrogpt.core.models import ChatForm, ErrorResponse, UploadedFile
from astrogpt.core.prompts import OFF_TOPIC_MESSAGE, build_user_content, is_astro_query
from astrogpt.core.sse import SSE_HEADERS, single_message_stream
from astrogpt.core.utils import extract_file_contents

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while processing your request"

router = APIRouter()


async def read_chat_form(request: Request) -> ChatForm:
    """Parse the multipart chat submission into a ChatForm."""
    form = await request.form()
    files = []
    for item in form.getlist("files"):
        if not isinstance(item, UploadFile):
            continue
        files.append(UploadedFile(filename=item.filename or "", content=await item.read()))

    message = form.get("message")
    session_id = form.get("sessionId")
    return ChatForm(
        message=message if isinstance(message, str) else None,
        session_id=session_id if isinstance(session_id, str) else None,
        files=files,
    )


@router.post('/chat')
async def chat(request: Request, llm: CompletionClient = Depends(get_completion_client)):
    """Stream an AstroGPT reading for the submitted message and attachments"""
    try:
        payload = await read_chat_form(request)
        logger.debug(f"Chat request for session {payload.session_id}")

        if not is_astro_query(payload.message):
            return StreamingResponse(
                single_message_stream(OFF_TOPIC_MESSAGE),
                media_type="text/event-stream",
                headers=SSE_HEADERS,
            )

        file_contents = await extract_file_contents(payload.files)
        user_content = build_user_content(payload.message, file_contents)
        stream = await llm.open_stream(user_content)

        return StreamingResponse(
            relay_completion(stream),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )
    except Exception as e:
        logger.error(f"Error in chat route: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERIC_ERROR).model_dump(),
        )

