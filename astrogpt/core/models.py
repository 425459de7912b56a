from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class UploadedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes


class ChatForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None
    session_id: Optional[str] = None
    files: List[UploadedFile] = []


class StreamEvent(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    error: str
