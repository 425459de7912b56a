"""Core helpers: settings, prompts, document extraction and the LLM stream bridge."""

from .errors import AstroGPTError, FileProcessingError, LLMConfigurationError
from .models import ChatForm, ErrorResponse, StreamEvent, UploadedFile

__all__ = [
    "AstroGPTError",
    "FileProcessingError",
    "LLMConfigurationError",
    "ChatForm",
    "ErrorResponse",
    "StreamEvent",
    "UploadedFile",
]
