class AstroGPTError(Exception):
    """Base class for errors raised while handling a chat request."""


class FileProcessingError(AstroGPTError):
    def __init__(self, filename: str):
        super().__init__(f"Failed to process file {filename}")
        self.filename = filename


class LLMConfigurationError(AstroGPTError):
    """The LLM client cannot be built from the current settings."""
