import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from astrogpt.core.config import Settings, get_settings
from astrogpt.core.llm import CompletionClient


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )

    app = FastAPI(
        title="AstroGPT API",
        description="Streams astrological and numerological readings",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.completion_client = CompletionClient(settings)

    # Enable CORS for frontend communication
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import here to avoid circular imports at package import time
    from astrogpt.api.routes import router
    app.include_router(router, prefix="/api", tags=["Chat"])

    @app.get("/", tags=["Root"])
    async def root():
        return {"message": "AstroGPT API", "status": "running"}

    return app


app = create_app()
