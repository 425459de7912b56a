import uvicorn

from astrogpt.app import app
from astrogpt.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
