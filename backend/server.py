"""
Notes Backend - server launcher

    python backend/server.py
"""
import uvicorn

from notes_app.config import settings
from notes_app.main import app


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="debug" if settings.debug else "info")
