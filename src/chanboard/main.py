# src/chanboard/main.py
"""HTTP entry point exposing a health check and the client-side script."""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.orm import Session

from chanboard import __version__
from chanboard.core.settings import settings
from chanboard.db.session import get_db

STATIC_DIR = Path(__file__).resolve().parent / "ui" / "static"

app = FastAPI(
    title=settings.app_name,
    description="Imageboard persistence layer",
    version=__version__,
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/health")
def health_check(db: Session = Depends(get_db)) -> dict[str, str]:
    """Verify the service is running and the database answers."""
    db.execute(text("SELECT 1"))
    return {"status": "ok"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic information about the service."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "script": "/static/script.js",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("chanboard.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
