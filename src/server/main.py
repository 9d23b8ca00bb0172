"""FastAPI application for md2slack."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers.convert import router as convert_router
from server.server_config import API_DESCRIPTION, API_TITLE

app = FastAPI(title=API_TITLE, description=API_DESCRIPTION)
app.include_router(convert_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "ok"}
