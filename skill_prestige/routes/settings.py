"""Health check and per-save prestige option endpoints."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(request: Request):
    """Get the prestige options (costs and reset amounts)."""
    return request.app.state.storage.get_config()


@router.patch("/settings")
async def update_settings(request: Request, body: UpdateSettings):
    """Update the prestige options (partial merge)."""
    try:
        return request.app.state.storage.update_config(body.model_dump(exclude_none=True))
    except ValidationError as e:
        raise HTTPException(422, str(e)) from e
