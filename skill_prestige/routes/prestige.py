"""Prestige record, purchase, reset and player endpoints."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from skill_prestige.session import PrestigeSession

from .models import PrestigeList

router = APIRouter()

_PURCHASE_STATUS = {
    "success": 200,
    "insufficient_points": 409,
    "already_purchased": 409,
    "profession_lookup_error": 422,
    "unknown_profession_tier": 422,
}


@contextmanager
def _session(request: Request, *, save: bool) -> Iterator[PrestigeSession]:
    """Load the session, yield it, and write it back when *save* is set."""
    state = request.app.state
    with state.lock:
        session = state.storage.load_session(state.catalog)
        yield session
        if save:
            state.storage.save_session(session)


def _require_skill(request: Request, skill: str) -> None:
    if not any(s.name == skill for s in request.app.state.catalog.all_skills()):
        raise HTTPException(404, "Skill not found")


@router.get("/prestiges", response_model=PrestigeList)
async def list_prestiges(request: Request):
    """List the prestige record of every skill."""
    with _session(request, save=False) as session:
        records = sorted(session.ledger.all_records(), key=lambda r: r.skill)
        return PrestigeList(prestiges=records)


@router.get("/prestiges/{skill}")
async def get_prestige(request: Request, skill: str):
    """Get the prestige record of one skill."""
    _require_skill(request, skill)
    with _session(request, save=False) as session:
        return session.engine.get_record(skill)


@router.post("/professions/{profession_id}/purchase")
async def purchase_profession(request: Request, profession_id: int):
    """Spend prestige points to permanently unlock a profession."""
    with _session(request, save=True) as session:
        result = session.engine.purchase_profession(profession_id)
    return JSONResponse(
        status_code=_PURCHASE_STATUS[result.outcome],
        content=result.model_dump(mode="json"),
    )


@router.post("/skills/{skill}/reset")
async def reset_skill(request: Request, skill: str):
    """Prestige a skill: trade experience and recipes for prestige points."""
    _require_skill(request, skill)
    with _session(request, save=True) as session:
        return session.engine.reset_skill(skill)


@router.get("/player")
async def get_player(request: Request):
    """Get the player's experience, professions and known recipes."""
    with _session(request, save=False) as session:
        return session.host.state
