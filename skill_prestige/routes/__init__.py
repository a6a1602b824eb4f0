"""FastAPI API endpoints under /api.

Endpoint groups: settings (per-save prestige options and health), prestige
(records, profession purchases, skill resets, player state).

Every mutating endpoint loads the session from storage, runs one engine
transaction and writes the session back.
"""

from fastapi import APIRouter

from .prestige import router as prestige_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(prestige_router)
