"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel

from skill_prestige.models import PrestigeRecord


class UpdateSettings(BaseModel):
    tier_one_cost: int | None = None
    tier_two_cost: int | None = None
    points_per_reset: int | None = None
    experience_cost_per_reset: int | None = None


class PrestigeList(BaseModel):
    prestiges: list[PrestigeRecord]
