"""Core domain models.

The ledger, the engine and storage all operate on these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

RecipeKind = Literal["crafting", "cooking"]

PurchaseOutcome = Literal[
    "success",
    "insufficient_points",
    "already_purchased",
    "profession_lookup_error",
    "unknown_profession_tier",
]

ResetOutcome = Literal["ok", "partial_failure"]


# ---------------------------------------------------------------------------
# Catalog definitions
# ---------------------------------------------------------------------------

class Profession(BaseModel):
    """A purchasable profession belonging to one skill."""

    id: int
    name: str
    tier: int  # 1 = unlocked at level 5, 2 = unlocked at level 10


class Skill(BaseModel):
    """A host skill and the professions it offers."""

    name: str
    professions: list[Profession] = Field(default_factory=list)


class Recipe(BaseModel):
    """A crafting or cooking recipe definition."""

    name: str
    kind: RecipeKind
    unlock: str = ""  # e.g. "Farming 3"; empty for recipes not granted by a skill


# ---------------------------------------------------------------------------
# Ledger records
# ---------------------------------------------------------------------------

class PrestigeRecord(BaseModel):
    """Prestige state for a single skill."""

    skill: str
    points: int = Field(default=0, ge=0)
    purchased_professions: set[int] = Field(default_factory=set)
    saved_crafting_recipe_counts: dict[str, int] = Field(default_factory=dict)
    saved_cooking_recipe_counts: dict[str, int] = Field(default_factory=dict)

    @field_validator(
        "purchased_professions",
        "saved_crafting_recipe_counts",
        "saved_cooking_recipe_counts",
        mode="before",
    )
    @classmethod
    def _null_to_empty(cls, value, info):
        # Older saves wrote null for containers that were never touched.
        if value is None:
            return set() if info.field_name == "purchased_professions" else {}
        return value


class PrestigeSet(BaseModel):
    """The persisted form of a ledger: every record for one save."""

    prestiges: list[PrestigeRecord] = Field(default_factory=list)


class CostSchedule(BaseModel):
    """Per-save prestige options."""

    tier_one_cost: int = Field(default=1, gt=0)
    tier_two_cost: int = Field(default=2, gt=0)
    points_per_reset: int = Field(default=1, gt=0)
    experience_cost_per_reset: int = Field(default=15000, ge=0)


# ---------------------------------------------------------------------------
# Host state
# ---------------------------------------------------------------------------

class PlayerState(BaseModel):
    """The slice of the host's player data the prestige system touches."""

    experience: dict[str, int] = Field(default_factory=dict)
    professions: set[int] = Field(default_factory=set)
    crafting_recipes: dict[str, int] = Field(default_factory=dict)  # name -> times crafted
    cooking_recipes: dict[str, int] = Field(default_factory=dict)  # name -> times cooked


# ---------------------------------------------------------------------------
# Transaction results
# ---------------------------------------------------------------------------

class PurchaseResult(BaseModel):
    """Outcome of PrestigeEngine.purchase_profession."""

    outcome: PurchaseOutcome
    profession_id: int
    skill: str | None = None
    cost: int | None = None
    points: int | None = None  # balance after the attempt
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == "success"


class ResetResult(BaseModel):
    """Outcome of PrestigeEngine.reset_skill.

    A partial failure is not rolled back; `completed` lists the steps that
    took effect before the failure.
    """

    outcome: ResetOutcome
    skill: str
    completed: list[str] = Field(default_factory=list)
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == "ok"
