"""Host collaborators: the game-side state the prestige engine reads and writes.

The engine depends only on these protocols:

    ExperienceStore  — get_experience(skill) / set_experience(skill, value)
    RecipeRemover    — remove_crafting_recipes(skill) / remove_cooking_recipes(skill)
    EffectApplier    — ensure_profession_effects_applied()

PlayerHost implements all three over an in-memory PlayerState. Production
code loads the PlayerState from storage and hands the host to the session;
tests build one directly or substitute their own doubles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Protocol

from skill_prestige.models import PlayerState, Recipe, RecipeKind

if TYPE_CHECKING:
    from skill_prestige.ledger import PrestigeLedger

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------

class ExperienceStore(Protocol):
    def get_experience(self, skill: str) -> int: ...

    def set_experience(self, skill: str, value: int) -> None: ...


class RecipeRemover(Protocol):
    def remove_crafting_recipes(self, skill: str) -> dict[str, int]: ...

    def remove_cooking_recipes(self, skill: str) -> dict[str, int]: ...


class EffectApplier(Protocol):
    def ensure_profession_effects_applied(self) -> None: ...


# ---------------------------------------------------------------------------
# PlayerHost
# ---------------------------------------------------------------------------

class PlayerHost:
    """In-memory host adapter over a PlayerState.

    Args:
        state:   The player data to read and mutate.
        recipes: Recipe definitions; a recipe is tied to a skill when its
                 unlock condition names the skill (e.g. "Farming 3").
        ledger:  Ledger consulted when applying purchased professions.
                 Without one, effect application is a no-op.
    """

    def __init__(
        self,
        state: PlayerState,
        recipes: Iterable[Recipe] = (),
        ledger: PrestigeLedger | None = None,
    ) -> None:
        self.state = state
        self._recipes = list(recipes)
        self._ledger = ledger

    # ------------------------------------------------------------------
    # ExperienceStore
    # ------------------------------------------------------------------

    def get_experience(self, skill: str) -> int:
        return self.state.experience.get(skill, 0)

    def set_experience(self, skill: str, value: int) -> None:
        self.state.experience[skill] = value

    # ------------------------------------------------------------------
    # RecipeRemover
    # ------------------------------------------------------------------

    def remove_crafting_recipes(self, skill: str) -> dict[str, int]:
        return self._remove(skill, "crafting", self.state.crafting_recipes)

    def remove_cooking_recipes(self, skill: str) -> dict[str, int]:
        return self._remove(skill, "cooking", self.state.cooking_recipes)

    def _remove(self, skill: str, kind: RecipeKind, known: dict[str, int]) -> dict[str, int]:
        logger.info("Removing %s %s recipes", skill, kind)
        removed: dict[str, int] = {}
        for recipe in self._recipes:
            if recipe.kind != kind or recipe.name not in known:
                continue
            if skill not in recipe.unlock.split():
                continue
            logger.debug("Removing %s %s recipe %s", skill, kind, recipe.name)
            removed[recipe.name] = known.pop(recipe.name)
        logger.info("%d %s %s recipes removed", len(removed), skill, kind)
        return removed

    # ------------------------------------------------------------------
    # EffectApplier
    # ------------------------------------------------------------------

    def ensure_profession_effects_applied(self) -> None:
        """Grant every purchased profession the player does not already have."""
        if self._ledger is None:
            return
        for record in self._ledger.all_records():
            missing = record.purchased_professions - self.state.professions
            if missing:
                logger.info(
                    "Adding missing %s professions: %s",
                    record.skill, ", ".join(str(p) for p in sorted(missing)),
                )
                self.state.professions |= missing
