"""Prestige engine: the two transactions that change a ledger.

purchase_profession(profession_id)
  1. Resolve the single skill that owns the profession.
  2. Pick the cost for the profession's tier.
  3. Reject a profession that is already purchased.
  4. Check the balance, then deduct and record the profession together.
  5. Ask the host to apply the newly owned profession.

reset_skill(skill)
  1. Deduct the reset experience cost (clamped at zero).
  2. Mint points_per_reset prestige points.
  3. Remove the skill's crafting and cooking recipes and keep their counts.

Both transactions hold a per-skill lock, so concurrent callers never observe
a deducted balance without the matching profession or vice versa.

reset_skill is best-effort: a failure part way through is logged and
reported as a partial failure, and earlier steps stay applied.
"""

from __future__ import annotations

import logging
import threading

from skill_prestige.catalog import ProfessionLookupError, SkillCatalog, owning_skill
from skill_prestige.host import EffectApplier, ExperienceStore, RecipeRemover
from skill_prestige.ledger import PrestigeLedger
from skill_prestige.models import CostSchedule, PrestigeRecord, PurchaseResult, ResetResult

logger = logging.getLogger(__name__)


class PrestigeEngine:
    def __init__(
        self,
        *,
        ledger: PrestigeLedger,
        catalog: SkillCatalog,
        costs: CostSchedule,
        experience: ExperienceStore,
        recipes: RecipeRemover,
        effects: EffectApplier,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._costs = costs
        self._experience = experience
        self._recipes = recipes
        self._effects = effects
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, skill: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(skill, threading.Lock())

    def get_record(self, skill: str) -> PrestigeRecord:
        """Return a detached copy of the record for *skill*."""
        with self._lock_for(skill):
            return self._ledger.get_record(skill).model_copy(deep=True)

    def _cost_for_tier(self, tier: int) -> int | None:
        if tier == 1:
            return self._costs.tier_one_cost
        if tier == 2:
            return self._costs.tier_two_cost
        return None

    # ------------------------------------------------------------------
    # Purchase
    # ------------------------------------------------------------------

    def purchase_profession(self, profession_id: int) -> PurchaseResult:
        try:
            skill = owning_skill(self._catalog, profession_id)
        except ProfessionLookupError as e:
            logger.error("Unable to purchase profession %d: %s", profession_id, e)
            return PurchaseResult(
                outcome="profession_lookup_error",
                profession_id=profession_id,
                detail=str(e),
            )

        profession = next(p for p in skill.professions if p.id == profession_id)
        cost = self._cost_for_tier(profession.tier)
        if cost is None:
            logger.critical(
                "Profession %d of %s skill has unknown tier %d; nothing purchased",
                profession_id, skill.name, profession.tier,
            )
            return PurchaseResult(
                outcome="unknown_profession_tier",
                profession_id=profession_id,
                skill=skill.name,
                detail=f"Unknown profession tier {profession.tier}",
            )

        with self._lock_for(skill.name):
            record = self._ledger.get_record(skill.name)
            if profession_id in record.purchased_professions:
                logger.info(
                    "Profession %d already purchased for %s skill", profession_id, skill.name
                )
                return PurchaseResult(
                    outcome="already_purchased",
                    profession_id=profession_id,
                    skill=skill.name,
                    points=record.points,
                )

            remaining = record.points - cost
            if remaining < 0:
                logger.info(
                    "Not enough %s prestige points for profession %d (have %d, need %d)",
                    skill.name, profession_id, record.points, cost,
                )
                return PurchaseResult(
                    outcome="insufficient_points",
                    profession_id=profession_id,
                    skill=skill.name,
                    cost=cost,
                    points=record.points,
                )

            record.points = remaining
            record.purchased_professions.add(profession_id)

        logger.info(
            "Spent %d prestige point(s) on %s skill; profession %d permanently added",
            cost, skill.name, profession_id,
        )
        self._apply_effects()
        return PurchaseResult(
            outcome="success",
            profession_id=profession_id,
            skill=skill.name,
            cost=cost,
            points=remaining,
        )

    def _apply_effects(self) -> None:
        try:
            self._effects.ensure_profession_effects_applied()
        except Exception:
            logger.exception("Applying purchased profession effects failed")

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset_skill(self, skill: str) -> ResetResult:
        completed: list[str] = []
        logger.info("Prestiging %s skill", skill)
        with self._lock_for(skill):
            try:
                xp_cost = self._costs.experience_cost_per_reset
                experience = self._experience.get_experience(skill)
                new_experience = experience - xp_cost
                if new_experience < 0:
                    logger.warning(
                        "%s skill has %d experience, less than the %d reset cost; clamped to 0",
                        skill, experience, xp_cost,
                    )
                    new_experience = 0
                self._experience.set_experience(skill, new_experience)
                completed.append("experience")
                logger.info("Removed %d experience points from %s skill", experience - new_experience, skill)

                record = self._ledger.get_record(skill)
                record.points += self._costs.points_per_reset
                completed.append("points")
                logger.info(
                    "%d prestige point(s) added to %s skill", self._costs.points_per_reset, skill
                )

                record.saved_crafting_recipe_counts = dict(self._recipes.remove_crafting_recipes(skill))
                completed.append("crafting_recipes")
                record.saved_cooking_recipe_counts = dict(self._recipes.remove_cooking_recipes(skill))
                completed.append("cooking_recipes")
            except Exception as e:
                logger.exception(
                    "Prestige of %s skill failed after steps: %s",
                    skill, ", ".join(completed) or "none",
                )
                return ResetResult(
                    outcome="partial_failure",
                    skill=skill,
                    completed=completed,
                    detail=f"{type(e).__name__}: {e}",
                )

        return ResetResult(outcome="ok", skill=skill, completed=completed)
