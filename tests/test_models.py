"""Tests for skill_prestige.models."""

import pytest
from pydantic import ValidationError

from skill_prestige.models import (
    CostSchedule,
    PlayerState,
    PrestigeRecord,
    PrestigeSet,
    Profession,
    PurchaseResult,
    Recipe,
    ResetResult,
)


class TestPrestigeRecord:
    def test_defaults(self) -> None:
        r = PrestigeRecord(skill="Farming")
        assert r.points == 0
        assert r.purchased_professions == set()
        assert r.saved_crafting_recipe_counts == {}
        assert r.saved_cooking_recipe_counts == {}

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PrestigeRecord(skill="Farming", points=-1)

    def test_duplicate_professions_collapse(self) -> None:
        r = PrestigeRecord.model_validate({"skill": "Farming", "purchased_professions": [1, 1, 4]})
        assert r.purchased_professions == {1, 4}

    def test_null_containers_become_empty(self) -> None:
        r = PrestigeRecord.model_validate({
            "skill": "Mining",
            "points": 2,
            "purchased_professions": None,
            "saved_crafting_recipe_counts": None,
            "saved_cooking_recipe_counts": None,
        })
        assert r.points == 2
        assert r.purchased_professions == set()
        assert r.saved_crafting_recipe_counts == {}
        assert r.saved_cooking_recipe_counts == {}

    def test_serialise_roundtrip(self) -> None:
        r = PrestigeRecord(
            skill="Fishing",
            points=3,
            purchased_professions={9, 6, 11},
            saved_crafting_recipe_counts={"Bait": 40, "Crab Pot": 2},
            saved_cooking_recipe_counts={"Sashimi": 0},
        )
        restored = PrestigeRecord.model_validate_json(r.model_dump_json())
        assert restored == r
        assert restored.purchased_professions == {6, 9, 11}
        assert restored.saved_crafting_recipe_counts == {"Bait": 40, "Crab Pot": 2}
        assert restored.saved_cooking_recipe_counts == {"Sashimi": 0}

    def test_purchased_order_not_significant(self) -> None:
        a = PrestigeRecord.model_validate({"skill": "Combat", "purchased_professions": [24, 26]})
        b = PrestigeRecord.model_validate({"skill": "Combat", "purchased_professions": [26, 24]})
        assert a == b


class TestPrestigeSet:
    def test_empty_by_default(self) -> None:
        assert PrestigeSet().prestiges == []

    def test_serialise_roundtrip(self) -> None:
        s = PrestigeSet(prestiges=[
            PrestigeRecord(skill="Farming", points=1),
            PrestigeRecord(skill="Mining", purchased_professions={18}),
        ])
        assert PrestigeSet.model_validate_json(s.model_dump_json()) == s


class TestCostSchedule:
    def test_defaults(self) -> None:
        c = CostSchedule()
        assert c.tier_one_cost == 1
        assert c.tier_two_cost == 2
        assert c.points_per_reset == 1
        assert c.experience_cost_per_reset == 15000

    @pytest.mark.parametrize("field", ["tier_one_cost", "tier_two_cost", "points_per_reset"])
    def test_costs_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            CostSchedule(**{field: 0})

    def test_experience_cost_may_be_zero(self) -> None:
        assert CostSchedule(experience_cost_per_reset=0).experience_cost_per_reset == 0

    def test_negative_experience_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CostSchedule(experience_cost_per_reset=-5)


class TestCatalogModels:
    def test_profession_fields(self) -> None:
        p = Profession(id=4, name="Artisan", tier=2)
        assert (p.id, p.name, p.tier) == (4, "Artisan", 2)

    def test_recipe_unlock_defaults_to_empty(self) -> None:
        assert Recipe(name="Chest", kind="crafting").unlock == ""

    def test_invalid_recipe_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Recipe(name="Chest", kind="smithing")


class TestPlayerState:
    def test_serialise_roundtrip(self) -> None:
        p = PlayerState(
            experience={"Farming": 100},
            professions={0, 5},
            crafting_recipes={"Scarecrow": 1},
            cooking_recipes={"Fried Egg": 2},
        )
        assert PlayerState.model_validate_json(p.model_dump_json()) == p


class TestResults:
    def test_purchase_ok_only_on_success(self) -> None:
        assert PurchaseResult(outcome="success", profession_id=1).ok
        assert not PurchaseResult(outcome="insufficient_points", profession_id=1).ok

    def test_invalid_purchase_outcome_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PurchaseResult(outcome="refunded", profession_id=1)

    def test_reset_ok(self) -> None:
        assert ResetResult(outcome="ok", skill="Farming").ok
        assert not ResetResult(outcome="partial_failure", skill="Farming").ok
