from pathlib import Path

import pytest

from skill_prestige.catalog import default_catalog
from skill_prestige.models import CostSchedule, PlayerState
from skill_prestige.session import PrestigeSession
from skill_prestige.storage import Storage


@pytest.fixture
def storage(tmp_path: Path) -> Storage:
    """Fresh save directory for every test."""
    return Storage(tmp_path / "save")


@pytest.fixture
def costs() -> CostSchedule:
    return CostSchedule(
        tier_one_cost=1,
        tier_two_cost=2,
        points_per_reset=1,
        experience_cost_per_reset=15000,
    )


@pytest.fixture
def session(costs: CostSchedule) -> PrestigeSession:
    return PrestigeSession(
        catalog=default_catalog(),
        costs=costs,
        player=PlayerState(experience={"Farming": 20000}),
    )
