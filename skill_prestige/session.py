"""A prestige session: one save's ledger plus the collaborators that act on it."""

from __future__ import annotations

from typing import Iterable

from skill_prestige.catalog import SkillCatalog
from skill_prestige.engine import PrestigeEngine
from skill_prestige.host import PlayerHost
from skill_prestige.ledger import PrestigeLedger
from skill_prestige.models import CostSchedule, PlayerState, Recipe


class PrestigeSession:
    """Owns the ledger for one save and wires the engine to it.

    Every skill in the catalog gets a ledger record on construction.
    """

    def __init__(
        self,
        *,
        catalog: SkillCatalog,
        costs: CostSchedule,
        ledger: PrestigeLedger | None = None,
        player: PlayerState | None = None,
        recipes: Iterable[Recipe] = (),
    ) -> None:
        self.catalog = catalog
        self.costs = costs
        self.ledger = ledger if ledger is not None else PrestigeLedger()
        self.ledger.ensure_records(s.name for s in catalog.all_skills())
        self.host = PlayerHost(
            player if player is not None else PlayerState(),
            recipes,
            ledger=self.ledger,
        )
        self.engine = PrestigeEngine(
            ledger=self.ledger,
            catalog=catalog,
            costs=costs,
            experience=self.host,
            recipes=self.host,
            effects=self.host,
        )
