"""JSON file storage.

All state for one save lives in flat JSON files under a base directory.
Reads and writes go through plain helper methods that load and dump JSON;
a missing file reads as the defaults.

Directory layout:

    {base}/
      config.json      ← CostSchedule (per-save prestige options)
      prestige.json    ← PrestigeSet (one record per skill)
      player.json      ← PlayerState (experience, professions, known recipes)
      recipes.json     ← list of Recipe definitions used for recipe removal
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from skill_prestige.catalog import SkillCatalog
from skill_prestige.ledger import PrestigeLedger
from skill_prestige.models import CostSchedule, PlayerState, PrestigeSet, Recipe
from skill_prestige.session import PrestigeSession

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._base.mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        return self._base

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _path(self, name: str) -> Path:
        return self._base / name

    def _read_json(self, path: Path) -> Any:
        return json.loads(path.read_text())

    def _write_json(self, path: Path, data: Any) -> None:
        path.write_text(json.dumps(data, indent=2))

    # ------------------------------------------------------------------
    # Config
    # ------------------------------------------------------------------

    def get_config(self) -> CostSchedule:
        """Read options, returning defaults merged with stored values."""
        path = self._path("config.json")
        if not path.is_file():
            return CostSchedule()
        stored = self._read_json(path)
        return CostSchedule.model_validate({**CostSchedule().model_dump(), **stored})

    def update_config(self, fields: dict[str, Any]) -> CostSchedule:
        """Merge fields into the options and persist. Returns the full options.

        Unknown keys are ignored; invalid values raise ValidationError and
        leave the stored options untouched.
        """
        merged = self.get_config().model_dump()
        merged.update({k: v for k, v in fields.items() if k in CostSchedule.model_fields})
        config = CostSchedule.model_validate(merged)
        self._path("config.json").write_text(config.model_dump_json(indent=2))
        logger.info("Prestige options updated: %s", config.model_dump())
        return config

    # ------------------------------------------------------------------
    # Prestige records
    # ------------------------------------------------------------------

    def get_prestige_set(self) -> PrestigeSet:
        path = self._path("prestige.json")
        if not path.exists():
            return PrestigeSet()
        return PrestigeSet.model_validate_json(path.read_text())

    def save_prestige_set(self, prestige_set: PrestigeSet) -> None:
        self._path("prestige.json").write_text(prestige_set.model_dump_json(indent=2))

    # ------------------------------------------------------------------
    # Player
    # ------------------------------------------------------------------

    def get_player(self) -> PlayerState:
        path = self._path("player.json")
        if not path.exists():
            return PlayerState()
        return PlayerState.model_validate_json(path.read_text())

    def save_player(self, player: PlayerState) -> None:
        self._path("player.json").write_text(player.model_dump_json(indent=2))

    # ------------------------------------------------------------------
    # Recipe definitions
    # ------------------------------------------------------------------

    def get_recipes(self) -> list[Recipe]:
        path = self._path("recipes.json")
        if not path.exists():
            return []
        return [Recipe.model_validate(r) for r in self._read_json(path)]

    def save_recipes(self, recipes: list[Recipe]) -> None:
        self._write_json(self._path("recipes.json"), [r.model_dump() for r in recipes])

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def load_session(self, catalog: SkillCatalog) -> PrestigeSession:
        return PrestigeSession(
            catalog=catalog,
            costs=self.get_config(),
            ledger=PrestigeLedger.from_prestige_set(self.get_prestige_set()),
            player=self.get_player(),
            recipes=self.get_recipes(),
        )

    def save_session(self, session: PrestigeSession) -> None:
        self.save_prestige_set(session.ledger.to_prestige_set())
        self.save_player(session.host.state)
