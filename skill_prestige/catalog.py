"""Skill catalog: which skills exist and which professions they offer.

The engine resolves a profession's owning skill through the protocol:

    def all_skills(self) -> Sequence[Skill]: ...
    def owners_of(self, profession_id: int) -> list[Skill]: ...

StaticSkillCatalog builds a profession -> owning-skills index once at
construction, so each lookup is a dict hit instead of a scan over every
skill. The index keeps *all* claimants: a profession listed under two skills
is a catalog inconsistency that the engine must report, not paper over.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Protocol, Sequence

from skill_prestige.models import Profession, Skill

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

class SkillCatalog(Protocol):
    def all_skills(self) -> Sequence[Skill]: ...

    def owners_of(self, profession_id: int) -> list[Skill]: ...


# ---------------------------------------------------------------------------
# ProfessionLookupError
# ---------------------------------------------------------------------------

class ProfessionLookupError(LookupError):
    """Raised when a profession does not resolve to exactly one skill."""

    def __init__(self, profession_id: int, owners: list[str]) -> None:
        self.profession_id = profession_id
        self.owners = owners
        if owners:
            msg = f"Profession {profession_id} is claimed by several skills: {', '.join(owners)}"
        else:
            msg = f"No skill found for profession {profession_id}"
        super().__init__(msg)


# ---------------------------------------------------------------------------
# StaticSkillCatalog
# ---------------------------------------------------------------------------

class StaticSkillCatalog:
    """A catalog over a fixed list of skills."""

    def __init__(self, skills: Iterable[Skill]) -> None:
        self._skills = list(skills)
        self._owners: dict[int, list[Skill]] = defaultdict(list)
        for skill in self._skills:
            for profession in skill.professions:
                self._owners[profession.id].append(skill)
        for pid, owners in self._owners.items():
            if len(owners) > 1:
                logger.warning(
                    "Profession %d listed under %d skills: %s",
                    pid, len(owners), ", ".join(s.name for s in owners),
                )

    def all_skills(self) -> Sequence[Skill]:
        return list(self._skills)

    def owners_of(self, profession_id: int) -> list[Skill]:
        return list(self._owners.get(profession_id, []))


def owning_skill(catalog: SkillCatalog, profession_id: int) -> Skill:
    """Return the single skill owning *profession_id* or raise ProfessionLookupError."""
    owners = catalog.owners_of(profession_id)
    if len(owners) != 1:
        raise ProfessionLookupError(profession_id, [s.name for s in owners])
    return owners[0]


# ---------------------------------------------------------------------------
# Vanilla skills
# ---------------------------------------------------------------------------

def _skill(name: str, first_id: int, names: list[str]) -> Skill:
    # Two tier-1 professions, then four tier-2 professions, with consecutive ids.
    return Skill(
        name=name,
        professions=[
            Profession(id=first_id + i, name=n, tier=1 if i < 2 else 2)
            for i, n in enumerate(names)
        ],
    )


DEFAULT_SKILLS: list[Skill] = [
    _skill("Farming", 0, ["Rancher", "Tiller", "Coopmaster", "Shepherd", "Artisan", "Agriculturist"]),
    _skill("Fishing", 6, ["Fisher", "Trapper", "Angler", "Pirate", "Mariner", "Luremaster"]),
    _skill("Foraging", 12, ["Forester", "Gatherer", "Lumberjack", "Tapper", "Botanist", "Tracker"]),
    _skill("Mining", 18, ["Miner", "Geologist", "Blacksmith", "Prospector", "Excavator", "Gemologist"]),
    _skill("Combat", 24, ["Fighter", "Scout", "Brute", "Defender", "Acrobat", "Desperado"]),
]


def default_catalog() -> StaticSkillCatalog:
    return StaticSkillCatalog(DEFAULT_SKILLS)
