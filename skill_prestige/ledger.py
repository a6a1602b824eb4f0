"""Prestige ledger: the per-skill prestige records of one save.

The ledger only hands out records; it never changes a balance itself.
Points and purchased professions are mutated exclusively by
PrestigeEngine.purchase_profession and PrestigeEngine.reset_skill.
"""

from __future__ import annotations

import threading
from typing import Iterable

from skill_prestige.models import PrestigeRecord, PrestigeSet


class PrestigeLedger:
    def __init__(self, records: Iterable[PrestigeRecord] = ()) -> None:
        self._records: dict[str, PrestigeRecord] = {}
        self._lock = threading.Lock()
        for record in records:
            if record.skill in self._records:
                raise ValueError(f"Duplicate prestige record for skill {record.skill!r}")
            self._records[record.skill] = record

    def get_record(self, skill: str) -> PrestigeRecord:
        """Return the record for *skill*, creating an empty one on first use."""
        with self._lock:
            record = self._records.get(skill)
            if record is None:
                record = PrestigeRecord(skill=skill)
                self._records[skill] = record
            return record

    def all_records(self) -> list[PrestigeRecord]:
        with self._lock:
            return list(self._records.values())

    def ensure_records(self, skills: Iterable[str]) -> None:
        for skill in skills:
            self.get_record(skill)

    def __contains__(self, skill: object) -> bool:
        return skill in self._records

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Persisted form
    # ------------------------------------------------------------------

    @classmethod
    def from_prestige_set(cls, prestige_set: PrestigeSet) -> PrestigeLedger:
        return cls(prestige_set.prestiges)

    def to_prestige_set(self) -> PrestigeSet:
        return PrestigeSet(
            prestiges=[r.model_copy(deep=True) for r in self.all_records()]
        )
