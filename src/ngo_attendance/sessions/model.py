from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Session:
    """Domain entity: a single dated, timed event with its own attendance map.

    ``attendance`` is sparse: only participants that were toggled at least once
    have an entry. Use :meth:`is_present` instead of indexing it. The map is
    read-only; presence changes go through ``SessionService.toggle_attendance``.
    """

    id: str
    name: str
    date: date
    start_time: str
    end_time: str
    location: str
    description: Optional[str] = None
    attendance: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attendance", MappingProxyType(dict(self.attendance)))

    def is_present(self, participant_id: str) -> bool:
        return bool(self.attendance.get(participant_id, False))
