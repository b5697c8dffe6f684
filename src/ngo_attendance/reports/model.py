from __future__ import annotations

from dataclasses import dataclass

from ..participants.model import Participant


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for one session against the current roster."""

    total: int
    present: tuple[Participant, ...]
    absent: tuple[Participant, ...]
    rate: float

    @property
    def present_count(self) -> int:
        return len(self.present)

    @property
    def absent_count(self) -> int:
        return len(self.absent)
