from __future__ import annotations

from typing import Protocol, Sequence

from .model import Participant


class ParticipantRepository(Protocol):
    """Persistence interface for the participant roster.

    The whole roster is read once at startup and written back after every change.
    """

    def load_all(self) -> Sequence[Participant]:
        raise NotImplementedError

    def save_all(self, participants: Sequence[Participant]) -> None:
        raise NotImplementedError
