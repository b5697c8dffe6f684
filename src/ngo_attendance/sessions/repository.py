from __future__ import annotations

from typing import Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def load_all(self) -> Sequence[Session]:
        raise NotImplementedError

    def save_all(self, sessions: Sequence[Session]) -> None:
        """Replace the stored sessions, attendance maps included."""

        raise NotImplementedError
