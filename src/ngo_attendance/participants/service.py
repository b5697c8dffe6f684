from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.identity import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, PersistenceError
from ..storage.warnings import PersistenceWarnings
from .model import Participant
from .repository import ParticipantRepository

logger = logging.getLogger(__name__)


class ParticipantService:
    """Use case: maintain the participant roster.

    The in-memory list is the source of truth; every change is written through
    to the repository right after it is applied.
    """

    def __init__(
        self,
        participants: ParticipantRepository,
        *,
        warnings: Optional[PersistenceWarnings] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        self._participants = participants
        self._warnings = warnings if warnings is not None else PersistenceWarnings()
        self._new_id = id_factory
        self._items: list[Participant] = []
        self._issued_ids: set[str] = set()

    def load(self) -> None:
        try:
            items = list(self._participants.load_all())
        except PersistenceError as e:
            logger.warning("Could not load participants, starting with an empty roster: %s", e)
            items = []
        self._items = items
        self._issued_ids = {p.id for p in items}
        logger.info("Loaded %d participants", len(items))

    def list(self) -> list[Participant]:
        return list(self._items)

    def get(self, participant_id: str) -> Participant:
        return self._items[self._index_of(participant_id)]

    def add(self, name: str, email: Optional[str] = None, phone: Optional[str] = None) -> Participant:
        name = require_non_empty(name, "Name")
        participant = Participant(
            id=self._next_id(),
            name=name,
            email=optional_text(email, "Email"),
            phone=optional_text(phone, "Phone"),
        )
        self._items.append(participant)
        self._persist()
        return participant

    def update(
        self,
        participant_id: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Participant:
        idx = self._index_of(participant_id)
        name = require_non_empty(name, "Name")

        participant = Participant(
            id=self._items[idx].id,
            name=name,
            email=optional_text(email, "Email"),
            phone=optional_text(phone, "Phone"),
        )
        self._items[idx] = participant
        self._persist()
        return participant

    def remove(self, participant_id: str) -> None:
        # Session attendance maps may keep entries for this id; readers treat them as absent.
        idx = self._index_of(participant_id)
        del self._items[idx]
        self._persist()

    def _index_of(self, participant_id: str) -> int:
        for i, p in enumerate(self._items):
            if p.id == participant_id:
                return i
        raise NotFoundError(f"Participant {participant_id!r} not found")

    def _next_id(self) -> str:
        pid = self._new_id()
        while pid in self._issued_ids:
            pid = self._new_id()
        self._issued_ids.add(pid)
        return pid

    def _persist(self) -> None:
        try:
            self._participants.save_all(self._items)
        except PersistenceError as e:
            self._warnings.record(e, what="Participants")
