from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.constants import PARTICIPANTS_KEY
from ..core.exceptions import PersistenceError
from ..storage.connection import KeyValueStorage
from ..storage.json_base import dump_blob, load_blob, optional_str
from .model import Participant
from .repository import ParticipantRepository


class KVParticipantRepository(ParticipantRepository):
    def __init__(self, storage: KeyValueStorage, *, key: str = PARTICIPANTS_KEY):
        self._storage = storage
        self._key = key

    def load_all(self) -> Sequence[Participant]:
        records = load_blob(self._storage, self._key)
        try:
            return [self._from_record(r) for r in records]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Invalid participant record under {self._key!r}: {e}") from e

    def save_all(self, participants: Sequence[Participant]) -> None:
        dump_blob(self._storage, self._key, [self._to_record(p) for p in participants])

    @staticmethod
    def _to_record(p: Participant) -> Dict[str, Any]:
        record: Dict[str, Any] = {"id": p.id, "name": p.name}
        if p.email:
            record["email"] = p.email
        if p.phone:
            record["phone"] = p.phone
        return record

    @staticmethod
    def _from_record(r: Dict[str, Any]) -> Participant:
        return Participant(
            id=str(r["id"]),
            name=str(r.get("name") or ""),
            email=optional_str(r.get("email")),
            phone=optional_str(r.get("phone")),
        )
