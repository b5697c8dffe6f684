from __future__ import annotations

from typing import Any, Dict, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import SESSIONS_KEY
from ..core.exceptions import PersistenceError, ValidationError
from ..storage.connection import KeyValueStorage
from ..storage.json_base import dump_blob, load_blob, optional_str
from .model import Session
from .repository import SessionRepository


class KVSessionRepository(SessionRepository):
    def __init__(self, storage: KeyValueStorage, *, key: str = SESSIONS_KEY):
        self._storage = storage
        self._key = key

    def load_all(self) -> Sequence[Session]:
        records = load_blob(self._storage, self._key)
        try:
            return [self._from_record(r) for r in records]
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as e:
            raise PersistenceError(f"Invalid session record under {self._key!r}: {e}") from e

    def save_all(self, sessions: Sequence[Session]) -> None:
        dump_blob(self._storage, self._key, [self._to_record(s) for s in sessions])

    @staticmethod
    def _to_record(s: Session) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": s.id,
            "name": s.name,
            "date": s.date.isoformat(),
            "startTime": s.start_time,
            "endTime": s.end_time,
            "location": s.location,
        }
        if s.description:
            record["description"] = s.description
        record["attendance"] = {str(pid): bool(v) for pid, v in s.attendance.items()}
        return record

    @staticmethod
    def _from_record(r: Dict[str, Any]) -> Session:
        attendance = r.get("attendance") or {}
        return Session(
            id=str(r["id"]),
            name=str(r.get("name") or ""),
            date=parse_iso_date(r["date"]),
            start_time=str(r.get("startTime") or ""),
            end_time=str(r.get("endTime") or ""),
            location=str(r.get("location") or ""),
            description=optional_str(r.get("description")),
            attendance={str(pid): bool(v) for pid, v in attendance.items()},
        )
