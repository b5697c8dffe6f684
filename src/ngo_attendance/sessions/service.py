from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.identity import new_id
from ..common.validators import optional_text, plain_text, require_non_empty
from ..core.exceptions import NotFoundError, PersistenceError
from ..storage.warnings import PersistenceWarnings
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Use case: manage sessions and take attendance."""

    def __init__(
        self,
        sessions: SessionRepository,
        *,
        warnings: Optional[PersistenceWarnings] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        self._sessions = sessions
        self._warnings = warnings if warnings is not None else PersistenceWarnings()
        self._new_id = id_factory
        self._items: list[Session] = []
        self._issued_ids: set[str] = set()

    def load(self) -> None:
        try:
            items = list(self._sessions.load_all())
        except PersistenceError as e:
            logger.warning("Could not load sessions, starting with none: %s", e)
            items = []
        self._items = items
        self._issued_ids = {s.id for s in items}
        logger.info("Loaded %d sessions", len(items))

    def list(self) -> list[Session]:
        return list(self._items)

    def get(self, session_id: str) -> Session:
        return self._items[self._index_of(session_id)]

    def add(
        self,
        name: str,
        date: str | date,
        start_time: str,
        end_time: str,
        location: str,
        description: Optional[str] = None,
    ) -> Session:
        name = require_non_empty(name, "Name")
        location = require_non_empty(location, "Location")
        work_date = parse_iso_date(date)

        session = Session(
            id=self._next_id(),
            name=name,
            date=work_date,
            start_time=plain_text(start_time, "Start time"),
            end_time=plain_text(end_time, "End time"),
            location=location,
            description=optional_text(description, "Description"),
        )
        self._items.append(session)
        self._persist()
        return session

    def update(
        self,
        session_id: str,
        name: str,
        date: str | date,
        start_time: str,
        end_time: str,
        location: str,
        description: Optional[str] = None,
    ) -> Session:
        idx = self._index_of(session_id)
        current = self._items[idx]

        session = replace(
            current,
            name=require_non_empty(name, "Name"),
            date=parse_iso_date(date),
            start_time=plain_text(start_time, "Start time"),
            end_time=plain_text(end_time, "End time"),
            location=require_non_empty(location, "Location"),
            description=optional_text(description, "Description"),
        )
        self._items[idx] = session
        self._persist()
        return session

    def remove(self, session_id: str) -> None:
        idx = self._index_of(session_id)
        del self._items[idx]
        self._persist()

    def toggle_attendance(self, session_id: str, participant_id: str) -> bool:
        """Flip presence for one participant and return the new value.

        The participant id is not checked against the roster. Once written, a
        key stays in the map; toggling off stores an explicit ``False``.
        """

        idx = self._index_of(session_id)
        current = self._items[idx]

        present = not current.is_present(participant_id)
        attendance = dict(current.attendance)
        attendance[participant_id] = present

        self._items[idx] = replace(current, attendance=attendance)
        self._persist()
        return present

    def _index_of(self, session_id: str) -> int:
        for i, s in enumerate(self._items):
            if s.id == session_id:
                return i
        raise NotFoundError(f"Session {session_id!r} not found")

    def _next_id(self) -> str:
        sid = self._new_id()
        while sid in self._issued_ids:
            sid = self._new_id()
        self._issued_ids.add(sid)
        return sid

    def _persist(self) -> None:
        try:
            self._sessions.save_all(self._items)
        except PersistenceError as e:
            self._warnings.record(e, what="Sessions")
