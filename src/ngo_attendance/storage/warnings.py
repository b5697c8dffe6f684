from __future__ import annotations

import logging

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class PersistenceWarnings:
    """Collects non-fatal write-through failures until the caller reports them.

    In-memory state stays authoritative; a recorded warning only means the last
    change may not survive a restart.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def record(self, error: PersistenceError, *, what: str) -> None:
        logger.warning("%s changed in memory but were not saved: %s", what, error)
        self._messages.append(f"{what} were changed but could not be saved; changes may be lost on restart.")

    def drain(self) -> list[str]:
        messages, self._messages = self._messages, []
        return messages

    def __bool__(self) -> bool:
        return bool(self._messages)
