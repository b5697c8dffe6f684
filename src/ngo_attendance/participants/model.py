from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Participant:
    """Domain entity: a tracked individual eligible for attendance."""

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
