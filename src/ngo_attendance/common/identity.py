from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque identity for a new participant or session."""
    return uuid.uuid4().hex
