from __future__ import annotations

import json
from typing import Any, Dict, List

from ..core.exceptions import PersistenceError
from .connection import KeyValueStorage


def load_blob(storage: KeyValueStorage, key: str) -> List[Dict[str, Any]]:
    """Read a JSON array of records stored under ``key``.

    A missing key is an empty collection.
    """

    raw = storage.get_item(key)
    if raw is None or not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Malformed data under {key!r}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise PersistenceError(f"Expected a list of records under {key!r}")
    return data


def dump_blob(storage: KeyValueStorage, key: str, records: List[Dict[str, Any]]) -> None:
    storage.set_item(key, json.dumps(records, ensure_ascii=False))


def optional_str(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value)
    return value or None
