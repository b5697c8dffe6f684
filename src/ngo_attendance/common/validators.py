from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def _require_text(value: Any, field_name: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    value = _require_text(value, field_name)
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str = "Value") -> Optional[str]:
    """Trim free text; blank input becomes None."""
    value = _require_text(value, field_name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def plain_text(value: Any, field_name: str) -> str:
    value = _require_text(value, field_name)
    return (value or "").strip()
