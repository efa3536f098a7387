"""Input validation helpers."""

from __future__ import annotations

import enum
from datetime import date

from goalsmanager.core.errors import ValidationFailed

END_BEFORE_START = "End date must not be before start date"


def require_text(value: str | None, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationFailed(f"{field} is required")
    return cleaned


def optional_text(value: str | None) -> str | None:
    return (value or "").strip() or None


def validate_date_order(start_date: date | None, end_date: date | None) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValidationFailed(END_BEFORE_START)


def apply_fields(entity, fields: dict, allowed: tuple[str, ...]) -> dict:
    """Copy non-null ``fields`` listed in ``allowed`` onto ``entity``."""
    changed = {}
    for key in allowed:
        if key in fields and fields[key] is not None:
            val = fields[key]
            if isinstance(val, str) and not isinstance(val, enum.Enum):
                val = val.strip()
            setattr(entity, key, val)
            changed[key] = val
    return changed
