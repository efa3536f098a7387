"""Weekday schedule parsing for habits."""

from __future__ import annotations

from typing import FrozenSet, Iterable

# Monday == 0, matching date.weekday()
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAY_BY_ABBREVIATION = {abbr: idx for idx, abbr in enumerate(WEEKDAY_ABBREVIATIONS)}


def parse_days_of_week(text: str | None) -> FrozenSet[int]:
    """Turn ``"Mon, Wed,Fri"`` into ``{0, 2, 4}``.

    Unrecognized tokens are dropped without complaint; an empty result means
    the habit is never scheduled.
    """
    if not text:
        return frozenset()
    days = set()
    for token in text.split(","):
        day = _WEEKDAY_BY_ABBREVIATION.get(token.strip())
        if day is not None:
            days.add(day)
    return frozenset(days)


def unknown_day_tokens(text: str | None) -> list[str]:
    if not text:
        return []
    return [
        token.strip()
        for token in text.split(",")
        if token.strip() and token.strip() not in _WEEKDAY_BY_ABBREVIATION
    ]


def format_days_of_week(days: Iterable[int]) -> str:
    return ", ".join(WEEKDAY_ABBREVIATIONS[day] for day in sorted(set(days)))
