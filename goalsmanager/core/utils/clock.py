"""Injectable source of the current date."""

from __future__ import annotations

from datetime import date

from flask import current_app, has_app_context


def today() -> date:
    if has_app_context():
        clock = current_app.extensions.get("clock")
        if clock is not None:
            return clock()
    return date.today()
