"""GoalsManager application factory and bootstrap."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import Optional

from flask import Flask
from pydantic import ValidationError

from goalsmanager.config import config_by_name
from goalsmanager.core.errors import GoalsManagerError
from goalsmanager.extensions import init_extensions


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the GoalsManager Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(__name__, instance_path=str(instance_root), instance_relative_config=True)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = Path(db_uri.replace("sqlite:///", "", 1))
        if not db_path.is_absolute():
            db_path = project_root / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{db_path}"

    _import_models()
    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    # Source of "today" for streaks and date-based views; tests pin it.
    app.extensions["clock"] = date.today

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    @app.get("/api/auth/status")
    def auth_status():
        # Authentication happens in the frontend; this only proves the API is up.
        return {"ok": True, "status": "ok", "message": "Backend is running"}, 200

    from goalsmanager.scripts.commands import register_commands

    register_commands(app)

    return app


def _import_models() -> None:
    """Make every mapped class known before relationships are configured."""
    from goalsmanager.core.users import models as user_models  # noqa: F401
    from goalsmanager.domains.goals.models import goal_models  # noqa: F401
    from goalsmanager.domains.habits.models import habit_models  # noqa: F401
    from goalsmanager.domains.notes.models import note_models  # noqa: F401
    from goalsmanager.domains.tasks.models import task_models  # noqa: F401


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from goalsmanager.core.users.controllers import user_api_bp
    from goalsmanager.domains.goals.controllers.goal_api import goal_api_bp
    from goalsmanager.domains.habits.controllers.habit_api import habit_api_bp
    from goalsmanager.domains.notes.controllers.note_api import note_api_bp
    from goalsmanager.domains.tasks.controllers.task_api import task_api_bp

    app.register_blueprint(user_api_bp, url_prefix="/api/users")
    app.register_blueprint(goal_api_bp, url_prefix="/api/goals")
    app.register_blueprint(habit_api_bp, url_prefix="/api/habits")
    app.register_blueprint(task_api_bp, url_prefix="/api/tasks")
    app.register_blueprint(note_api_bp, url_prefix="/api/notes")


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(GoalsManagerError)
    def _service_error(exc: GoalsManagerError):
        return exc.to_dict(), exc.status

    @app.errorhandler(ValidationError)
    def _validation_error(exc: ValidationError):
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        return {"ok": False, "error": "validation_error", "details": details}, 400

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
