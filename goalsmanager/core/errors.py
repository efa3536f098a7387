"""Service-layer error taxonomy.

Services raise these; the app factory turns them into JSON responses. They
subclass ``ValueError`` and stringify to their code, so callers can keep
matching on ``"not_found"`` / ``"validation_error"`` the usual way.
"""

from __future__ import annotations


class GoalsManagerError(ValueError):
    code = "error"
    status = 400

    def __init__(self, message: str | None = None):
        super().__init__(self.code)
        self.message = message or self.code

    def to_dict(self) -> dict:
        return {"ok": False, "error": self.code, "message": self.message}


class NotFoundError(GoalsManagerError):
    code = "not_found"
    status = 404

    @classmethod
    def for_entity(cls, entity: str, entity_id) -> "NotFoundError":
        return cls(f"{entity} not found with id: {entity_id}")


class ValidationFailed(GoalsManagerError):
    code = "validation_error"
    status = 400


class ConflictError(GoalsManagerError):
    code = "conflict"
    status = 409
