"""User service layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from goalsmanager.core.errors import ConflictError, NotFoundError
from goalsmanager.core.users.models import User
from goalsmanager.core.users.schemas import UserUpsertRequest
from goalsmanager.core.utils.validation import optional_text, require_text
from goalsmanager.extensions import db

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("email", "name", "avatar_url", "bio", "location")


def create_or_update_user(payload: UserUpsertRequest) -> User:
    """Upsert a user coming from an OAuth provider or JWT, keyed on (provider, provider_id)."""
    provider = require_text(payload.provider, "Provider")
    provider_id = require_text(payload.provider_id, "Provider ID")
    username = require_text(payload.username, "Username")

    user = User.query.filter_by(provider=provider, provider_id=provider_id).first()
    taken = User.query.filter_by(username=username).first()
    if taken is not None and (user is None or taken.id != user.id):
        raise ConflictError(f"Username already taken: {username}")

    created = user is None
    if created:
        user = User(provider=provider, provider_id=provider_id)
        db.session.add(user)
    user.username = username
    for key in _PROFILE_FIELDS:
        setattr(user, key, optional_text(getattr(payload, key)))
    db.session.commit()
    logger.info("%s user %s (%s)", "Created" if created else "Updated", user.id, provider)
    return user


def get_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError.for_entity("User", user_id)
    return user


def require_user(user_id: int) -> None:
    if not user_exists(user_id):
        raise NotFoundError.for_entity("User", user_id)


def user_exists(user_id: int) -> bool:
    return db.session.query(User.id).filter_by(id=user_id).first() is not None


def get_user_by_provider(provider: str, provider_id: str) -> Optional[User]:
    return User.query.filter_by(provider=provider, provider_id=provider_id).first()


def get_user_by_username(username: str) -> Optional[User]:
    return User.query.filter_by(username=username).first()


def get_user_by_email(email: str) -> Optional[User]:
    return User.query.filter_by(email=email).first()


def exists_by_provider(provider: str, provider_id: str) -> bool:
    return get_user_by_provider(provider, provider_id) is not None


def list_users() -> List[User]:
    return User.query.order_by(User.id.asc()).all()


def list_users_by_provider(provider: str) -> List[User]:
    return User.query.filter_by(provider=provider).order_by(User.id.asc()).all()


def delete_user(user_id: int) -> bool:
    user = db.session.get(User, user_id)
    if not user:
        return False
    db.session.delete(user)
    db.session.commit()
    return True
