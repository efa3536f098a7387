"""User controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from goalsmanager.core.users import services as user_services
from goalsmanager.core.users.schemas import UserResponse, UserUpsertRequest

user_api_bp = Blueprint("user_api", __name__)


def _user(user):
    if user is None:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": UserResponse.model_validate(user).model_dump(mode="json")})


def _users(users):
    return jsonify(
        {"ok": True, "users": [UserResponse.model_validate(u).model_dump(mode="json") for u in users]}
    )


@user_api_bp.post("")
def create_or_update_user():
    data = UserUpsertRequest.model_validate(request.get_json(silent=True) or {})
    user = user_services.create_or_update_user(data)
    resp = UserResponse.model_validate(user).model_dump(mode="json")
    return jsonify({"ok": True, "user": resp}), 201


@user_api_bp.get("")
def list_users():
    return _users(user_services.list_users())


@user_api_bp.get("/<int:user_id>")
def user_detail(user_id: int):
    return _user(user_services.get_user(user_id))


@user_api_bp.get("/username/<username>")
def user_by_username(username: str):
    return _user(user_services.get_user_by_username(username))


@user_api_bp.get("/email/<email>")
def user_by_email(email: str):
    return _user(user_services.get_user_by_email(email))


@user_api_bp.get("/provider/<provider>/<provider_id>")
def user_by_provider(provider: str, provider_id: str):
    return _user(user_services.get_user_by_provider(provider, provider_id))


@user_api_bp.get("/provider/<provider>")
def users_by_provider(provider: str):
    return _users(user_services.list_users_by_provider(provider))


@user_api_bp.get("/exists/provider/<provider>/<provider_id>")
def exists_by_provider(provider: str, provider_id: str):
    return jsonify({"ok": True, "exists": user_services.exists_by_provider(provider, provider_id)})


@user_api_bp.delete("/<int:user_id>")
def delete_user(user_id: int):
    if not user_services.delete_user(user_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})
