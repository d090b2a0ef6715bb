from flask import Blueprint
from dubytrack.utils.auth import require_auth
from dubytrack.controllers.user_controller import get_me_handler, upsert_profile_handler

user_bp = Blueprint("user", __name__, url_prefix="/api/me")


@user_bp.get("")
@require_auth
def me():
    return get_me_handler()


@user_bp.put("/profile")
@require_auth
def upsert_profile():
    return upsert_profile_handler()
