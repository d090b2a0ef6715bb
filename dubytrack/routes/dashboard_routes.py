from flask import Blueprint
from dubytrack.utils.auth import resolve_user
from dubytrack.controllers.dashboard_controller import get_dashboard_handler

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api")


@dashboard_bp.get("/dashboard")
@resolve_user
def dashboard():
    return get_dashboard_handler()
