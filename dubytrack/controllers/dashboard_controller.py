from flask import request

from dubytrack.models.user import User
from dubytrack.services.dashboard_service import build_dashboard
from dubytrack.utils.auth import DEMO_EMAIL
from dubytrack.utils.http import ok, error


def get_dashboard_handler():
    try:
        user_id = request.user_id
        if user_id is None:
            # Anonymous visitors see the shared demo user's day
            demo = User.query.filter_by(email=DEMO_EMAIL).first()
            user_id = demo.id if demo else None
        return ok(build_dashboard(user_id))
    except Exception as e:
        return error("UNKNOWN_ERROR", str(e) or "Failed to load dashboard", 500)
