from flask import Blueprint
from dubytrack.controllers.home_controller import health_check

home_bp = Blueprint("home", __name__, url_prefix="/api")


@home_bp.get("/health")
def health():
    return health_check()
