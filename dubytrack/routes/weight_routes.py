from flask import Blueprint
from dubytrack.utils.auth import resolve_user
from dubytrack.controllers.weight_controller import create_weight_log_handler

weight_bp = Blueprint("weight", __name__, url_prefix="/api")


@weight_bp.post("/weight-log")
@resolve_user
def create_weight_log():
    return create_weight_log_handler()
