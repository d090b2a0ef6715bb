from datetime import datetime
from flask import request
from marshmallow import ValidationError

from dubytrack.extensions import db
from dubytrack.models.weight_log import WeightLog
from dubytrack.schemas.log_schema import CreateWeightLogSchema
from dubytrack.services.mirror_service import mirror_weight
from dubytrack.utils.auth import get_or_create_demo_user
from dubytrack.utils.http import ok, error, json_body, parse_iso_datetime


def create_weight_log_handler():
    try:
        data = CreateWeightLogSchema().load(json_body())
    except ValidationError:
        return error("VALIDATION_ERROR", "Invalid input", 400)

    logged_on = datetime.now()
    if data.get("date"):
        logged_on = parse_iso_datetime(data["date"])
        if logged_on is None:
            return error("VALIDATION_ERROR", "Invalid input", 400)

    try:
        user_id = request.user_id or get_or_create_demo_user().id
        db.session.add(WeightLog(user_id=user_id, weight_kg=data["weight_kg"], date=logged_on))
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    mirror_weight(user_id, logged_on.date(), data["weight_kg"])

    return ok({"ok": True}, 201)
