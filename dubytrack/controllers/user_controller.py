from flask import request
from marshmallow import ValidationError

from dubytrack.extensions import db
from dubytrack.models.profile import Profile
from dubytrack.models.user import User
from dubytrack.models.weight_log import WeightLog
from dubytrack.schemas.user_schema import ProfileSchema
from dubytrack.services.budget_service import calculate_daily_budget
from dubytrack.services.mirror_service import mirror_profile
from dubytrack.utils.http import ok, error, json_body, parse_iso_datetime


def get_me_handler():
    user_id = request.user_id
    user = db.session.get(User, user_id)
    last = (
        WeightLog.query
        .filter_by(user_id=user_id)
        .order_by(WeightLog.date.desc(), WeightLog.id.desc())
        .first()
    )
    return ok({
        **user.to_public(),
        "profile": user.profile.to_dict() if user.profile else None,
        "lastWeightKg": float(last.weight_kg) if last else None,
    })


def upsert_profile_handler():
    """
    Save the profile as a full replacement and recompute the daily budget.

    Body Parameters:
        - height_cm, current_weight_kg, goal_weight_kg, gender, age, activity_level
        - target_date (optional): ISO date
    """
    user_id = request.user_id
    try:
        data = ProfileSchema().load(json_body())
    except ValidationError:
        return error("VALIDATION_ERROR", "Invalid profile", 400)

    target_date = None
    if data.get("target_date"):
        target_date = parse_iso_datetime(data["target_date"])
        if target_date is None:
            return error("VALIDATION_ERROR", "Invalid profile", 400)

    daily = calculate_daily_budget(
        data["gender"],
        data["age"],
        data["height_cm"],
        data["current_weight_kg"],
        data["activity_level"],
    )

    try:
        profile = db.session.get(Profile, user_id)
        if not profile:
            profile = Profile(user_id=user_id)
            db.session.add(profile)

        profile.height_cm = data["height_cm"]
        profile.current_weight_kg = data["current_weight_kg"]
        profile.goal_weight_kg = data["goal_weight_kg"]
        profile.target_date = target_date
        profile.gender = data["gender"]
        profile.age = data["age"]
        profile.activity_level = data["activity_level"]
        profile.daily_duby_budget = daily
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    mirror_profile(user_id, profile, data.get("target_date"))

    return ok({"daily_duby_budget": daily})
