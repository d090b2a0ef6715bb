"""
Food Controller Module

Handles the food catalog, catalog search and food logging.
"""

from flask import current_app, request
from marshmallow import ValidationError

from dubytrack.extensions import db, sheets
from dubytrack.models.food_log import FoodLog
from dubytrack.schemas.log_schema import CreateFoodLogSchema
from dubytrack.services.food_log_service import create_food_log, list_catalog, search_catalog
from dubytrack.services.mirror_service import mirror_food_day
from dubytrack.utils.auth import get_or_create_demo_user
from dubytrack.utils.enums import LedgerSource
from dubytrack.utils.http import ok, error, json_body, arg_str, parse_iso_datetime


def _from_sheets(operation, fn):
    """Spreadsheet result in sheets mode; None means read the database."""
    if current_app.config.get("LEDGER_SOURCE") != LedgerSource.SHEETS.value:
        return None
    if not sheets.enabled:
        current_app.logger.warning("LEDGER_SOURCE=sheets but the spreadsheet mirror is not configured")
        return None
    return sheets.guarded(operation, fn)


def list_food_handler():
    """Whole catalog, sorted by name."""
    try:
        rows = _from_sheets("food-list", lambda adapter: adapter.read_food_list())
        return ok(rows if rows is not None else list_catalog())
    except Exception as e:
        return error("UNKNOWN_ERROR", str(e), 500)


def search_food_handler():
    """
    Case-insensitive name search.

    Query Parameters:
        - q: substring to look for; empty returns []
    """
    q = arg_str("q", "") or ""
    try:
        rows = _from_sheets("food-search", lambda adapter: adapter.search_food(q))
        return ok(rows if rows is not None else search_catalog(q))
    except Exception as e:
        return error("UNKNOWN_ERROR", str(e), 500)


def create_food_log_handler():
    """
    Log a food for the session user, or the demo user without a session.

    Body Parameters:
        - name, duby, unit: catalog entry, created or overwritten by name
        - portion: multiplier, > 0
        - occurred_at (optional): ISO timestamp, defaults to now
    """
    try:
        data = CreateFoodLogSchema().load(json_body())
    except ValidationError:
        return error("VALIDATION_ERROR", "Invalid input", 400)

    occurred_at = None
    if data.get("occurred_at"):
        occurred_at = parse_iso_datetime(data["occurred_at"])
        if occurred_at is None:
            return error("VALIDATION_ERROR", "Invalid input", 400)

    try:
        user_id = request.user_id or get_or_create_demo_user().id
        entry = create_food_log(
            user_id=user_id,
            name=data["name"],
            duby=data["duby"],
            unit=data["unit"],
            portion=data["portion"],
            occurred_at=occurred_at,
        )
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    mirror_food_day(user_id, entry.occurred_at.date())

    return ok({"id": entry.id}, 201)


def delete_food_log_handler(log_id: int):
    try:
        user_id = request.user_id or get_or_create_demo_user().id
        entry = db.session.get(FoodLog, log_id)
        if not entry or entry.user_id != user_id:
            db.session.commit()
            return error("NOT_FOUND", "not found", 404)

        day = entry.occurred_at.date()
        db.session.delete(entry)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    mirror_food_day(user_id, day)

    return ok({"ok": True})
