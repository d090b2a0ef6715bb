"""
Dashboard Service

Today's remaining budget, itemised food logs and the next weigh-in date.
"""

from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from flask import current_app

from dubytrack.extensions import db, sheets
from dubytrack.models.user import User
from dubytrack.services.budget_constants import DEFAULT_DAILY_BUDGET
from dubytrack.services.food_log_service import list_day_logs, serialize_log_item, summarize_day
from dubytrack.utils.enums import LedgerSource

WEIGH_IN_WEEKDAY = 5  # Friday, counting Sunday as 0


def next_weigh_in(today: date) -> date:
    """Next Friday strictly after today."""
    weekday = today.isoweekday() % 7
    days_ahead = (WEIGH_IN_WEEKDAY - weekday + 7) % 7 or 7
    return today + timedelta(days=days_ahead)


def _ledger_from_sheet(user: User, today: date, price: float) -> Optional[Dict[str, Any]]:
    """Remaining/food/price from the user's ledger row, or None when unavailable."""
    adapter = sheets.adapter
    if adapter is None:
        current_app.logger.warning("LEDGER_SOURCE=sheets but the spreadsheet mirror is not configured")
        return None
    try:
        tab = adapter.ensure_user_tab(user.name)
        row = adapter.find_budget_today(tab, today)
        if row:
            return {"remaining": row["surplus"], "food": row["food"], "price": row["price"]}
        daily_budget = adapter.read_daily_budget(tab)
        return {"remaining": daily_budget - price, "food": None, "price": price}
    except Exception as e:
        current_app.logger.warning("Dashboard read from spreadsheet failed: %s", e)
        return None


def build_dashboard(user_id: Optional[int], now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or datetime.now()
    today = now.date()
    user = db.session.get(User, user_id) if user_id is not None else None

    logs = list_day_logs(user_id, today) if user_id is not None else []
    items = [serialize_log_item(log) for log in logs]
    summary = summarize_day(logs)

    food_list = summary["food"]
    price = summary["price"]
    budget = user.profile.daily_duby_budget if user and user.profile else DEFAULT_DAILY_BUDGET
    remaining = budget - price
    source = LedgerSource.DATABASE.value

    if current_app.config.get("LEDGER_SOURCE") == LedgerSource.SHEETS.value and user and user.name:
        ledger = _ledger_from_sheet(user, today, price)
        if ledger is not None:
            remaining = ledger["remaining"]
            price = ledger["price"]
            if ledger["food"] is not None:
                food_list = ledger["food"]
            source = LedgerSource.SHEETS.value

    return {
        "remainingDubyToday": remaining,
        "entries": [{"time": today.isoformat(), "food": food_list, "dubyCost": price}],
        "items": items,
        "nextWeighIn": next_weigh_in(today).isoformat(),
        "source": source,
    }
