"""
Mirror Service

Best-effort writes to the spreadsheet mirror after the relational store has
been updated. Every function here swallows and logs mirror failures; none of
them can fail the request that triggered it.
"""

from datetime import date
from typing import Optional

from dubytrack.extensions import db, sheets
from dubytrack.models.profile import Profile
from dubytrack.models.user import User
from dubytrack.services.food_log_service import list_day_logs, summarize_day


def _user_with_name(user_id: int) -> Optional[User]:
    user = db.session.get(User, user_id)
    if not user or not user.name:
        return None
    return user


def mirror_new_user(user: User) -> None:
    def write(adapter):
        if not adapter.find_user_by_email(user.email):
            adapter.append_user(user.name, user.email, user.password_hash)
        adapter.ensure_user_tab(user.name)

    sheets.guarded("register", write)


def mirror_profile(user_id: int, profile: Profile, target_date: Optional[str] = None) -> None:
    user = _user_with_name(user_id)
    if user is None:
        return

    def write(adapter):
        tab = adapter.ensure_user_tab(user.name)
        adapter.write_general_info(
            tab,
            name=user.name,
            height_cm=profile.height_cm,
            start_weight_kg=float(profile.current_weight_kg),
            gender=profile.gender,
            age=profile.age,
            target_weight_kg=float(profile.goal_weight_kg),
            target_date=target_date,
            daily_budget=profile.daily_duby_budget,
        )

    sheets.guarded("profile", write)


def mirror_food_day(user_id: int, day: date) -> None:
    """Rewrite the ledger row for `day` from the user's food logs."""
    user = _user_with_name(user_id)
    if user is None:
        return

    def write(adapter):
        tab = adapter.ensure_user_tab(user.name)
        summary = summarize_day(list_day_logs(user_id, day))
        daily_budget = adapter.read_daily_budget(tab)
        if not daily_budget and user.profile:
            daily_budget = user.profile.daily_duby_budget
        adapter.upsert_budget_row(tab, day, daily_budget, summary["price"], summary["food"])

    sheets.guarded("food-log", write)


def mirror_weight(user_id: int, day: date, weight_kg: float) -> None:
    user = _user_with_name(user_id)
    if user is None:
        return

    def write(adapter):
        tab = adapter.ensure_user_tab(user.name)
        adapter.append_progress_row(tab, day, weight_kg)

    sheets.guarded("weight-log", write)
