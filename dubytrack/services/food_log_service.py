"""
Food Log Service

Catalog upserts, food log creation and per-day aggregation.
"""

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from dubytrack.extensions import db
from dubytrack.models.food_item import FoodItem
from dubytrack.models.food_log import FoodLog

FOOD_SEARCH_LIMIT = 10
FOOD_SEPARATOR = " | "


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)


def upsert_food_item(name: str, duby: float, unit: str) -> FoodItem:
    """
    Find the catalog item by name and overwrite its cost and unit, or create it.

    The catalog is shared: an update here changes the item every earlier log
    points at. Each log keeps its own `duby_cost` snapshot.
    """
    item = FoodItem.query.filter_by(name=name).first()
    if item:
        item.duby = duby
        item.unit = unit
    else:
        item = FoodItem(name=name, duby=duby, unit=unit)
        db.session.add(item)
    db.session.flush()
    return item


def create_food_log(
    user_id: int,
    name: str,
    duby: float,
    unit: str,
    portion: float,
    occurred_at: Optional[datetime] = None,
) -> FoodLog:
    item = upsert_food_item(name, duby, unit)
    entry = FoodLog(
        user_id=user_id,
        food_item_id=item.id,
        portion=portion,
        occurred_at=occurred_at or datetime.now(),
        duby_cost=(duby or 0) * (portion or 1),
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def list_day_logs(user_id: int, day: date) -> List[FoodLog]:
    start, end = day_bounds(day)
    return (
        FoodLog.query
        .filter(FoodLog.user_id == user_id, FoodLog.occurred_at >= start, FoodLog.occurred_at < end)
        .order_by(FoodLog.occurred_at.asc(), FoodLog.id.asc())
        .all()
    )


def summarize_day(logs: List[FoodLog]) -> Dict[str, Any]:
    return {
        "food": FOOD_SEPARATOR.join(log.food_item.name if log.food_item else "" for log in logs),
        "price": sum(float(log.duby_cost or 0) for log in logs),
    }


def serialize_log_item(log: FoodLog) -> Dict[str, Any]:
    return {
        "id": log.id,
        "time": log.occurred_at.strftime("%H:%M") if log.occurred_at else None,
        "food": log.food_item.name if log.food_item else "",
        "price": float(log.duby_cost or 0),
    }


def list_catalog() -> List[Dict[str, Any]]:
    return [item.to_dict() for item in FoodItem.query.order_by(FoodItem.name.asc()).all()]


def search_catalog(query: str, limit: int = FOOD_SEARCH_LIMIT) -> List[Dict[str, Any]]:
    q = (query or "").strip()
    if not q:
        return []
    items = (
        FoodItem.query
        .filter(FoodItem.name.icontains(q, autoescape=True))
        .order_by(FoodItem.name.asc())
        .limit(limit)
        .all()
    )
    return [item.to_dict() for item in items]
