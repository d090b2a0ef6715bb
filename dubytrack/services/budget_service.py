"""
Budget Service

Maps profile attributes to a daily Duby allowance. Pure functions only;
callers validate ranges before calling.
"""

from typing import Optional

from dubytrack.services.budget_constants import (
    ACTIVITY_FACTORS,
    AGE_POINTS,
    BMR_FEMALE_OFFSET,
    BMR_MALE_OFFSET,
    DEFAULT_ACTIVITY_FACTOR,
    HEIGHT_POINTS,
    KCAL_PER_DUBY,
    POINTS_BASE_FEMALE,
    POINTS_BASE_MALE,
    POINTS_MULTIPLIER,
    POINTS_OFFSET,
    WEIGHT_POINTS,
    WEIGHT_POINTS_FLOOR,
)


def is_male(gender: str) -> bool:
    return (gender or "").lower().startswith("m")


def mifflin_st_jeor_bmr(gender: str, age: int, height_cm: float, weight_kg: float) -> float:
    """Basal metabolic rate in kcal/day."""
    offset = BMR_MALE_OFFSET if is_male(gender) else BMR_FEMALE_OFFSET
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def estimate_points(gender: str, age: int, height_cm: float, weight_kg: float) -> int:
    """
    Rough daily points score from fixed weight, height and age buckets.

    Independent of the BMR figure. The minimum possible score is 9, so the
    result is always positive.
    """
    points = POINTS_BASE_MALE if is_male(gender) else POINTS_BASE_FEMALE

    points += next((pts for limit, pts in WEIGHT_POINTS if weight_kg >= limit), WEIGHT_POINTS_FLOOR)
    points += next((pts for limit, pts in HEIGHT_POINTS if height_cm >= limit), 0)
    points += next((pts for limit, pts in AGE_POINTS if age < limit), 0)

    return points


def compute_daily_budget(bmr: float, activity_level: str, points: Optional[int] = None) -> int:
    # The BMR branch only runs for a missing or non-positive score, which
    # estimate_points never produces.
    if points and points > 0:
        return points * POINTS_MULTIPLIER + POINTS_OFFSET
    factor = ACTIVITY_FACTORS.get(activity_level, DEFAULT_ACTIVITY_FACTOR)
    return round(bmr * factor / KCAL_PER_DUBY)


def calculate_daily_budget(
    gender: str,
    age: int,
    height_cm: float,
    weight_kg: float,
    activity_level: str,
) -> int:
    bmr = mifflin_st_jeor_bmr(gender, age, height_cm, weight_kg)
    points = estimate_points(gender, age, height_cm, weight_kg)
    return compute_daily_budget(bmr, activity_level, points)
