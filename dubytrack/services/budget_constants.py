"""Constants for the daily Duby budget calculation."""

# Mifflin-St Jeor offsets
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

# Activity multipliers applied to BMR for the fallback budget
ACTIVITY_FACTORS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "intense": 1.725,
}
DEFAULT_ACTIVITY_FACTOR = ACTIVITY_FACTORS["intense"]
KCAL_PER_DUBY = 300

# Points heuristic: (threshold, points), first threshold reached wins
POINTS_BASE_MALE = 15
POINTS_BASE_FEMALE = 7
WEIGHT_POINTS = [(90, 5), (75, 4), (60, 3)]
WEIGHT_POINTS_FLOOR = 2
HEIGHT_POINTS = [(175, 2), (160, 1)]
AGE_POINTS = [(26, 4), (37, 3), (47, 2), (58, 1)]

POINTS_MULTIPLIER = 9
POINTS_OFFSET = 2

# Remaining budget shown when a user has no profile yet
DEFAULT_DAILY_BUDGET = 24
