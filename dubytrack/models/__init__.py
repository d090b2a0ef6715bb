from .user import User
from .profile import Profile
from .food_item import FoodItem
from .food_log import FoodLog
from .weight_log import WeightLog
from .refresh_token import RefreshToken

__all__ = ["User", "Profile", "FoodItem", "FoodLog", "WeightLog", "RefreshToken"]
