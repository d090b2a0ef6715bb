from enum import Enum


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"


class LedgerSource(str, Enum):
    DATABASE = "database"
    SHEETS = "sheets"
