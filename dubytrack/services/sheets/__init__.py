from .client import SheetsClient
from .adapter import SheetsAdapter, sanitize_tab_title, unique_title
from .dates import parse_sheet_date, sheet_date_candidates, matches_day
from .mirror import SheetsMirror

__all__ = [
    "SheetsClient",
    "SheetsAdapter",
    "SheetsMirror",
    "sanitize_tab_title",
    "unique_title",
    "parse_sheet_date",
    "sheet_date_candidates",
    "matches_day",
]
