"""
Spreadsheet Adapter

Typed reads and writes against the per-user tabs of the mirror spreadsheet.

Layout of a user tab (cloned from the template tab):
- Row 2, A..H: name, height, start weight, gender, age, target weight,
  target date, daily budget
- Budget ledger from row 6, D..H: date, daily budget, food, price, remaining
- Progress table from row 6, A..B: date, weight
"""

import re
from datetime import date
from typing import Any, Dict, List, Optional

from dubytrack.services.sheets.client import SheetsClient
from dubytrack.services.sheets.dates import matches_day

FORBIDDEN_TITLE_CHARS = re.compile(r"[:\\/?*\[\]]")
MAX_TITLE_LENGTH = 80
DEFAULT_TAB_TITLE = "User"

LEDGER_FIRST_ROW = 6
LEDGER_LAST_ROW = 1000

USERS_SHEET = "Users"
FOOD_LIST_SHEET = "FoodList"
FOOD_SEARCH_LIMIT = 10


def sanitize_tab_title(name: str) -> str:
    title = FORBIDDEN_TITLE_CHARS.sub(" ", name or "")
    title = re.sub(r"\s+", " ", title).strip()
    if not title:
        title = DEFAULT_TAB_TITLE
    return title[:MAX_TITLE_LENGTH]


def unique_title(base: str, titles: List[str]) -> str:
    if base not in titles:
        return base
    i = 1
    while f"{base} ({i})" in titles:
        i += 1
    return f"{base} ({i})"


def is_user_tab(title: str, base: str) -> bool:
    """True for `base` itself or a numbered copy `base (n)`."""
    return title == base or re.fullmatch(re.escape(base) + r" \(\d+\)", title) is not None


def a1(tab_title: str, cells: str) -> str:
    quoted = tab_title.replace("'", "''")
    return f"'{quoted}'!{cells}"


def to_number(value: Any):
    if value is None or value == "" or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if number != number:  # NaN
        return 0
    return int(number) if number.is_integer() else number


def _cell(row: List[Any], index: int) -> Any:
    return row[index] if len(row) > index else None


def _budget_row(row: List[Any]) -> Dict[str, Any]:
    return {
        "date": str(_cell(row, 0) or ""),
        "daily_budget": to_number(_cell(row, 1)),
        "food": str(_cell(row, 2) or ""),
        "price": to_number(_cell(row, 3)),
        "surplus": to_number(_cell(row, 4)),
    }


class SheetsAdapter:
    def __init__(self, client: SheetsClient, template_name: str = "UserTemplate"):
        self.client = client
        self.template_name = template_name

    # ------------------------------------------------------------------
    # Tabs
    # ------------------------------------------------------------------

    def list_sheet_titles(self) -> List[str]:
        meta = self.client.get_metadata()
        titles = []
        for sheet in meta.get("sheets") or []:
            title = (sheet.get("properties") or {}).get("title")
            if title:
                titles.append(title)
        return titles

    def get_sheet_id(self, title: str) -> Optional[int]:
        meta = self.client.get_metadata()
        for sheet in meta.get("sheets") or []:
            props = sheet.get("properties") or {}
            if props.get("title") == title:
                return props.get("sheetId")
        return None

    def duplicate_user_template(self, user_name: str) -> str:
        source_id = self.get_sheet_id(self.template_name)
        if source_id is None:
            raise LookupError(f"Template sheet not found: {self.template_name}")
        new_title = unique_title(sanitize_tab_title(user_name), self.list_sheet_titles())
        self.client.batch_update([
            {"duplicateSheet": {"sourceSheetId": source_id, "newSheetName": new_title}}
        ])
        return new_title

    def ensure_user_tab(self, user_name: str) -> str:
        """Return the user's tab title, cloning the template on first use."""
        base = sanitize_tab_title(user_name)
        for title in self.list_sheet_titles():
            if is_user_tab(title, base):
                return title
        return self.duplicate_user_template(user_name)

    # ------------------------------------------------------------------
    # General info (row 2)
    # ------------------------------------------------------------------

    def write_general_info(
        self,
        tab_title: str,
        name: str,
        height_cm: int,
        start_weight_kg: float,
        gender: str,
        age: int,
        target_weight_kg: float,
        target_date: Optional[str] = None,
        daily_budget: Optional[int] = None,
    ) -> None:
        values = [[
            name,
            height_cm,
            start_weight_kg,
            gender,
            age,
            target_weight_kg,
            target_date or "",
            daily_budget if daily_budget is not None else "",
        ]]
        self.client.update_values(a1(tab_title, "A2:H2"), values)

    def read_daily_budget(self, tab_title: str):
        rows = self.client.get_values(a1(tab_title, "H2:H2"))
        return to_number(_cell(rows[0], 0) if rows else None)

    # ------------------------------------------------------------------
    # Budget ledger (D6:H)
    # ------------------------------------------------------------------

    def read_budget_rows(self, tab_title: str) -> List[Dict[str, Any]]:
        rows = self.client.get_values(a1(tab_title, f"D{LEDGER_FIRST_ROW}:H{LEDGER_LAST_ROW}"))
        return [_budget_row(row) for row in rows if row]

    def find_budget_today(self, tab_title: str, day: date) -> Optional[Dict[str, Any]]:
        rows = self.client.get_values(a1(tab_title, f"D{LEDGER_FIRST_ROW}:H{LEDGER_LAST_ROW}"))
        for row in rows:
            if row and matches_day(row[0], day):
                return _budget_row(row)
        return None

    def find_budget_row_index(self, tab_title: str, day: date) -> Optional[int]:
        """Sheet row number of the ledger row for `day`, scanning top-down."""
        rows = self.client.get_values(
            a1(tab_title, f"D{LEDGER_FIRST_ROW}:D{LEDGER_LAST_ROW}"), unformatted=True
        )
        for offset, row in enumerate(rows):
            if row and matches_day(row[0], day):
                return LEDGER_FIRST_ROW + offset
        return None

    def upsert_budget_row(self, tab_title: str, day: date, daily_budget, price, food_joined: str) -> None:
        values = [[day.isoformat(), daily_budget, food_joined, price, daily_budget - price]]
        row_index = self.find_budget_row_index(tab_title, day)
        if row_index is not None:
            self.client.update_values(a1(tab_title, f"D{row_index}:H{row_index}"), values)
        else:
            self.client.append_values(
                a1(tab_title, f"D{LEDGER_FIRST_ROW}:H{LEDGER_FIRST_ROW}"), values
            )

    # ------------------------------------------------------------------
    # Progress table (A6:B)
    # ------------------------------------------------------------------

    def append_progress_row(self, tab_title: str, day: date, weight_kg: float) -> None:
        self.client.append_values(
            a1(tab_title, f"A{LEDGER_FIRST_ROW}:B{LEDGER_FIRST_ROW}"),
            [[day.isoformat(), weight_kg]],
        )

    # ------------------------------------------------------------------
    # Shared tabs: food list and users
    # ------------------------------------------------------------------

    def read_food_list(self, sheet_name: str = FOOD_LIST_SHEET) -> List[Dict[str, Any]]:
        rows = self.client.get_values(a1(sheet_name, "A2:C"))
        return [
            {
                "name": str(row[0]),
                "duby": to_number(_cell(row, 1)),
                "unit": str(_cell(row, 2) or ""),
            }
            for row in rows
            if len(row) >= 3 and str(row[0] or "").strip()
        ]

    def search_food(self, query: str, sheet_name: str = FOOD_LIST_SHEET) -> List[Dict[str, Any]]:
        q = (query or "").strip().lower()
        if not q:
            return []
        matches = [row for row in self.read_food_list(sheet_name) if q in row["name"].lower()]
        return matches[:FOOD_SEARCH_LIMIT]

    def find_user_by_email(self, email: str, sheet_name: str = USERS_SHEET) -> Optional[Dict[str, str]]:
        wanted = (email or "").strip().lower()
        for row in self.client.get_values(a1(sheet_name, "A2:C")):
            row_email = str(_cell(row, 1) or "").strip().lower()
            if row_email and row_email == wanted:
                return {
                    "name": str(_cell(row, 0) or "").strip(),
                    "email": row_email,
                    "password_hash": str(_cell(row, 2) or "").strip(),
                }
        return None

    def append_user(self, name: str, email: str, password_hash: str, sheet_name: str = USERS_SHEET) -> None:
        self.client.append_values(a1(sheet_name, "A2:C"), [[name, email, password_hash]])
