"""Date cells as they come back from a spreadsheet."""

import re
from datetime import date, datetime, timedelta
from typing import Any, List, Optional

# Serial day 0 for Google Sheets and Excel
SERIAL_EPOCH = datetime(1899, 12, 30)

_NUMERIC = re.compile(r"^\d+(\.\d+)?$")
_SLASH_DATE = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})$")


def serial_to_date(serial: float) -> Optional[date]:
    try:
        return (SERIAL_EPOCH + timedelta(days=float(serial))).date()
    except (OverflowError, ValueError):
        return None


def _iso_date(raw: str) -> Optional[date]:
    text = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed.date()


def sheet_date_candidates(value: Any) -> List[date]:
    """
    Every calendar day a cell value can be read as, preferred reading first.

    Slash or dash separated strings are read month-first, then day-first.
    """
    if value is None or isinstance(value, bool):
        return []
    if isinstance(value, datetime):
        return [value.date()]
    if isinstance(value, date):
        return [value]
    if isinstance(value, (int, float)):
        serial = serial_to_date(value)
        return [serial] if serial else []

    raw = str(value).strip()
    if not raw:
        return []
    if _NUMERIC.match(raw):
        serial = serial_to_date(float(raw))
        return [serial] if serial else []

    iso = _iso_date(raw)
    if iso:
        return [iso]

    match = _SLASH_DATE.match(raw)
    if not match:
        return []
    first, second, year = (int(part) for part in match.groups())
    if year < 100:
        year += 2000

    candidates: List[date] = []
    for month, day in ((first, second), (second, first)):
        try:
            parsed = date(year, month, day)
        except ValueError:
            continue
        if parsed not in candidates:
            candidates.append(parsed)
    return candidates


def parse_sheet_date(value: Any) -> Optional[date]:
    """The single day a cell stands for: month-first when valid, else day-first."""
    candidates = sheet_date_candidates(value)
    return candidates[0] if candidates else None


def matches_day(value: Any, day: date) -> bool:
    return parse_sheet_date(value) == day
