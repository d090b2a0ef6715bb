import re
import pytest

_A1 = re.compile(r"^(?:'((?:[^']|'')+)'|([^!]+))!([A-Z]+)(\d+)?(?::([A-Z]+)(\d+)?)?$")


def _col(letters):
    n = 0
    for ch in letters:
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n


def _parse(a1_range):
    m = _A1.match(a1_range)
    assert m, f"bad range {a1_range}"
    quoted, bare, c1, r1, c2, r2 = m.groups()
    title = quoted.replace("''", "'") if quoted else bare
    start_col = _col(c1)
    start_row = int(r1) if r1 else 1
    end_col = _col(c2) if c2 else start_col
    end_row = int(r2) if r2 else None
    return title, start_row, start_col, end_row, end_col


class FakeSheetsClient:
    """In-memory spreadsheet speaking the same five calls as SheetsClient."""

    spreadsheet_id = "fake-spreadsheet"

    def __init__(self, tabs=("UserTemplate", "Users", "FoodList")):
        self.tabs = {}
        self.duplicates = 0
        self.calls = []
        for title in tabs:
            self.add_tab(title)

    def add_tab(self, title, cells=None):
        self.tabs[title] = {"sheetId": len(self.tabs) + 100, "cells": dict(cells or {})}

    def set_cell(self, title, row, col, value):
        self.tabs[title]["cells"][(row, col)] = value

    def cell(self, title, row, col):
        return self.tabs[title]["cells"].get((row, col))

    def _last_row(self, title):
        cells = self.tabs[title]["cells"]
        return max((r for r, _ in cells), default=0)

    # SheetsClient surface

    def get_metadata(self):
        self.calls.append(("get_metadata",))
        return {"sheets": [
            {"properties": {"title": t, "sheetId": tab["sheetId"]}} for t, tab in self.tabs.items()
        ]}

    def get_values(self, a1_range, unformatted=False):
        self.calls.append(("get_values", a1_range))
        title, r1, c1, r2, c2 = _parse(a1_range)
        cells = self.tabs[title]["cells"]
        last = r2 if r2 is not None else self._last_row(title)
        rows = []
        for r in range(r1, last + 1):
            row = [cells.get((r, c), "") for c in range(c1, c2 + 1)]
            while row and row[-1] in ("", None):
                row.pop()
            rows.append(row)
        while rows and not rows[-1]:
            rows.pop()
        return rows

    def update_values(self, a1_range, values):
        self.calls.append(("update_values", a1_range, values))
        title, r1, c1, _, _ = _parse(a1_range)
        for i, row in enumerate(values):
            for j, value in enumerate(row):
                self.tabs[title]["cells"][(r1 + i, c1 + j)] = value

    def append_values(self, a1_range, values):
        self.calls.append(("append_values", a1_range, values))
        title, r1, c1, _, c2 = _parse(a1_range)
        cells = self.tabs[title]["cells"]
        used = [r for (r, c) in cells if r >= r1 and c1 <= c <= max(c1, c2) and cells[(r, c)] not in ("", None)]
        start = max(used) + 1 if used else r1
        for i, row in enumerate(values):
            for j, value in enumerate(row):
                cells[(start + i, c1 + j)] = value

    def batch_update(self, requests):
        self.calls.append(("batch_update", requests))
        for req in requests:
            dup = req["duplicateSheet"]
            source = next(t for t, tab in self.tabs.items() if tab["sheetId"] == dup["sourceSheetId"])
            self.add_tab(dup["newSheetName"], self.tabs[source]["cells"])
            self.duplicates += 1


class BrokenSheetsClient:
    """Every call fails, like a spreadsheet with revoked credentials."""

    spreadsheet_id = "broken"

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("sheets unavailable")
        return fail


@pytest.fixture()
def fake_sheets():
    return FakeSheetsClient()


@pytest.fixture()
def broken_sheets():
    return BrokenSheetsClient()
