import logging
from datetime import date

import pytest

from dubytrack import create_app
from dubytrack.extensions import db
from dubytrack.services.dashboard_service import next_weigh_in

PROFILE = {
    "height_cm": 175,
    "current_weight_kg": 80,
    "goal_weight_kg": 72.5,
    "target_date": "2025-12-31",
    "gender": "male",
    "age": 30,
    "activity_level": "light",
}


def make_app(sheets_client, ledger_source="sheets"):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "LEDGER_SOURCE": ledger_source,
    }, sheets_client=sheets_client)
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture()
def client(fake_sheets):
    app = make_app(fake_sheets)
    c = app.test_client()
    r = c.post("/api/auth/register", json={"name": "Ann Lee", "email": "ann@example.com", "password": "secret1"})
    assert r.status_code == 201, r.data
    return c


def log_food(client, name, duby, portion=1):
    r = client.post("/api/food-log", json={"name": name, "duby": duby, "unit": "piece", "portion": portion})
    assert r.status_code == 201, r.data
    return r.get_json()["id"]


def test_register_adds_users_row_and_tab(client, fake_sheets):
    assert fake_sheets.cell("Users", 2, 1) == "Ann Lee"
    assert fake_sheets.cell("Users", 2, 2) == "ann@example.com"
    assert fake_sheets.cell("Users", 2, 3).startswith(("scrypt:", "pbkdf2:"))
    assert "Ann Lee" in fake_sheets.tabs
    assert fake_sheets.duplicates == 1


def test_register_name_collision_gets_numbered_tab(fake_sheets):
    fake_sheets.add_tab("Bob")
    app = make_app(fake_sheets)
    # A tab already named "Bob" is reused rather than duplicated
    app.test_client().post("/api/auth/register", json={"name": "Bob", "email": "bob@example.com", "password": "secret1"})
    assert fake_sheets.duplicates == 0

    app.test_client().post("/api/auth/register", json={"name": "Bo/b", "email": "bob2@example.com", "password": "secret1"})
    assert "Bo b" in fake_sheets.tabs


def test_profile_writes_general_info(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    assert fake_sheets.cell("Ann Lee", 2, 1) == "Ann Lee"
    assert fake_sheets.cell("Ann Lee", 2, 2) == 175
    assert fake_sheets.cell("Ann Lee", 2, 7) == "2025-12-31"
    assert fake_sheets.cell("Ann Lee", 2, 8) == 218


def test_food_logs_upsert_one_ledger_row_per_day(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    today = date.today().isoformat()

    log_food(client, "Apple", 2, portion=3)
    assert fake_sheets.cell("Ann Lee", 6, 4) == today
    assert fake_sheets.cell("Ann Lee", 6, 5) == 218
    assert fake_sheets.cell("Ann Lee", 6, 6) == "Apple"
    assert fake_sheets.cell("Ann Lee", 6, 7) == 6
    assert fake_sheets.cell("Ann Lee", 6, 8) == 212

    rice = log_food(client, "Rice", 3)
    assert fake_sheets.cell("Ann Lee", 6, 6) == "Apple | Rice"
    assert fake_sheets.cell("Ann Lee", 6, 7) == 9
    assert fake_sheets.cell("Ann Lee", 7, 4) is None

    assert client.delete(f"/api/food-log/{rice}").status_code == 200
    assert fake_sheets.cell("Ann Lee", 6, 6) == "Apple"
    assert fake_sheets.cell("Ann Lee", 6, 8) == 212


def test_backdated_log_goes_to_its_own_day(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    r = client.post("/api/food-log", json={
        "name": "Apple", "duby": 1, "unit": "piece", "portion": 1, "occurred_at": "2024-03-14T12:30:00",
    })
    assert r.status_code == 201
    assert fake_sheets.cell("Ann Lee", 6, 4) == "2024-03-14"
    assert fake_sheets.cell("Ann Lee", 6, 7) == 1


def test_ledger_budget_falls_back_to_profile_when_h2_blank(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    fake_sheets.set_cell("Ann Lee", 2, 8, "")
    log_food(client, "Apple", 1)
    assert fake_sheets.cell("Ann Lee", 6, 5) == 218


def test_dashboard_reads_ledger_row(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    log_food(client, "Apple", 2, portion=3)

    dash = client.get("/api/dashboard").get_json()
    assert dash["source"] == "sheets"
    assert dash["remainingDubyToday"] == 212
    assert dash["entries"][0]["food"] == "Apple"

    # The spreadsheet is authoritative in sheets mode
    fake_sheets.set_cell("Ann Lee", 6, 8, 100)
    dash = client.get("/api/dashboard").get_json()
    assert dash["remainingDubyToday"] == 100
    assert len(dash["items"]) == 1
    assert dash["nextWeighIn"] == next_weigh_in(date.today()).isoformat()


def test_dashboard_without_ledger_row_uses_sheet_budget(client, fake_sheets):
    client.put("/api/me/profile", json=PROFILE)
    fake_sheets.set_cell("Ann Lee", 2, 8, 50)
    dash = client.get("/api/dashboard").get_json()
    assert dash["source"] == "sheets"
    assert dash["remainingDubyToday"] == 50


def test_weight_log_appends_progress_rows(client, fake_sheets):
    client.post("/api/weight-log", json={"weight_kg": 80.5, "date": "2024-03-15"})
    client.post("/api/weight-log", json={"weight_kg": 79.9, "date": "2024-03-22"})
    assert fake_sheets.cell("Ann Lee", 6, 1) == "2024-03-15"
    assert fake_sheets.cell("Ann Lee", 6, 2) == 80.5
    assert fake_sheets.cell("Ann Lee", 7, 1) == "2024-03-22"
    assert fake_sheets.cell("Ann Lee", 7, 2) == 79.9


def test_food_search_reads_food_list(client, fake_sheets):
    fake_sheets.set_cell("FoodList", 2, 1, "Banana")
    fake_sheets.set_cell("FoodList", 2, 2, 1)
    fake_sheets.set_cell("FoodList", 2, 3, "piece")
    fake_sheets.set_cell("FoodList", 3, 1, "Bagel")
    fake_sheets.set_cell("FoodList", 3, 2, "4")
    fake_sheets.set_cell("FoodList", 3, 3, "piece")

    assert client.get("/api/food/search?q=BAN").get_json() == [{"name": "Banana", "duby": 1, "unit": "piece"}]
    assert [f["name"] for f in client.get("/api/food").get_json()] == ["Banana", "Bagel"]


def test_database_mode_still_mirrors_but_reads_database(fake_sheets):
    app = make_app(fake_sheets, ledger_source="database")
    c = app.test_client()
    c.post("/api/auth/register", json={"name": "Cy", "email": "cy@example.com", "password": "secret1"})
    log_food(c, "Apple", 2)
    fake_sheets.set_cell("Cy", 6, 8, 999)

    dash = c.get("/api/dashboard").get_json()
    assert dash["source"] == "database"
    assert dash["remainingDubyToday"] == 24 - 2
    assert c.get("/api/food/search?q=app").get_json()[0]["name"] == "Apple"


def test_broken_spreadsheet_never_fails_requests(broken_sheets, caplog):
    app = make_app(broken_sheets)
    c = app.test_client()
    with caplog.at_level(logging.WARNING):
        r = c.post("/api/auth/register", json={"name": "Dee", "email": "dee@example.com", "password": "secret1"})
        assert r.status_code == 201
        assert c.put("/api/me/profile", json=PROFILE).status_code == 200
        log_id = log_food(c, "Apple", 2, portion=3)
        assert c.post("/api/weight-log", json={"weight_kg": 80}).status_code == 201

        dash = c.get("/api/dashboard").get_json()
        assert dash["source"] == "database"
        assert dash["remainingDubyToday"] == 218 - 6

        assert c.get("/api/food/search?q=app").get_json()[0]["name"] == "Apple"
        assert c.delete(f"/api/food-log/{log_id}").status_code == 200

    assert any("sheets unavailable" in rec.getMessage() for rec in caplog.records)


def test_unconfigured_spreadsheet_disables_mirror():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "GOOGLE_SHEETS_ID": None,
        "LEDGER_SOURCE": "sheets",
    })
    with app.app_context():
        db.create_all()
        from dubytrack.extensions import sheets
        assert sheets.enabled is False
    c = app.test_client()
    c.post("/api/auth/register", json={"name": "Eve", "email": "eve@example.com", "password": "secret1"})
    assert c.get("/api/dashboard").get_json()["source"] == "database"
