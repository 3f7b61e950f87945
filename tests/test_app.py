from __future__ import annotations

import pytest

from guard_manager.main import create_app


@pytest.fixture
def client():
    app = create_app("guard_manager.settings.testing")
    yield app.test_client()
    app.extensions["guard_manager"].store.close()


def test_seeded_lists(client):
    sites = client.get("/api/sites").get_json()["sites"]
    guards = client.get("/api/guards").get_json()["guards"]

    assert [s["name"] for s in sites] == ["North Warehouse", "City Mall"]
    assert [g["code"] for g in guards] == ["SG-101", "SG-102", "SG-103"]
    assert guards[0]["site_name"] == "North Warehouse"


def test_validation_error_maps_to_400(client):
    resp = client.post("/api/guards", json={"name": ""})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_missing_record_maps_to_404(client):
    assert client.delete("/api/expenses/nope").status_code == 404
    assert client.put("/api/guards/nope", json={"name": "X"}).status_code == 404


def test_mark_attendance_then_payroll(client):
    for shift in ("morning", "evening"):
        resp = client.post("/api/attendance/cycle", json={"guard_id": "g1", "date": "2025-01-10", "shift": shift})
        assert resp.status_code == 200
    client.post("/api/attendance/food", json={"guard_id": "g1", "date": "2025-01-10", "shift": "morning"})
    client.post("/api/expenses", json={"guard_id": "g1", "amount": 100, "date": "2025-01-11"})

    sheet = client.get("/api/attendance?date=2025-01-10&site_id=s1").get_json()["records"]
    assert [r["guard_id"] for r in sheet] == ["g1", "g2"]
    assert sheet[0]["morning"] == {"status": "Present", "food_taken": True}

    report = client.get("/api/payroll/2025-01").get_json()
    rajesh = report["slips"][0]
    assert rajesh["total_shifts"] == 2
    assert rajesh["gross_salary"] == 1200
    assert rajesh["total_food_cost"] == 50
    assert rajesh["total_advance"] == 100
    assert rajesh["net_salary"] == 1050
    assert len(report["slips"]) == 3

    csv_resp = client.get("/api/payroll/2025-01/export.csv")
    assert csv_resp.mimetype == "text/csv"


def test_unknown_shift_is_rejected(client):
    resp = client.post("/api/attendance/cycle", json={"guard_id": "g1", "date": "2025-01-10", "shift": "afternoon"})
    assert resp.status_code == 400


def test_invoice_round_trip(client):
    draft = client.get("/api/invoices/new").get_json()["draft"]
    assert draft["invoice_number"].startswith("INV/")
    assert draft["company"]["name"] == "Test Security Services"

    draft["client_name"] = "Logistics Corp"
    draft["line_items"][0]["rate"] = 1000
    saved = client.post("/api/invoices", json=draft)
    assert saved.status_code == 201
    invoice = saved.get_json()["invoice"]
    assert invoice["total_amount"] == 26000

    reloaded = client.get(f"/api/invoices/{invoice['id']}/draft").get_json()["draft"]
    assert reloaded["total_in_words"] == "Twenty Six Thousand Rupees Only"

    pdf = client.get(f"/api/invoices/{invoice['id']}/pdf")
    assert pdf.mimetype == "application/pdf"
    assert pdf.data.startswith(b"%PDF")

    assert client.delete(f"/api/invoices/{invoice['id']}").status_code == 200
    assert client.get("/api/invoices").get_json()["invoices"] == []


def test_amount_in_words_endpoint(client):
    body = client.get("/api/amount-in-words?amount=100000").get_json()
    assert body["words"] == "One Lakh Rupees Only"
    assert body["formatted"] == "1,00,000.00"


def test_shift_slot_that_is_not_an_object_is_rejected(client):
    resp = client.post("/api/attendance", json={"guard_id": "g1", "date": "2025-01-10", "morning": "Present"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_text_guard_name_is_rejected(client):
    resp = client.post("/api/guards", json={"name": 123})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_attendance_post_without_site_lands_on_guards_sheet(client):
    resp = client.post("/api/attendance", json={"guard_id": "g1", "date": "2024-05-01", "morning": {"status": "Present"}})
    assert resp.status_code == 200
    assert resp.get_json()["record"]["site_id"] == "s1"

    sheet = client.get("/api/attendance?date=2024-05-01&site_id=s1").get_json()["records"]
    assert sheet[0]["morning"]["status"] == "Present"
