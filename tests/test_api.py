from __future__ import annotations

from tests.fakes import login


def test_register_logs_in_and_me(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "new@example.com", "password": "secret1", "full_name": "New Hire"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["user"]["role"] == "employee"

    me = client.get("/api/me").get_json()
    assert me["email"] == "new@example.com"
    assert me["profile_pic_ref"] is None
    assert "password_hash" not in me


def test_login_failure_is_401(client, employee):
    resp = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "nope-nope"})

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_endpoints_require_login(client):
    assert client.get("/api/attendance/state").status_code == 401
    assert client.post("/api/attendance/clock", json={}).status_code == 401
    assert client.get("/api/payslips").status_code == 401


def test_admin_endpoints_forbid_employees(client, employee):
    login(client, "ana@example.com", "secret1")

    assert client.get("/api/admin/employees").status_code == 403
    assert client.get("/api/admin/roles").status_code == 403


def test_clock_toggle_and_history(client, employee):
    login(client, "ana@example.com", "secret1")
    assert client.get("/api/attendance/state").get_json()["next_action"] == "clockIn"

    first = client.post("/api/attendance/clock", json={"image_ref": "selfies/1.jpg"})
    assert first.status_code == 201
    assert first.get_json()["record"]["type"] == "clockIn"

    state = client.get("/api/attendance/state").get_json()
    assert state["state"] == "clockedIn"
    assert state["next_action"] == "clockOut"

    second = client.post("/api/attendance/clock", json={"image_ref": "selfies/2.jpg"})
    assert second.get_json()["record"]["type"] == "clockOut"

    history = client.get("/api/attendance/history").get_json()
    assert [r["type"] for r in history] == ["clockOut", "clockIn"]
    assert client.get("/api/attendance/history?limit=1").get_json()[0]["type"] == "clockOut"


def test_clock_rejects_bad_type_and_repeated_action(client, employee):
    login(client, "ana@example.com", "secret1")

    assert client.post("/api/attendance/clock", json={"type": "lunchBreak"}).status_code == 400
    assert client.post("/api/attendance/clock", json={"type": "clockOut"}).status_code == 400
    assert client.post("/api/attendance/clock", json={"type": "clockIn"}).status_code == 201
    assert client.post("/api/attendance/clock", json={"type": "clockIn"}).status_code == 400


def test_history_limit_must_be_numeric(client, employee):
    login(client, "ana@example.com", "secret1")

    assert client.get("/api/attendance/history?limit=ten").status_code == 400


def test_admin_sets_details_and_reads_employee_attendance(client, admin, employee):
    login(client, "ana@example.com", "secret1")
    client.post("/api/attendance/clock", json={})
    client.post("/api/auth/logout")

    login(client, "boss@example.com", "admin123")
    resp = client.put(
        f"/api/admin/employees/{employee.user_id}/details",
        json={
            "hourly_rate": 90,
            "overtime_rate": 135,
            "position": "Barista",
            "shift": {"start_hour": 7, "start_minute": 0, "end_hour": 16, "end_minute": 0},
        },
    )
    assert resp.status_code == 200
    assert resp.get_json()["shift"] == {"start_hour": 7, "start_minute": 0, "end_hour": 16, "end_minute": 0}

    employees = client.get("/api/admin/employees").get_json()
    assert [e["email"] for e in employees] == ["ana@example.com"]
    assert employees[0]["position"] == "Barista"

    rows = client.get(f"/api/admin/employees/{employee.user_id}/attendance").get_json()
    assert len(rows) == 1


def test_admin_details_validation_and_missing_employee(client, admin, employee):
    login(client, "boss@example.com", "admin123")
    bad_window = {"start_hour": 19, "start_minute": 0, "end_hour": 10, "end_minute": 0}

    assert client.put(f"/api/admin/employees/{employee.user_id}/details", json={"shift": bad_window}).status_code == 400
    assert client.put(f"/api/admin/employees/{employee.user_id}/details", json={"shift": "9-5"}).status_code == 400
    assert client.put("/api/admin/employees/999/details", json={"shift": {}}).status_code == 404
    assert client.get("/api/admin/employees/999/attendance").status_code == 404


def test_payslip_issue_and_read(client, admin, employee):
    login(client, "boss@example.com", "admin123")
    resp = client.post(f"/api/admin/employees/{employee.user_id}/payslips", json={"content": "Net pay: PHP 15,200"})
    assert resp.status_code == 201
    assert client.post(f"/api/admin/employees/{employee.user_id}/payslips", json={"content": ""}).status_code == 400
    client.post("/api/auth/logout")

    login(client, "ana@example.com", "secret1")
    items = client.get("/api/payslips").get_json()
    assert [p["content"] for p in items] == ["Net pay: PHP 15,200"]
    assert items[0]["sent_by"] == admin.user_id


def test_role_management_flow(client, admin, employee):
    login(client, "boss@example.com", "admin123")

    resp = client.put("/api/admin/roles/ana@example.com", json={"role": "admin"})
    assert resp.status_code == 200
    assert resp.get_json()["assigned_by"] == admin.user_id
    assert {a["email"] for a in client.get("/api/admin/roles").get_json()} == {"boss@example.com", "ana@example.com"}

    assert client.delete("/api/admin/roles/ana@example.com").status_code == 200
    assert client.delete("/api/admin/roles/ana@example.com").status_code == 404
    assert client.delete("/api/admin/roles/boss@example.com").status_code == 400


def test_registration_picks_up_assigned_role(client, admin):
    login(client, "boss@example.com", "admin123")
    client.put("/api/admin/roles/second@example.com", json={"role": "admin"})
    client.post("/api/auth/logout")

    resp = client.post(
        "/api/auth/register",
        json={"email": "second@example.com", "password": "secret1", "full_name": "Second Admin"},
    )
    assert resp.get_json()["user"]["role"] == "admin"


def test_events_poll_returns_own_changes(client, admin, employee):
    login(client, "boss@example.com", "admin123")
    client.post(f"/api/admin/employees/{employee.user_id}/payslips", json={"content": "slip"})
    client.post("/api/auth/logout")

    login(client, "ana@example.com", "secret1")
    client.post("/api/attendance/clock", json={})

    names = [e["name"] for e in client.get("/api/events").get_json()]
    assert names == ["payslip.issued", "attendance.recorded"]
    assert client.get("/api/events", query_string={"since": "2999-01-01T00:00:00+08:00"}).get_json() == []
    assert client.get("/api/events", query_string={"since": "2999-01-01T00:00:00Z"}).get_json() == []
    assert len(client.get("/api/events", query_string={"since": "2000-01-01T00:00:00Z"}).get_json()) == 2
    assert client.get("/api/events?since=yesterday").status_code == 400
    assert client.get("/api/events?since=2026-01-01T00:00:00").status_code == 400


def test_profile_picture_update(client, employee):
    login(client, "ana@example.com", "secret1")

    resp = client.put("/api/me/profile-picture", json={"image_ref": "avatars/ana.png"})

    assert resp.status_code == 200
    assert resp.get_json()["profile_pic_ref"] == "avatars/ana.png"
    assert client.put("/api/me/profile-picture", data="nope").status_code == 400


def test_unknown_route_keeps_404(client):
    assert client.get("/api/nowhere").status_code == 404


def test_revoked_admin_loses_access_on_open_session(app, client, admin, employee):
    login(client, "boss@example.com", "admin123")
    assert client.put("/api/admin/roles/ana@example.com", json={"role": "admin"}).status_code == 200

    other = app.test_client()
    login(other, "ana@example.com", "secret1")
    assert other.get("/api/admin/roles").status_code == 200

    assert client.delete("/api/admin/roles/ana@example.com").status_code == 200

    assert other.get("/api/admin/roles").status_code == 403
    assert other.get("/api/me").get_json()["role"] == "employee"


def test_session_of_removed_account_is_rejected(client, container, employee):
    login(client, "ana@example.com", "secret1")
    del container.users_repo.by_id[employee.user_id]

    assert client.get("/api/attendance/state").status_code == 401
    assert client.get("/api/me").status_code == 401
