from datetime import date, datetime, timedelta

from fastapi.testclient import TestClient

from workforce.main import app
from workforce.services.auth_service import create_access_token

client = TestClient(app)

MONDAY = datetime(2026, 3, 2, 8, 0)


def _log(account, task_id, start, hours, break_minutes=0, status="completed"):
    r = client.post(
        "/api/work-hours",
        json={
            "task_id": task_id,
            "start_time": start.isoformat(),
            "end_time": (start + timedelta(hours=hours)).isoformat(),
            "break_time_minutes": break_minutes,
            "status": status,
        },
        headers=account.headers,
    )
    assert r.status_code == 200, r.text
    return r.json()


def test_create_computes_total_hours(employee, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 8, break_minutes=30)
    assert row["total_hours"] == 7.5
    assert row["employee_id"] == employee.employee_id


def test_create_without_end_leaves_total_empty(employee, task_factory):
    task = task_factory()
    r = client.post(
        "/api/work-hours",
        json={"task_id": task.id, "start_time": MONDAY.isoformat()},
        headers=employee.headers,
    )
    assert r.status_code == 200
    assert r.json()["total_hours"] is None
    assert r.json()["status"] == "in_progress"


def test_update_recomputes_total(employee, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 4)

    r = client.put(
        f"/api/work-hours/{row['id']}",
        json={"break_time_minutes": 60},
        headers=employee.headers,
    )
    assert r.status_code == 200, r.text
    assert r.json()["total_hours"] == 3.0


def test_employee_sees_only_own_rows_admin_sees_all(account_factory, task_factory):
    alice = account_factory("employee")
    bob = account_factory("employee")
    admin = account_factory("admin")
    task = task_factory()

    a_row = _log(alice, task.id, MONDAY, 2)
    _log(bob, task.id, MONDAY + timedelta(days=1), 3)

    own = client.get("/api/work-hours", headers=alice.headers).json()
    assert [r["id"] for r in own] == [a_row["id"]]

    everything = client.get("/api/work-hours", headers=admin.headers).json()
    assert len(everything) == 2
    # newest start first
    assert everything[0]["employee_id"] == bob.employee_id

    hidden = client.get(f"/api/work-hours/{a_row['id']}", headers=bob.headers)
    assert hidden.status_code == 404

    foreign_edit = client.put(f"/api/work-hours/{a_row['id']}", json={"notes": "x"}, headers=bob.headers)
    assert foreign_edit.status_code == 404


def test_only_approvers_can_approve(employee, manager, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 2, status="pending_approval")

    self_approve = client.put(
        f"/api/work-hours/{row['id']}", json={"status": "approved"}, headers=employee.headers
    )
    assert self_approve.status_code == 403

    r = client.post(f"/api/work-hours/{row['id']}/approve", headers=employee.headers)
    assert r.status_code == 403

    r = client.post(f"/api/work-hours/{row['id']}/approve", headers=manager.headers)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["status"] == "approved"
    assert body["approved_by"] == manager.profile_id
    assert body["approved_at"] is not None

    again = client.post(f"/api/work-hours/{row['id']}/approve", headers=manager.headers)
    assert again.status_code == 409


def test_week_summary_reports_overtime(employee, task_factory):
    task = task_factory()
    for day in range(5):
        _log(employee, task.id, MONDAY + timedelta(days=day), 9)
    # following week, must not be counted
    _log(employee, task.id, MONDAY + timedelta(days=7), 5)

    r = client.get("/api/work-hours/summary", params={"week_of": "2026-03-04"}, headers=employee.headers)
    assert r.status_code == 200, r.text
    summary = r.json()
    assert summary["week_start"] == date(2026, 3, 2).isoformat()
    assert summary["week_end"] == date(2026, 3, 8).isoformat()
    assert summary["total_hours"] == 45.0
    assert summary["overtime_hours"] == 5.0
    assert summary["entries"] == 5
    assert summary["days_worked"] == 5
    assert summary["avg_hours_per_day"] == 9.0


def test_work_hours_for_missing_employee_record_is_404():
    token = create_access_token(user_id=999, profile_id="no-such-profile", role="employee")
    r = client.get("/api/work-hours", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 404
    assert r.json() == {"message": "Employee record not found"}


def test_approved_row_is_locked_for_the_employee(employee, manager, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 2, status="pending_approval")
    assert client.post(f"/api/work-hours/{row['id']}/approve", headers=manager.headers).status_code == 200

    stretch = client.put(
        f"/api/work-hours/{row['id']}",
        json={"end_time": (MONDAY + timedelta(hours=12)).isoformat()},
        headers=employee.headers,
    )
    assert stretch.status_code == 409

    unapprove = client.put(
        f"/api/work-hours/{row['id']}", json={"status": "completed"}, headers=employee.headers
    )
    assert unapprove.status_code == 409

    stored = client.get(f"/api/work-hours/{row['id']}", headers=employee.headers).json()
    assert stored["status"] == "approved"
    assert stored["total_hours"] == 2.0
    assert stored["approved_by"] == manager.profile_id


def test_reopening_an_approved_row_clears_the_approval(employee, manager, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 2, status="pending_approval")
    client.post(f"/api/work-hours/{row['id']}/approve", headers=manager.headers)

    r = client.put(f"/api/work-hours/{row['id']}", json={"status": "completed"}, headers=manager.headers)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["status"] == "completed"
    assert body["approved_by"] is None
    assert body["approved_at"] is None

    # the employee may edit it again once it is no longer approved
    r = client.put(f"/api/work-hours/{row['id']}", json={"notes": "fixed"}, headers=employee.headers)
    assert r.status_code == 200


def test_admin_can_approve_through_update(employee, admin, task_factory):
    task = task_factory()
    row = _log(employee, task.id, MONDAY, 3)

    r = client.put(f"/api/work-hours/{row['id']}", json={"status": "approved"}, headers=admin.headers)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["status"] == "approved"
    assert body["approved_by"] == admin.profile_id
    assert body["approved_at"] is not None


def test_approving_an_open_row_through_update_is_409(employee, manager, task_factory):
    task = task_factory()
    r = client.post(
        "/api/work-hours",
        json={"task_id": task.id, "start_time": MONDAY.isoformat()},
        headers=employee.headers,
    )
    row_id = r.json()["id"]

    r = client.put(f"/api/work-hours/{row_id}", json={"status": "approved"}, headers=manager.headers)
    assert r.status_code == 409
    stored = client.get(f"/api/work-hours/{row_id}", headers=employee.headers).json()
    assert stored["status"] == "in_progress"
    assert stored["approved_by"] is None
