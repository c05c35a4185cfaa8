from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from workforce.main import app

client = TestClient(app)


def test_departments_crud_is_admin_gated(admin, employee):
    r = client.post(
        "/api/departments",
        json={"name": "Warehouse", "description": "Inbound and outbound"},
        headers=admin.headers,
    )
    assert r.status_code == 200, r.text
    dept_id = r.json()["id"]
    client.post("/api/departments", json={"name": "Accounting"}, headers=admin.headers)

    listing = client.get("/api/departments", headers=employee.headers)
    assert listing.status_code == 200
    assert [d["name"] for d in listing.json()] == ["Accounting", "Warehouse"]

    r = client.put(f"/api/departments/{dept_id}", json={"description": "Dock"}, headers=admin.headers)
    assert r.status_code == 200
    assert r.json()["description"] == "Dock"
    assert r.json()["name"] == "Warehouse"

    assert client.put(f"/api/departments/{dept_id}", json={"name": "X"}, headers=employee.headers).status_code == 403
    assert client.get("/api/departments/missing", headers=employee.headers).status_code == 404


def test_department_with_unknown_manager_is_400(admin):
    r = client.post("/api/departments", json={"name": "Ops", "manager_id": "nobody"}, headers=admin.headers)
    assert r.status_code == 400


def test_tasks_list_hides_inactive(admin, employee):
    r = client.post(
        "/api/tasks",
        json={"name": "Forklift check", "type": "maintenance", "estimated_hours": 1.5},
        headers=admin.headers,
    )
    assert r.status_code == 200, r.text
    task = r.json()
    assert task["created_by"] == admin.profile_id
    assert task["is_active"] is True

    client.post("/api/tasks", json={"name": "Archive", "type": "administrative", "is_active": False}, headers=admin.headers)

    visible = client.get("/api/tasks", headers=employee.headers).json()
    assert [t["name"] for t in visible] == ["Forklift check"]

    # only admins may widen the listing
    still_hidden = client.get("/api/tasks", params={"include_inactive": True}, headers=employee.headers).json()
    assert len(still_hidden) == 1
    everything = client.get("/api/tasks", params={"include_inactive": True}, headers=admin.headers).json()
    assert len(everything) == 2

    r = client.put(f"/api/tasks/{task['id']}", json={"is_active": False}, headers=admin.headers)
    assert r.status_code == 200
    assert client.get("/api/tasks", headers=employee.headers).json() == []


def test_task_with_invalid_type_is_400(admin):
    r = client.post("/api/tasks", json={"name": "Sing", "type": "karaoke"}, headers=admin.headers)
    assert r.status_code == 400


def test_employees_listing_and_update(admin, account_factory):
    worker = account_factory("employee", first_name="Piet")
    dept = client.post("/api/departments", json={"name": "Logistics"}, headers=admin.headers).json()

    listing = client.get("/api/employees", headers=admin.headers)
    assert listing.status_code == 200
    rows = {row["id"]: row for row in listing.json()}
    assert worker.employee_id in rows
    assert rows[worker.employee_id]["profile"]["first_name"] == "Piet"

    r = client.put(
        f"/api/employees/{worker.employee_id}",
        json={"department_id": dept["id"], "hourly_rate": 18.5, "status": "on_leave"},
        headers=admin.headers,
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["department_id"] == dept["id"]
    assert body["hourly_rate"] == 18.5
    assert body["status"] == "on_leave"

    bad = client.put(
        f"/api/employees/{worker.employee_id}",
        json={"department_id": "missing"},
        headers=admin.headers,
    )
    assert bad.status_code == 400


def test_projects_are_managed_by_admins_and_managers(manager, employee):
    r = client.post(
        "/api/projects",
        json={"name": "Peak season", "start_date": "2026-11-01", "end_date": "2026-12-31", "budget": 12000},
        headers=manager.headers,
    )
    assert r.status_code == 200, r.text
    project = r.json()
    assert project["status"] == "active"

    assert client.post("/api/projects", json={"name": "Nope"}, headers=employee.headers).status_code == 403
    assert [p["id"] for p in client.get("/api/projects", headers=employee.headers).json()] == [project["id"]]

    r = client.patch(f"/api/projects/{project['id']}", json={"status": "on_hold"}, headers=manager.headers)
    assert r.status_code == 200
    assert r.json()["status"] == "on_hold"

    r = client.patch(f"/api/projects/{project['id']}", json={"end_date": "2026-10-01"}, headers=manager.headers)
    assert r.status_code == 400


def test_project_with_reversed_dates_is_400(admin):
    r = client.post(
        "/api/projects",
        json={"name": "Backwards", "start_date": "2026-05-01", "end_date": "2026-04-01"},
        headers=admin.headers,
    )
    assert r.status_code == 400


def test_report_summary(admin, account_factory, task_factory):
    worker = account_factory("employee", first_name="Anna")
    pick = task_factory(name="Pick")
    pack = task_factory(name="Pack")
    start = datetime(2026, 3, 2, 8, 0)

    for task, hours, status in ((pick, 3, "completed"), (pack, 2, "completed"), (pick, 4, "in_progress")):
        client.post(
            "/api/work-hours",
            json={
                "task_id": task.id,
                "start_time": start.isoformat(),
                "end_time": (start + timedelta(hours=hours)).isoformat(),
                "status": status,
            },
            headers=worker.headers,
        )

    assert client.get("/api/reports/summary", headers=worker.headers).status_code == 403

    r = client.get(
        "/api/reports/summary",
        params={"date_from": "2026-03-01", "date_to": "2026-03-31"},
        headers=admin.headers,
    )
    assert r.status_code == 200, r.text
    report = r.json()
    assert report["total_hours"] == 5.0
    assert report["total_tasks"] == 2
    assert report["total_employees"] == 2
    assert [t["task_name"] for t in report["by_task"]] == ["Pick", "Pack"]
    assert report["by_employee"][0]["name"] == "Anna User"
    assert report["by_day"] == [{"date": "2026-03-02", "hours": 5.0}]

    empty = client.get(
        "/api/reports/summary",
        params={"date_from": "2026-04-01", "date_to": "2026-04-30"},
        headers=admin.headers,
    ).json()
    assert empty["total_hours"] == 0
