"""
Tests for the audit trail of directory mutations.
"""

from fastapi.testclient import TestClient
from app.main import app

from tests.helpers import NEW_EMPLOYEE


def test_list_audit_events_empty(directory):
    client = TestClient(app)
    response = client.get("/audit")
    assert response.status_code == 200
    assert response.json() == []


def test_insert_and_delete_are_audited(directory):
    client = TestClient(app)
    headers = {"X-User-Email": "hr.admin@company.com"}
    assert client.post("/employees", json=NEW_EMPLOYEE, headers=headers).status_code == 201
    assert client.delete("/employees/16", headers=headers).status_code == 200

    response = client.get("/audit", params={"entity_type": "employee", "entity_id": 16})
    assert response.status_code == 200
    events = response.json()
    assert [e["action"] for e in events] == ["EMPLOYEE_DELETED", "EMPLOYEE_CREATED"]
    assert all(e["actor"] == "hr.admin@company.com" for e in events)


def test_rejected_insert_is_not_audited(directory):
    client = TestClient(app)
    r = client.post("/employees", json={**NEW_EMPLOYEE, "department_id": 9})
    assert r.status_code == 422

    assert client.get("/audit").json() == []
