from decimal import Decimal

from fastapi.testclient import TestClient

from app.main import app
from tests.helpers import NEW_EMPLOYEE, records_for


def test_create_employee(directory):
    """Test admitting an employee into a directory whose highest id is 15"""
    client = TestClient(app)
    r = client.post("/employees", json=NEW_EMPLOYEE)
    assert r.status_code == 201
    employee = r.json()
    assert employee["id"] == 16
    assert employee["email"] == "Sanele.Zondo@company.com"
    assert employee["phone"] == "555-567-8901"
    assert employee["department_id"] == 3
    assert employee["manager_id"] == 2
    assert Decimal(employee["salary"]) == Decimal("35000")
    assert records_for(directory, 16) == {"employee": 1, "contact": 1, "salary": 1, "archive": 0}


def test_create_employee_duplicate_name(directory):
    """Test that a duplicate first + last name is rejected"""
    client = TestClient(app)
    r = client.post("/employees", json={**NEW_EMPLOYEE, "first_name": "Thabo", "last_name": "Mokoena"})
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["code"] == "VALIDATION_ERROR"
    assert detail["field"] == "name"


def test_create_employee_unknown_department(directory):
    """Test that a department beyond the highest existing id is rejected"""
    client = TestClient(app)
    r = client.post("/employees", json={**NEW_EMPLOYEE, "department_id": 6})
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "department_id"
    assert records_for(directory, 16)["employee"] == 0


def test_create_employee_future_manager(directory):
    """Test that a manager id beyond the new employee's id is rejected"""
    client = TestClient(app)
    r = client.post("/employees", json={**NEW_EMPLOYEE, "manager_id": 40})
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "manager_id"


def test_create_employee_negative_salary(directory):
    """Test request validation of the salary"""
    client = TestClient(app)
    r = client.post("/employees", json={**NEW_EMPLOYEE, "salary": -5})
    assert r.status_code == 422


def test_get_employee_by_id(directory):
    """Test getting a single employee with contact and salary"""
    client = TestClient(app)
    r = client.get("/employees/7")
    assert r.status_code == 200
    employee = r.json()
    assert employee["first_name"] == "Zanele"
    assert employee["email"] == "Zanele.Ndlovu@company.com"
    assert Decimal(employee["salary"]) == Decimal("95000")


def test_get_employee_by_id_not_found(directory):
    """Test getting non-existent employee returns 404"""
    client = TestClient(app)
    r = client.get("/employees/999")
    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "EMPLOYEE_NOT_FOUND"


def test_delete_employee_archives_snapshot(directory):
    """Test deleting the employee admitted above"""
    client = TestClient(app)
    assert client.post("/employees", json=NEW_EMPLOYEE).status_code == 201

    r = client.delete("/employees/16")
    assert r.status_code == 200
    archived = r.json()
    assert archived["employee_id"] == 16
    assert archived["first_name"] == "Sanele"
    assert archived["job_title"] == "Intern"
    assert archived["department_id"] == 3
    assert archived["manager_id"] == 2

    assert records_for(directory, 16) == {"employee": 0, "contact": 0, "salary": 0, "archive": 1}
    assert client.get("/employees/16").status_code == 404

    r = client.get("/archive")
    assert [a["employee_id"] for a in r.json()] == [16]


def test_delete_employee_twice(directory):
    """Test that a second deletion of the same id is a 404"""
    client = TestClient(app)
    assert client.delete("/employees/15").status_code == 200
    assert client.delete("/employees/15").status_code == 404


def test_delete_manager_with_reports(directory):
    """Test that deleting a manager with direct reports is refused"""
    client = TestClient(app)
    r = client.delete("/employees/2")
    assert r.status_code == 409
    assert r.json()["detail"]["code"] == "INTEGRITY_FAILURE"
    assert records_for(directory, 2)["employee"] == 1


def test_employee_hierarchy(directory):
    """Test the chain of command from an employee up to the root"""
    client = TestClient(app)
    r = client.get("/employees/12/hierarchy")
    assert r.status_code == 200
    assert [(h["name"], h["level"]) for h in r.json()] == [
        ("Tshepo Mabena", 1),
        ("Nomvula Mahlangu", 2),
        ("Naledi Khumalo", 3),
        ("Thabo Mokoena", 4),
    ]


def test_employee_hierarchy_not_found(directory):
    client = TestClient(app)
    r = client.get("/employees/404/hierarchy")
    assert r.status_code == 404
