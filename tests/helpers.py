from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.archived_employee import ArchivedEmployee
from app.models.contact import ContactRecord
from app.models.department import Department
from app.models.employee import Employee
from app.models.salary import SalaryRecord

DEPARTMENTS = {
    1: "Executive",
    2: "Engineering",
    3: "Finance",
    4: "Marketing",
    5: "Human Resources",
}

# id: (first, last, title, department, manager, salary)
EMPLOYEES = {
    1: ("Thabo", "Mokoena", "Chief Executive Officer", 1, None, "250000"),
    2: ("Lerato", "Dlamini", "Chief Technology Officer", 2, 1, "180000"),
    3: ("Sipho", "Nkosi", "Chief Financial Officer", 3, 1, "175000"),
    4: ("Naledi", "Khumalo", "Chief Marketing Officer", 4, 1, "160000"),
    5: ("Ayanda", "Mthembu", "HR Director", 5, 1, "140000"),
    6: ("Kagiso", "Molefe", "Senior Engineer", 2, 2, "120000"),
    7: ("Zanele", "Ndlovu", "Software Engineer", 2, 6, "95000"),
    8: ("Bongani", "Zulu", "Software Engineer", 2, 6, "95000"),
    9: ("Palesa", "Sithole", "Accountant", 3, 3, "85000"),
    10: ("Mandla", "Shabalala", "Financial Analyst", 3, 3, "80000"),
    11: ("Nomvula", "Mahlangu", "Marketing Specialist", 4, 4, "70000"),
    12: ("Tshepo", "Mabena", "Content Writer", 4, 11, "55000"),
    13: ("Refilwe", "Ntuli", "HR Officer", 5, 5, "65000"),
    14: ("Sibusiso", "Cele", "Recruiter", 5, 13, "60000"),
    15: ("Thandiwe", "Gumede", "Junior Engineer", 2, 7, "70000"),
}


def create_department(db: Session, department_id: int, name: str) -> Department:
    d = Department(id=department_id, name=name)
    db.add(d)
    db.commit()
    return d


def create_employee(
    db: Session,
    employee_id: int,
    first: str,
    last: str,
    title: str = "Engineer",
    department_id: int = 1,
    manager_id: int | None = None,
    salary: str | None = "50000",
    phone: str = "555-000-0000",
) -> Employee:
    e = Employee(
        id=employee_id,
        first_name=first,
        last_name=last,
        job_title=title,
        department_id=department_id,
        manager_id=manager_id,
    )
    db.add(e)
    db.flush()
    db.add(ContactRecord(employee_id=employee_id, phone=phone, email=f"{first}.{last}@company.com"))
    if salary is not None:
        db.add(SalaryRecord(employee_id=employee_id, amount=Decimal(salary)))
    db.commit()
    return e


def seed_directory(db: Session) -> None:
    for department_id, name in DEPARTMENTS.items():
        db.add(Department(id=department_id, name=name))
    db.commit()
    for employee_id, (first, last, title, dept, manager, salary) in EMPLOYEES.items():
        create_employee(
            db,
            employee_id,
            first,
            last,
            title=title,
            department_id=dept,
            manager_id=manager,
            salary=salary,
            phone=f"555-100-{employee_id:04d}",
        )


def count(db: Session, model, **filters) -> int:
    stmt = select(func.count()).select_from(model)
    for name, value in filters.items():
        stmt = stmt.where(getattr(model, name) == value)
    return db.execute(stmt).scalar_one()


def records_for(db: Session, employee_id: int) -> dict[str, int]:
    return {
        "employee": count(db, Employee, id=employee_id),
        "contact": count(db, ContactRecord, employee_id=employee_id),
        "salary": count(db, SalaryRecord, employee_id=employee_id),
        "archive": count(db, ArchivedEmployee, employee_id=employee_id),
    }


NEW_EMPLOYEE = {
    "first_name": "Sanele",
    "last_name": "Zondo",
    "phone": "555-567-8901",
    "job_title": "Intern",
    "department_id": 3,
    "manager_id": 2,
    "salary": 35000,
}
