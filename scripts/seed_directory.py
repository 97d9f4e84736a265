from decimal import Decimal

from app.core.validation import derive_email
from app.db.session import SessionLocal
from app.models.contact import ContactRecord
from app.models.department import Department
from app.models.employee import Employee
from app.models.salary import SalaryRecord

DEPARTMENTS = [
    (1, "Executive"),
    (2, "Engineering"),
    (3, "Finance"),
    (4, "Marketing"),
    (5, "Human Resources"),
]

# id, first, last, title, department, manager, phone, salary
EMPLOYEES = [
    (1, "Thabo", "Mokoena", "Chief Executive Officer", 1, None, "555-100-0001", "250000"),
    (2, "Lerato", "Dlamini", "Chief Technology Officer", 2, 1, "555-100-0002", "180000"),
    (3, "Sipho", "Nkosi", "Chief Financial Officer", 3, 1, "555-100-0003", "175000"),
    (4, "Naledi", "Khumalo", "Chief Marketing Officer", 4, 1, "555-100-0004", "160000"),
    (5, "Ayanda", "Mthembu", "HR Director", 5, 1, "555-100-0005", "140000"),
    (6, "Kagiso", "Molefe", "Senior Engineer", 2, 2, "555-100-0006", "120000"),
    (7, "Zanele", "Ndlovu", "Software Engineer", 2, 6, "555-100-0007", "95000"),
    (8, "Bongani", "Zulu", "Software Engineer", 2, 6, "555-100-0008", "95000"),
    (9, "Palesa", "Sithole", "Accountant", 3, 3, "555-100-0009", "85000"),
    (10, "Mandla", "Shabalala", "Financial Analyst", 3, 3, "555-100-0010", "80000"),
    (11, "Nomvula", "Mahlangu", "Marketing Specialist", 4, 4, "555-100-0011", "70000"),
    (12, "Tshepo", "Mabena", "Content Writer", 4, 11, "555-100-0012", "55000"),
    (13, "Refilwe", "Ntuli", "HR Officer", 5, 5, "555-100-0013", "65000"),
    (14, "Sibusiso", "Cele", "Recruiter", 5, 13, "555-100-0014", "60000"),
    (15, "Thandiwe", "Gumede", "Junior Engineer", 2, 7, "555-100-0015", "70000"),
]


def upsert_department(db, department_id: int, name: str) -> Department:
    dept = db.get(Department, department_id)
    if dept:
        return dept
    dept = Department(id=department_id, name=name)
    db.add(dept)
    db.flush()
    return dept


def upsert_employee(db, employee_id, first, last, title, department_id, manager_id, phone, salary):
    emp = db.get(Employee, employee_id)
    if emp:
        return emp

    emp = Employee(
        id=employee_id,
        first_name=first,
        last_name=last,
        job_title=title,
        department_id=department_id,
        manager_id=manager_id,
    )
    db.add(emp)
    db.flush()
    db.add(ContactRecord(employee_id=employee_id, phone=phone, email=derive_email(first, last)))
    db.add(SalaryRecord(employee_id=employee_id, amount=Decimal(salary)))
    db.flush()
    return emp

def main():
    db = SessionLocal()
    try:
        for department_id, name in DEPARTMENTS:
            upsert_department(db, department_id, name)
        employees = [upsert_employee(db, *row) for row in EMPLOYEES]
        db.commit()

        print("Seeded employees:")
        for e in employees:
            print(e.id, e.first_name, e.last_name, e.department_id, e.manager_id)
    finally:
        db.close()

if __name__ == "__main__":
    main()
