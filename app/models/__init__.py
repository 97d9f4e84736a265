from app.models.archived_employee import ArchivedEmployee
from app.models.audit_event import AuditEvent
from app.models.contact import ContactRecord
from app.models.department import Department
from app.models.employee import Employee
from app.models.id_counter import IdCounter
from app.models.salary import SalaryRecord

__all__ = [ "ArchivedEmployee", "AuditEvent", "ContactRecord",
           "Department", "Employee", "IdCounter", "SalaryRecord" ]
