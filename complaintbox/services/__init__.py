from complaintbox.services.employee_store import EmployeeStore
from complaintbox.services.complaint_service import ComplaintService
from complaintbox.services.auth_service import AuthService, EmployeeSession, admin_login

__all__ = [
    "EmployeeStore",
    "ComplaintService",
    "AuthService",
    "EmployeeSession",
    "admin_login",
]
