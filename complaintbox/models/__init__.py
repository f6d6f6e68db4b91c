from complaintbox.models.employee import Employee, EmployeeRole, ApprovalStatus
from complaintbox.models.complaint import (
    Complaint,
    ComplaintPriority,
    ComplaintStatus,
    COMPLAINT_CATEGORIES,
)

__all__ = [
    "Employee",
    "EmployeeRole",
    "ApprovalStatus",
    "Complaint",
    "ComplaintPriority",
    "ComplaintStatus",
    "COMPLAINT_CATEGORIES",
]
