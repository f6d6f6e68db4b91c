from sqlalchemy import Column, String, DateTime, Enum as SQLEnum
from datetime import datetime
import enum

from complaintbox.core.database import Base, generate_uuid


class EmployeeRole(str, enum.Enum):
    """Roles an account can hold. Only employees are stored."""
    EMPLOYEE = "employee"
    ADMIN = "admin"


class ApprovalStatus(str, enum.Enum):
    """Login eligibility of an employee account"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Employee(Base):
    """Employee account"""
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    employee_number = Column(String(10), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    department = Column(String(100), nullable=False)
    work_location = Column(String(100), nullable=False)

    role = Column(SQLEnum(EmployeeRole), default=EmployeeRole.EMPLOYEE, nullable=False)
    approval_status = Column(SQLEnum(ApprovalStatus), default=ApprovalStatus.PENDING, nullable=False, index=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.APPROVED

    def __repr__(self):
        return f"<Employee {self.employee_number}>"
