from sqlalchemy import Column, String, DateTime, Text, Enum as SQLEnum
from datetime import datetime
import enum

from complaintbox.core.database import Base, generate_uuid


class ComplaintPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ComplaintStatus(str, enum.Enum):
    """Complaint lifecycle. Any state may move to any other state."""
    PENDING = "pending"
    RECEIVED = "received"
    RESOLVED = "resolved"


# Options offered by the employee form; category itself is free text
COMPLAINT_CATEGORIES = [
    "Attendence",
    "Sallary Advance",
    "Pay Roll",
    "Full and Final Settlement",
    "ESI",
    "PF",
    "Payroll",
    "General",
]


class Complaint(Base):
    """Complaint filed by an employee"""
    __tablename__ = "complaints"

    id = Column(String(36), primary_key=True, default=generate_uuid)

    # Owner. No database-level FK: cascade delete is done by ComplaintService.
    employee_id = Column(String(36), index=True, nullable=False)

    # Copied from the account at creation time
    employee_name = Column(String(255), nullable=False)
    employee_email = Column(String(255), nullable=False)
    employee_number = Column(String(10), nullable=True)
    department = Column(String(100), nullable=False)

    category = Column(String(100), nullable=False)
    priority = Column(SQLEnum(ComplaintPriority), default=ComplaintPriority.MEDIUM, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(SQLEnum(ComplaintStatus), default=ComplaintStatus.PENDING, nullable=False)
    admin_reply = Column(Text, default="", nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Complaint {self.id} [{self.status}]>"
