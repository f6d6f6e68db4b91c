"""
Complaint Service - complaint lifecycle and ownership

Status graph has no terminal state: pending, received and resolved can each
move to either of the others (an admin may reopen a resolved complaint).
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Optional, List, Union

from complaintbox.core.exceptions import (
    ComplaintNotFoundError,
    InvalidStatusError,
    ValidationError,
)
from complaintbox.core.logging_config import logger
from complaintbox.models.complaint import Complaint, ComplaintPriority, ComplaintStatus
from complaintbox.models.employee import Employee
from complaintbox.services.employee_store import EmployeeStore


def parse_complaint_status(value: Union[str, ComplaintStatus]) -> ComplaintStatus:
    """Coerce to ComplaintStatus or raise InvalidStatusError"""
    try:
        return ComplaintStatus(value)
    except ValueError:
        raise InvalidStatusError(value, [s.value for s in ComplaintStatus])


class ComplaintService:
    """Complaint lifecycle manager"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        employee: Employee,
        category: Optional[str],
        priority: Optional[Union[str, ComplaintPriority]],
        message: Optional[str],
    ) -> Complaint:
        """File a complaint owned by employee, starting in pending"""
        if not category or not category.strip():
            raise ValidationError("Category is required", field="category")
        if not message or not message.strip():
            raise ValidationError("Message is required", field="message")

        try:
            complaint_priority = ComplaintPriority(priority) if priority else ComplaintPriority.MEDIUM
        except ValueError:
            raise ValidationError(
                f"Invalid priority '{priority}'. Allowed: {', '.join(p.value for p in ComplaintPriority)}",
                field="priority",
            )

        complaint = Complaint(
            employee_id=employee.id,
            employee_name=employee.name,
            employee_email=employee.email,
            employee_number=employee.employee_number,
            department=employee.department,
            category=category.strip(),
            priority=complaint_priority,
            message=message.strip(),
            status=ComplaintStatus.PENDING,
            admin_reply="",
        )
        self.db.add(complaint)
        await self.db.commit()
        await self.db.refresh(complaint)

        logger.info(
            f"[Complaints] {employee.id} filed {complaint.id} ({complaint.category}, {complaint_priority.value})"
        )
        return complaint

    async def get(self, complaint_id: str) -> Optional[Complaint]:
        result = await self.db.execute(select(Complaint).where(Complaint.id == str(complaint_id)))
        return result.scalar_one_or_none()

    async def get_or_404(self, complaint_id: str) -> Complaint:
        complaint = await self.get(complaint_id)
        if not complaint:
            raise ComplaintNotFoundError(complaint_id)
        return complaint

    async def list_all(self) -> List[Complaint]:
        """All complaints, newest first"""
        result = await self.db.execute(select(Complaint).order_by(Complaint.created_at.desc()))
        return list(result.scalars().all())

    async def list_for_employee(self, employee_id: str) -> List[Complaint]:
        result = await self.db.execute(
            select(Complaint)
            .where(Complaint.employee_id == str(employee_id))
            .order_by(Complaint.created_at.desc())
        )
        return list(result.scalars().all())

    async def set_status(self, complaint_id: str, new_status: Union[str, ComplaintStatus]) -> Complaint:
        """Move a complaint to any status; no ordering is enforced"""
        status = parse_complaint_status(new_status)
        complaint = await self.get_or_404(complaint_id)

        previous = complaint.status
        complaint.status = status
        await self.db.commit()
        await self.db.refresh(complaint)

        logger.info(f"[Complaints] {complaint.id}: {previous.value} -> {status.value}")
        return complaint

    async def set_reply(self, complaint_id: str, reply: str) -> Complaint:
        complaint = await self.get_or_404(complaint_id)
        complaint.admin_reply = reply.strip()
        await self.db.commit()
        await self.db.refresh(complaint)
        return complaint

    async def delete(self, complaint_id: str) -> None:
        complaint = await self.get_or_404(complaint_id)
        await self.db.delete(complaint)
        await self.db.commit()
        logger.info(f"[Complaints] Deleted {complaint_id}")

    async def delete_cascade(self, employee_id: str) -> int:
        """
        Delete an account and every complaint it owns.

        Two separately committed phases. A failure after phase 1 leaves
        orphaned complaints behind; readers may observe the account gone
        while its complaints still exist.

        Returns the number of complaints removed.
        """
        # Phase 1: the account
        await EmployeeStore(self.db).delete(employee_id)

        # Phase 2: its complaints
        result = await self.db.execute(
            delete(Complaint).where(Complaint.employee_id == str(employee_id))
        )
        await self.db.commit()

        removed = result.rowcount or 0
        logger.log_auth_event(
            event="account_delete",
            success=True,
            subject=str(employee_id),
            complaints_removed=removed,
        )
        return removed
