"""
Employee Store - persistence for employee accounts

Handles:
- Account creation with identity uniqueness checks
- Lookups by id and by phone number
- Admin listing and approval status changes
- Account deletion (complaint cleanup is ComplaintService.delete_cascade)

Password digests are set only through set_password/create and never leave
this layer except through the Employee model, whose API projection
(EmployeeResponse) omits them.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from typing import Optional, List, Union

from complaintbox.core.config import settings
from complaintbox.core.exceptions import (
    DuplicateIdentityError,
    EmployeeNotFoundError,
    InvalidStatusError,
)
from complaintbox.core.logging_config import logger
from complaintbox.core.security import get_password_hash
from complaintbox.models.employee import Employee, EmployeeRole, ApprovalStatus


def parse_approval_status(value: Union[str, ApprovalStatus]) -> ApprovalStatus:
    """Coerce to ApprovalStatus or raise InvalidStatusError"""
    try:
        return ApprovalStatus(value)
    except ValueError:
        raise InvalidStatusError(value, [s.value for s in ApprovalStatus])


class EmployeeStore:
    """Repository over the employees table"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        name: str,
        employee_number: str,
        password: str,
        department: str,
        work_location: str,
        email: Optional[str] = None,
    ) -> Employee:
        """Create a pending employee account"""
        email = (email or settings.placeholder_email(employee_number)).lower()

        result = await self.db.execute(
            select(Employee).where(
                or_(Employee.employee_number == employee_number, Employee.email == email)
            )
        )
        existing = result.scalars().first()
        if existing:
            if existing.employee_number == employee_number:
                raise DuplicateIdentityError("Phone number already registered")
            raise DuplicateIdentityError("Email already registered")

        employee = Employee(
            name=name,
            employee_number=employee_number,
            email=email,
            department=department,
            work_location=work_location,
            role=EmployeeRole.EMPLOYEE,
            approval_status=ApprovalStatus.PENDING,
        )
        self.set_password(employee, password)

        self.db.add(employee)
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent registration won the unique index after our check
            await self.db.rollback()
            raise DuplicateIdentityError()
        await self.db.refresh(employee)

        logger.info(f"[EmployeeStore] Created account {employee.id} ({employee.department})")
        return employee

    @staticmethod
    def set_password(employee: Employee, password: str) -> None:
        """Hash and assign a new secret. Caller commits."""
        employee.hashed_password = get_password_hash(password)

    async def get(self, employee_id: str) -> Optional[Employee]:
        result = await self.db.execute(select(Employee).where(Employee.id == str(employee_id)))
        return result.scalar_one_or_none()

    async def get_or_404(self, employee_id: str) -> Employee:
        employee = await self.get(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def get_by_employee_number(self, employee_number: str) -> Optional[Employee]:
        result = await self.db.execute(
            select(Employee).where(Employee.employee_number == employee_number)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Employee]:
        """All accounts, newest first"""
        result = await self.db.execute(select(Employee).order_by(Employee.created_at.desc()))
        return list(result.scalars().all())

    async def list_by_status(self, status: Union[str, ApprovalStatus]) -> List[Employee]:
        approval_status = parse_approval_status(status)
        result = await self.db.execute(
            select(Employee)
            .where(Employee.approval_status == approval_status)
            .order_by(Employee.created_at.desc())
        )
        return list(result.scalars().all())

    async def set_approval_status(
        self,
        employee_id: str,
        status: Union[str, ApprovalStatus]
    ) -> Employee:
        """Move an account to any of the three approval states"""
        approval_status = parse_approval_status(status)
        employee = await self.get_or_404(employee_id)

        previous = employee.approval_status
        employee.approval_status = approval_status
        await self.db.commit()
        await self.db.refresh(employee)

        logger.log_auth_event(
            event="approval_change",
            success=True,
            subject=employee.id,
            previous_status=previous.value if previous else None,
            new_status=approval_status.value,
        )
        return employee

    async def delete(self, employee_id: str) -> Employee:
        employee = await self.get_or_404(employee_id)
        await self.db.delete(employee)
        await self.db.commit()
        return employee
