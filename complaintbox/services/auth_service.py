"""
Authentication flows: employee registration, employee login, admin login.
"""

from dataclasses import dataclass
from functools import lru_cache
import secrets
from sqlalchemy.ext.asyncio import AsyncSession

from complaintbox.core.config import settings
from complaintbox.core.exceptions import ComplaintBoxError, InvalidCredentialsError, UnapprovedError
from complaintbox.core.logging_config import logger
from complaintbox.core.security import (
    verify_password,
    get_password_hash,
    verify_admin_credentials,
    create_employee_token,
    create_admin_token,
)
from complaintbox.models.employee import Employee, ApprovalStatus
from complaintbox.schemas.auth import EmployeeRegister
from complaintbox.services.employee_store import EmployeeStore


# Checked against when the account does not exist so that both failure
# paths spend a bcrypt comparison.
@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash(secrets.token_urlsafe(16))


UNAPPROVED_MESSAGES = {
    ApprovalStatus.PENDING: "Account pending approval",
    ApprovalStatus.REJECTED: "Account rejected. Contact HR.",
}


@dataclass
class EmployeeSession:
    token: str
    employee: Employee


class AuthService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = EmployeeStore(db)

    async def register(self, data: EmployeeRegister, client_ip: str = "unknown") -> Employee:
        try:
            employee = await self.store.create(
                name=data.name,
                employee_number=data.employee_number,
                password=data.password,
                department=data.department,
                work_location=data.work_location,
                email=data.email,
            )
        except ComplaintBoxError as e:
            logger.log_auth_event(
                event="register",
                success=False,
                subject=data.employee_number,
                reason=e.message,
                client_ip=client_ip,
            )
            raise

        logger.log_auth_event(event="register", success=True, subject=employee.id, client_ip=client_ip)
        return employee

    async def login(self, employee_number: str, password: str, client_ip: str = "unknown") -> EmployeeSession:
        """
        Unknown number and wrong password raise the same InvalidCredentialsError.
        Approval is only checked once the password matched.
        """
        employee = await self.store.get_by_employee_number(employee_number.strip())

        password_ok = verify_password(password, employee.hashed_password if employee else _dummy_hash())
        if not employee or not password_ok:
            logger.log_auth_event(
                event="login",
                success=False,
                subject=employee_number,
                reason="invalid credentials",
                client_ip=client_ip,
            )
            raise InvalidCredentialsError()

        if employee.approval_status != ApprovalStatus.APPROVED:
            logger.log_auth_event(
                event="login",
                success=False,
                subject=employee.id,
                reason=f"account {employee.approval_status.value}",
                client_ip=client_ip,
            )
            raise UnapprovedError(UNAPPROVED_MESSAGES.get(employee.approval_status, "Account not approved"))

        token = create_employee_token(employee.id, employee.email, employee.role.value)
        logger.log_auth_event(event="login", success=True, subject=employee.id, client_ip=client_ip)
        return EmployeeSession(token=token, employee=employee)


def admin_login(username: str, password: str, client_ip: str = "unknown") -> str:
    """Check the static admin pair and issue an admin token"""
    if not verify_admin_credentials(username, password):
        logger.log_auth_event(
            event="admin_login",
            success=False,
            reason="invalid credentials",
            client_ip=client_ip,
        )
        raise InvalidCredentialsError("Invalid admin credentials")

    logger.log_auth_event(event="admin_login", success=True, subject=settings.ADMIN_USERNAME, client_ip=client_ip)
    return create_admin_token()
