from dataclasses import dataclass
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Optional

from complaintbox.core.database import get_db
from complaintbox.core.exceptions import ForbiddenError, UnapprovedError, UnauthenticatedError
from complaintbox.core.logging_config import logger, set_user_id
from complaintbox.core.security import decode_token, ADMIN_SUBJECT, ROLE_ADMIN
from complaintbox.models.employee import Employee
from complaintbox.services.employee_store import EmployeeStore

# auto_error=False: a missing header must be a 401 in our envelope, not FastAPI's 403
security = HTTPBearer(auto_error=False)


@dataclass
class AdminPrincipal:
    """The configured admin identity, rebuilt from verified token claims"""
    subject: str
    email: str
    role: str
    claims: Dict[str, Any]


def _bearer_claims(credentials: Optional[HTTPAuthorizationCredentials]) -> Dict[str, Any]:
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    return decode_token(credentials.credentials)


async def get_current_employee(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Employee:
    """
    Employee gate.

    The account is re-read on every request, so an approval change made by
    the admin applies to the next call even while the token is unexpired.
    """
    payload = _bearer_claims(credentials)

    employee_id = payload.get("sub")
    if payload.get("role") == ROLE_ADMIN or employee_id == ADMIN_SUBJECT:
        # Admin principal has no stored account
        raise UnauthenticatedError("User not found")

    employee = await EmployeeStore(db).get(employee_id)
    if not employee:
        raise UnauthenticatedError("User not found")

    if not employee.is_approved:
        logger.warning(
            f"[Auth] Rejected request from {employee.id}: account {employee.approval_status.value}"
        )
        raise UnapprovedError()

    set_user_id(employee.id)
    request.state.employee = employee
    return employee


async def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AdminPrincipal:
    """
    Admin gate. Trusts the signed role claim; nothing is looked up.
    """
    payload = _bearer_claims(credentials)

    if payload.get("role") != ROLE_ADMIN:
        raise ForbiddenError()

    admin = AdminPrincipal(
        subject=payload["sub"],
        email=payload.get("email", ""),
        role=ROLE_ADMIN,
        claims=payload,
    )
    set_user_id(f"admin:{admin.subject}")
    request.state.admin = admin
    return admin
