"""
Admin account management endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from complaintbox.core.database import get_db
from complaintbox.models.employee import ApprovalStatus
from complaintbox.modules.auth.dependencies import AdminPrincipal, get_current_admin
from complaintbox.schemas.auth import EmployeeResponse
from complaintbox.schemas.admin import (
    ApprovalUpdate,
    EmployeeEnvelope,
    EmployeeListEnvelope,
    MessageResponse,
)
from complaintbox.services.complaint_service import ComplaintService
from complaintbox.services.employee_store import EmployeeStore

router = APIRouter()


@router.get("", response_model=EmployeeListEnvelope)
async def list_users(
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    """All employee accounts, newest first"""
    employees = await EmployeeStore(db).list_all()
    return EmployeeListEnvelope(users=[EmployeeResponse.model_validate(e) for e in employees])


@router.get("/pending", response_model=EmployeeListEnvelope)
async def list_pending_users(
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    """Accounts waiting for approval"""
    employees = await EmployeeStore(db).list_by_status(ApprovalStatus.PENDING)
    return EmployeeListEnvelope(users=[EmployeeResponse.model_validate(e) for e in employees])


@router.patch("/{user_id}/approval", response_model=EmployeeEnvelope)
async def update_approval(
    user_id: str,
    update: ApprovalUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    """Approve, reject, or return an account to pending"""
    employee = await EmployeeStore(db).set_approval_status(user_id, update.approval_status)
    return EmployeeEnvelope(user=EmployeeResponse.model_validate(employee))


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    """Delete an account together with its complaints"""
    await ComplaintService(db).delete_cascade(user_id)
    return MessageResponse(message="User and associated complaints deleted successfully")
