"""
Admin complaint management endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from complaintbox.core.database import get_db
from complaintbox.modules.auth.dependencies import AdminPrincipal, get_current_admin
from complaintbox.schemas.admin import MessageResponse
from complaintbox.schemas.complaint import (
    ComplaintStatusUpdate,
    ComplaintReplyUpdate,
    ComplaintResponse,
    ComplaintEnvelope,
    ComplaintListEnvelope,
)
from complaintbox.services.complaint_service import ComplaintService

router = APIRouter()


@router.get("", response_model=ComplaintListEnvelope)
async def list_complaints(
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    complaints = await ComplaintService(db).list_all()
    return ComplaintListEnvelope(complaints=[ComplaintResponse.model_validate(c) for c in complaints])


@router.patch("/{complaint_id}/status", response_model=ComplaintEnvelope)
async def update_status(
    complaint_id: str,
    update: ComplaintStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    """Set any of pending / received / resolved"""
    complaint = await ComplaintService(db).set_status(complaint_id, update.status)
    return ComplaintEnvelope(complaint=ComplaintResponse.model_validate(complaint))


@router.patch("/{complaint_id}/reply", response_model=ComplaintEnvelope)
async def update_reply(
    complaint_id: str,
    update: ComplaintReplyUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    complaint = await ComplaintService(db).set_reply(complaint_id, update.admin_reply)
    return ComplaintEnvelope(complaint=ComplaintResponse.model_validate(complaint))


@router.delete("/{complaint_id}", response_model=MessageResponse)
async def delete_complaint(
    complaint_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminPrincipal = Depends(get_current_admin)
):
    await ComplaintService(db).delete(complaint_id)
    return MessageResponse(message="Complaint deleted successfully")
