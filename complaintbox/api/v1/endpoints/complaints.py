from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from complaintbox.core.database import get_db
from complaintbox.models.complaint import COMPLAINT_CATEGORIES
from complaintbox.models.employee import Employee
from complaintbox.modules.auth.dependencies import get_current_employee
from complaintbox.schemas.complaint import (
    ComplaintCreate,
    ComplaintResponse,
    ComplaintEnvelope,
    ComplaintListEnvelope,
    CategoryListEnvelope,
)
from complaintbox.services.complaint_service import ComplaintService

router = APIRouter()


@router.get("", response_model=ComplaintListEnvelope)
async def list_complaints(
    current_employee: Employee = Depends(get_current_employee),
    db: AsyncSession = Depends(get_db)
):
    """All complaints, newest first. Clients filter by employee_id."""
    complaints = await ComplaintService(db).list_all()
    return ComplaintListEnvelope(complaints=[ComplaintResponse.model_validate(c) for c in complaints])


@router.get("/categories", response_model=CategoryListEnvelope)
async def list_categories(current_employee: Employee = Depends(get_current_employee)):
    """Suggested categories for the complaint form. Any non-blank category is accepted."""
    return CategoryListEnvelope(categories=COMPLAINT_CATEGORIES)


@router.get("/mine", response_model=ComplaintListEnvelope)
async def list_my_complaints(
    current_employee: Employee = Depends(get_current_employee),
    db: AsyncSession = Depends(get_db)
):
    """Complaints filed by the caller"""
    complaints = await ComplaintService(db).list_for_employee(current_employee.id)
    return ComplaintListEnvelope(complaints=[ComplaintResponse.model_validate(c) for c in complaints])


@router.post("", response_model=ComplaintEnvelope, status_code=status.HTTP_201_CREATED)
async def create_complaint(
    complaint_data: ComplaintCreate,
    current_employee: Employee = Depends(get_current_employee),
    db: AsyncSession = Depends(get_db)
):
    """File a complaint. Ownership and employee details come from the token, not the body."""
    complaint = await ComplaintService(db).create(
        current_employee,
        category=complaint_data.category,
        priority=complaint_data.priority,
        message=complaint_data.message,
    )
    return ComplaintEnvelope(complaint=ComplaintResponse.model_validate(complaint))


@router.get("/{complaint_id}", response_model=ComplaintEnvelope)
async def get_complaint(
    complaint_id: str,
    current_employee: Employee = Depends(get_current_employee),
    db: AsyncSession = Depends(get_db)
):
    complaint = await ComplaintService(db).get_or_404(complaint_id)
    return ComplaintEnvelope(complaint=ComplaintResponse.model_validate(complaint))
