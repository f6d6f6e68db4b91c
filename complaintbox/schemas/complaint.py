from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

from complaintbox.models.complaint import ComplaintPriority, ComplaintStatus


class ComplaintCreate(BaseModel):
    # Presence of category/message is checked by ComplaintService so that
    # the same rule applies outside the HTTP layer.
    category: Optional[str] = None
    priority: Optional[ComplaintPriority] = None
    message: Optional[str] = None


class ComplaintStatusUpdate(BaseModel):
    status: str


class ComplaintReplyUpdate(BaseModel):
    admin_reply: str


class ComplaintResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    employee_name: str
    employee_email: str
    employee_number: Optional[str] = None
    department: str
    category: str
    priority: ComplaintPriority
    message: str
    status: ComplaintStatus
    admin_reply: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None


class ComplaintEnvelope(BaseModel):
    success: bool = True
    complaint: ComplaintResponse


class ComplaintListEnvelope(BaseModel):
    success: bool = True
    complaints: List[ComplaintResponse]


class CategoryListEnvelope(BaseModel):
    success: bool = True
    categories: List[str]
