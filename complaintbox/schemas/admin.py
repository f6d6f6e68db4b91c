from pydantic import BaseModel
from typing import List

from complaintbox.schemas.auth import EmployeeResponse


class ApprovalUpdate(BaseModel):
    approval_status: str


class EmployeeEnvelope(BaseModel):
    success: bool = True
    user: EmployeeResponse


class EmployeeListEnvelope(BaseModel):
    success: bool = True
    users: List[EmployeeResponse]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
