from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from complaintbox.models.employee import ApprovalStatus, EmployeeRole


class EmployeeRegister(BaseModel):
    """Self-registration. role and approval_status are never accepted from the client."""
    name: str = Field(..., min_length=1)
    employee_number: str = Field(..., description="10-digit phone number, used as login identifier")
    password: str
    department: str = Field(..., min_length=1)
    work_location: str = Field(..., min_length=1)
    email: Optional[EmailStr] = None

    @field_validator('employee_number')
    @classmethod
    def validate_employee_number(cls, v: str) -> str:
        v = v.strip()
        if len(v) != 10 or not v.isdigit():
            raise ValueError("Phone number must be exactly 10 digits")
        return v

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @field_validator('name', 'department', 'work_location')
    @classmethod
    def strip_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("All fields are required")
        return v.strip()


class EmployeeLogin(BaseModel):
    employee_number: str
    password: str


class AdminLogin(BaseModel):
    username: str
    password: str


class EmployeeResponse(BaseModel):
    """Public projection of an account - never includes the password hash"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_number: str
    name: str
    email: str
    department: str
    work_location: str
    role: EmployeeRole
    approval_status: ApprovalStatus
    created_at: datetime
    updated_at: Optional[datetime] = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful! Wait for admin approval."
    user: EmployeeResponse


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: EmployeeResponse


class AdminProfile(BaseModel):
    username: str
    role: str = "admin"


class AdminLoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: AdminProfile
