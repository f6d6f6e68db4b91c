from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from complaintbox.core.config import settings
from complaintbox.core.database import get_db
from complaintbox.models.employee import Employee
from complaintbox.modules.auth.dependencies import get_current_employee
from complaintbox.schemas.auth import (
    EmployeeRegister,
    EmployeeLogin,
    AdminLogin,
    EmployeeResponse,
    RegisterResponse,
    LoginResponse,
    AdminProfile,
    AdminLoginResponse,
)
from complaintbox.schemas.admin import EmployeeEnvelope
from complaintbox.services.auth_service import AuthService, admin_login

router = APIRouter()


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: Request,
    user_data: EmployeeRegister,
    db: AsyncSession = Depends(get_db)
):
    """Register a new employee. The account starts pending admin approval."""
    employee = await AuthService(db).register(user_data, client_ip=_client_ip(request))
    return RegisterResponse(user=EmployeeResponse.model_validate(employee))


@router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    credentials: EmployeeLogin,
    db: AsyncSession = Depends(get_db)
):
    """Employee login by phone number. Only approved accounts get a token."""
    session = await AuthService(db).login(
        credentials.employee_number,
        credentials.password,
        client_ip=_client_ip(request),
    )
    return LoginResponse(token=session.token, user=EmployeeResponse.model_validate(session.employee))


@router.post("/admin/login", response_model=AdminLoginResponse)
async def login_admin(request: Request, credentials: AdminLogin):
    """Admin login against the configured credential pair"""
    token = admin_login(credentials.username, credentials.password, client_ip=_client_ip(request))
    return AdminLoginResponse(token=token, user=AdminProfile(username=settings.ADMIN_USERNAME))


@router.get("/me", response_model=EmployeeEnvelope)
async def get_me(current_employee: Employee = Depends(get_current_employee)):
    """Profile of the calling employee"""
    return EmployeeEnvelope(user=EmployeeResponse.model_validate(current_employee))
