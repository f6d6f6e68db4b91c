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
from complaintbox.schemas.complaint import (
    ComplaintCreate,
    ComplaintStatusUpdate,
    ComplaintReplyUpdate,
    ComplaintResponse,
    ComplaintEnvelope,
    ComplaintListEnvelope,
    CategoryListEnvelope,
)
from complaintbox.schemas.admin import (
    ApprovalUpdate,
    EmployeeEnvelope,
    EmployeeListEnvelope,
    MessageResponse,
)
