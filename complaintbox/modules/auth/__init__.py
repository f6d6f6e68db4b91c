# Authentication module

from complaintbox.modules.auth.dependencies import (
    AdminPrincipal,
    get_current_employee,
    get_current_admin,
)

__all__ = [
    "AdminPrincipal",
    "get_current_employee",
    "get_current_admin",
]
