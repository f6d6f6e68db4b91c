"""
Admin API endpoints. Every route requires an admin token.
"""
from fastapi import APIRouter

from complaintbox.api.v1.endpoints.admin import users, complaints

admin_router = APIRouter(prefix="/admin")

admin_router.include_router(users.router, prefix="/users", tags=["Admin Users"])
admin_router.include_router(complaints.router, prefix="/complaints", tags=["Admin Complaints"])
