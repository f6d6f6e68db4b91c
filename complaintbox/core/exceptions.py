"""
Custom Exceptions for ComplaintBox
==================================

Every error the service reports to a client is one of these. Each carries
the HTTP status it maps to, so the request boundary in ``complaintbox.main``
can turn any of them into the ``{success: false, message}`` envelope.

Usage:
    from complaintbox.core.exceptions import ComplaintNotFoundError

    if not complaint:
        raise ComplaintNotFoundError(complaint_id)
"""

from typing import Optional, Any, Dict


class ComplaintBoxError(Exception):
    """Base exception for all ComplaintBox errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class InternalError(ComplaintBoxError):
    """Persistence or hashing failure"""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(ComplaintBoxError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class InvalidStatusError(ValidationError):
    """Status value is not one of the allowed literals"""

    def __init__(self, value: Any, allowed: list):
        super().__init__(f"Invalid status '{value}'. Allowed: {', '.join(allowed)}", field="status")
        self.code = "INVALID_STATUS"
        self.details["allowed"] = allowed


class DuplicateIdentityError(ComplaintBoxError):
    """Phone number (or email) already belongs to an account"""

    status_code = 400

    def __init__(self, message: str = "Phone number already registered"):
        super().__init__(message, code="DUPLICATE_IDENTITY")


# ============================================
# Authentication & Authorization Errors
# ============================================

class InvalidCredentialsError(ComplaintBoxError):
    """Unknown account or wrong password - deliberately indistinguishable"""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class UnauthenticatedError(ComplaintBoxError):
    """Missing or unusable bearer token"""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="UNAUTHENTICATED")


class TokenInvalidError(UnauthenticatedError):
    """Token is forged, malformed or expired"""

    def __init__(self):
        super().__init__("Invalid or expired token")
        self.code = "TOKEN_INVALID"


class UnapprovedError(ComplaintBoxError):
    """Account exists but is pending or rejected"""

    status_code = 403

    def __init__(self, message: str = "Account not approved"):
        super().__init__(message, code="ACCOUNT_NOT_APPROVED")


class ForbiddenError(ComplaintBoxError):
    """Valid token without the required role"""

    status_code = 403

    def __init__(self, message: str = "Admin access required"):
        super().__init__(message, code="FORBIDDEN")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(ComplaintBoxError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class EmployeeNotFoundError(ResourceNotFoundError):
    """Employee account not found"""

    def __init__(self, employee_id: str):
        super().__init__("User", employee_id)


class ComplaintNotFoundError(ResourceNotFoundError):
    """Complaint not found"""

    def __init__(self, complaint_id: str):
        super().__init__("Complaint", complaint_id)


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: ComplaintBoxError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "message": error.message,
        "code": error.code
    }
