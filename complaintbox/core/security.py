from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, ExpiredSignatureError, jwt
import bcrypt
import hmac

from complaintbox.core.config import settings
from complaintbox.core.exceptions import InternalError, TokenInvalidError
from complaintbox.core.logging_config import logger

ADMIN_SUBJECT = "admin"
ROLE_ADMIN = "admin"
ROLE_EMPLOYEE = "employee"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against a bcrypt digest (constant-time inside bcrypt)"""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except ValueError:
        # Malformed stored digest
        return False


def get_password_hash(password: str) -> str:
    """Hash password with configurable rounds (BCRYPT_ROUNDS in .env)"""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = password.encode('utf-8')[:72]
    try:
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS))
    except ValueError as e:
        logger.error(f"Password hashing failed: {e}")
        raise InternalError()
    return hashed.decode('utf-8')


def verify_admin_credentials(username: str, password: str) -> bool:
    """Compare against the static admin pair from configuration"""
    username_ok = hmac.compare_digest(username.encode('utf-8'), settings.ADMIN_USERNAME.encode('utf-8'))
    password_ok = hmac.compare_digest(password.encode('utf-8'), settings.ADMIN_PASSWORD.encode('utf-8'))
    return username_ok and password_ok


def create_access_token(
    data: Dict[str, Any],
    expires_delta: timedelta,
    now: Optional[datetime] = None
) -> str:
    """Create a signed JWT access token expiring expires_delta after now"""
    issued_at = now or datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({
        "iat": issued_at,
        "exp": issued_at + expires_delta,
        "type": "access",
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_employee_token(
    employee_id: str,
    email: str,
    role: str = ROLE_EMPLOYEE,
    now: Optional[datetime] = None
) -> str:
    """Employee session token, valid EMPLOYEE_TOKEN_EXPIRE_DAYS"""
    return create_access_token(
        {"sub": str(employee_id), "email": email, "role": role},
        timedelta(days=settings.EMPLOYEE_TOKEN_EXPIRE_DAYS),
        now=now,
    )


def create_admin_token(now: Optional[datetime] = None) -> str:
    """Admin session token, valid ADMIN_TOKEN_EXPIRE_HOURS"""
    return create_access_token(
        {"sub": ADMIN_SUBJECT, "email": settings.ADMIN_EMAIL, "role": ROLE_ADMIN},
        timedelta(hours=settings.ADMIN_TOKEN_EXPIRE_HOURS),
        now=now,
    )


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry, return the claims.

    Forged, malformed and expired tokens all raise TokenInvalidError;
    the reason is only logged.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        logger.debug("Token rejected: expired")
        raise TokenInvalidError()
    except JWTError as e:
        logger.debug(f"Token rejected: {type(e).__name__}")
        raise TokenInvalidError()

    if payload.get("type") != "access" or not payload.get("sub") or not payload.get("role"):
        logger.debug("Token rejected: missing claims")
        raise TokenInvalidError()

    return payload
