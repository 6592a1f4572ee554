import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .database import get_db
from .models import SuperAdmin, User
from .security_utils import TOKEN_TYPE_SUPER_ADMIN, TOKEN_TYPE_USER, verify_jwt_token

logger = logging.getLogger(__name__)

security = HTTPBearer()


def _decode_bearer(credentials: Optional[HTTPAuthorizationCredentials], expected_type: str) -> dict:
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
        )

    token = credentials.credentials
    if len(token.split(".")) != 3:
        logger.warning(f"⚠️ Malformed token received, length: {len(token)}")
        raise HTTPException(status_code=401, detail="Invalid token format. Expected a valid JWT token.")

    payload = verify_jwt_token(token)
    if not payload or not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if payload.get("typ", TOKEN_TYPE_USER) != expected_type:
        logger.warning(f"⚠️ Token of type {payload.get('typ')} used where {expected_type} was required")
        raise HTTPException(status_code=401, detail="Invalid token for this resource")

    return payload


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the marketplace user from the bearer token"""
    payload = _decode_bearer(credentials, TOKEN_TYPE_USER)

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=401, detail="Invalid token claims") from e

    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        logger.warning(f"⚠️ Token for missing or inactive user {user_id}")
        raise HTTPException(status_code=401, detail="User not found or inactive")

    logger.debug(f"✅ User authenticated: {user.email}")
    return user


def require_roles(*roles: str):
    """
    Dependency factory restricting an endpoint to the given user roles.

    Example:
        @router.post("")
        async def create(user: User = Depends(require_roles("vendor"))):
            ...
    """

    async def role_checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            logger.warning(f"⚠️ User {user.id} with role {user.role} denied; requires {roles}")
            raise HTTPException(
                status_code=403,
                detail=f"This action requires one of the roles: {', '.join(roles)}",
            )
        return user

    return role_checker


async def get_current_super_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> SuperAdmin:
    payload = _decode_bearer(credentials, TOKEN_TYPE_SUPER_ADMIN)

    try:
        admin_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=401, detail="Invalid token claims") from e

    admin = db.query(SuperAdmin).filter(SuperAdmin.id == admin_id).first()
    if not admin or not admin.is_active:
        raise HTTPException(status_code=401, detail="Super admin not found or inactive")
    return admin
