"""
Security Utilities
Password hashing, access tokens and input sanitization
"""

import logging
import secrets
from datetime import timedelta
from typing import Any, Optional

# Input sanitization
import bleach

# Token generation and validation
from jose import JWTError
from jose import jwt as jose_jwt

# Password hashing
from passlib.context import CryptContext

from .config import JWT_ALGORITHM, JWT_EXPIRATION_HOURS, SECRET_KEY
from .shared.time import utcnow

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_TYPE_USER = "user"
TOKEN_TYPE_SUPER_ADMIN = "super_admin"


# ============================================================================
# PASSWORD SECURITY
# ============================================================================


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification error: {e}")
        return False


# ============================================================================
# TOKEN GENERATION & VALIDATION
# ============================================================================


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token"""
    return secrets.token_urlsafe(length)


def create_jwt_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT token

    Args:
        data: Claims to encode in the token
        expires_delta: Token lifetime (defaults to JWT_EXPIRATION_HOURS)
    """
    to_encode = data.copy()
    expire = utcnow() + (expires_delta or timedelta(hours=JWT_EXPIRATION_HOURS))
    to_encode.update({"exp": expire})
    return jose_jwt.encode(to_encode, SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_jwt_token(token: str) -> Optional[dict[str, Any]]:
    """
    Verify and decode a JWT token

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jose_jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT verification failed: {e}")
        return None


def create_user_token(user) -> str:
    """Access token for a marketplace user (customer, vendor or admin)"""
    return create_jwt_token(
        {"sub": str(user.id), "email": user.email, "role": user.role, "typ": TOKEN_TYPE_USER}
    )


def create_super_admin_token(admin) -> str:
    return create_jwt_token(
        {
            "sub": str(admin.id),
            "email": admin.email,
            "role": TOKEN_TYPE_SUPER_ADMIN,
            "typ": TOKEN_TYPE_SUPER_ADMIN,
        }
    )


# ============================================================================
# INPUT SANITIZATION
# ============================================================================

ALLOWED_CONTENT_TAGS = [
    "p",
    "br",
    "strong",
    "em",
    "u",
    "a",
    "ul",
    "ol",
    "li",
    "h2",
    "h3",
    "h4",
    "blockquote",
    "img",
]


def sanitize_html(html_content: Optional[str], allowed_tags: Optional[list] = None) -> Optional[str]:
    """
    Sanitize rich text (idea articles) to prevent XSS attacks

    Args:
        html_content: Raw HTML content
        allowed_tags: List of allowed HTML tags (default: article subset)
    """
    if html_content is None:
        return None

    allowed_attributes = {"a": ["href", "title", "target"], "img": ["src", "alt"], "*": ["class"]}

    return bleach.clean(
        html_content,
        tags=allowed_tags or ALLOWED_CONTENT_TAGS,
        attributes=allowed_attributes,
        strip=True,
    )


def strip_tags(text: Optional[str]) -> Optional[str]:
    """Plain-text fields (reviews, messages) keep no markup at all"""
    if text is None:
        return None
    return bleach.clean(text, tags=[], strip=True)
