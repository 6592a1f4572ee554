"""Shared validation utilities"""

import re
from typing import Optional


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate a phone number and normalize it to E.164.

    Local Sri Lankan numbers (0XXXXXXXXX) are rewritten with the +94 prefix;
    anything already carrying a country code is kept as-is.

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    has_plus = phone.strip().startswith("+")
    digits = re.sub(r"\D", "", phone)

    if not has_plus and digits.startswith("0") and len(digits) == 10:
        return f"+94{digits[1:]}"

    if len(digits) < 9 or len(digits) > 15:
        raise ValueError("Phone number must contain between 9 and 15 digits")

    return f"+{digits}"


def validate_password(password: str) -> str:
    """Minimum password policy for account passwords"""
    if not password or len(password) < 8:
        raise ValueError("Password must be at least 8 characters")
    if len(password) > 128:
        raise ValueError("Password must be at most 128 characters")
    return password


def validate_rating(value: Optional[int]) -> Optional[int]:
    """Star ratings are whole numbers from 1 to 5"""
    if value is None:
        return value
    if value < 1 or value > 5:
        raise ValueError("Rating must be between 1 and 5")
    return value
