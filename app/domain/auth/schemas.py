"""Auth domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_password, validate_phone


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str
    phone: Optional[str] = None
    # Checked in the service so an unknown role is a 400, not a 422
    role: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("password")
    @classmethod
    def validate_password_field(cls, v: str) -> str:
        return validate_password(v)

    @field_validator("phone")
    @classmethod
    def validate_phone_field(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone(v)


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    profileImage: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone_field(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone(v)


class ChangePasswordRequest(BaseModel):
    currentPassword: str
    newPassword: str

    @field_validator("newPassword")
    @classmethod
    def validate_password_field(cls, v: str) -> str:
        return validate_password(v)


class ForgotPasswordRequest(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class ResetPasswordRequest(BaseModel):
    token: str
    password: str

    @field_validator("password")
    @classmethod
    def validate_password_field(cls, v: str) -> str:
        return validate_password(v)


class VerifyEmailRequest(BaseModel):
    token: str


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    profileImage: Optional[str] = None
    weddingDate: Optional[datetime] = None
    weddingLocation: Optional[str] = None
    guestCount: Optional[int] = None
    budget: Optional[float] = None
    weddingStyle: Optional[str] = None
    isActive: bool
    isEmailVerified: bool
    lastLoginAt: Optional[datetime] = None
    createdAt: Optional[datetime] = None


class AuthResponse(BaseModel):
    user: UserResponse
    token: str


class SuperAdminLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class SuperAdminPermissions(BaseModel):
    canManageUsers: bool
    canManageVendors: bool
    canManageContent: bool
    canViewAnalytics: bool


class SuperAdminResponse(BaseModel):
    id: int
    email: str
    firstName: str
    lastName: str
    phone: Optional[str] = None
    isActive: bool
    lastLoginAt: Optional[datetime] = None
    permissions: SuperAdminPermissions


class SuperAdminAuthResponse(BaseModel):
    superAdmin: SuperAdminResponse
    token: str


PROFILE_FIELD_MAP = {
    "name": "name",
    "phone": "phone",
    "address": "address",
    "city": "city",
    "profileImage": "profile_image",
}


def user_response(u) -> UserResponse:
    return UserResponse(
        id=u.id,
        email=u.email,
        name=u.name,
        role=u.role,
        phone=u.phone,
        address=u.address,
        city=u.city,
        profileImage=u.profile_image,
        weddingDate=u.wedding_date,
        weddingLocation=u.wedding_location,
        guestCount=u.guest_count,
        budget=u.budget,
        weddingStyle=u.wedding_style,
        isActive=u.is_active,
        isEmailVerified=u.is_email_verified,
        lastLoginAt=u.last_login_at,
        createdAt=u.created_at,
    )


def super_admin_response(a) -> SuperAdminResponse:
    return SuperAdminResponse(
        id=a.id,
        email=a.email,
        firstName=a.first_name,
        lastName=a.last_name,
        phone=a.phone,
        isActive=a.is_active,
        lastLoginAt=a.last_login_at,
        permissions=SuperAdminPermissions(
            canManageUsers=a.can_manage_users,
            canManageVendors=a.can_manage_vendors,
            canManageContent=a.can_manage_content,
            canViewAnalytics=a.can_view_analytics,
        ),
    )
