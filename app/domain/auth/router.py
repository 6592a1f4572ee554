"""Auth router - FastAPI endpoints for accounts and super admin sign-in"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_super_admin, get_current_user
from ...database import get_db
from ...models import SuperAdmin, User
from ...rate_limiter import login_rate_limit, password_reset_rate_limit, register_rate_limit
from .schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    ResetPasswordRequest,
    SuperAdminAuthResponse,
    SuperAdminLogin,
    SuperAdminResponse,
    UserResponse,
    VerifyEmailRequest,
    super_admin_response,
    user_response,
)
from ..users.router import get_user_service
from ..users.service import UserService
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])
super_admin_router = APIRouter(prefix="/super-admin/auth", tags=["Super Admin Authentication"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency injection for AuthService"""
    return AuthService(db)


# ============================================================================
# REGISTRATION AND LOGIN
# ============================================================================


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    data: RegisterRequest,
    background_tasks: BackgroundTasks,
    _: None = Depends(register_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    user, token = service.register(data, background_tasks)
    return AuthResponse(user=user_response(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    _: None = Depends(login_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    user, token = service.login(data)
    return AuthResponse(user=user_response(user), token=token)


# ============================================================================
# PROFILE
# ============================================================================


@router.get("/profile", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    return user_response(current_user)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return user_response(service.update_profile(current_user, data))


@router.put("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    return service.change_password(current_user, data)


# ============================================================================
# RECOVERY AND VERIFICATION
# ============================================================================


@router.post("/forgot-password")
async def forgot_password(
    data: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    _: None = Depends(password_reset_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    return service.forgot_password(data.email, background_tasks)


@router.post("/reset-password")
async def reset_password(
    data: ResetPasswordRequest,
    _: None = Depends(password_reset_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    return service.reset_password(data)


@router.post("/verify-email")
async def verify_email(data: VerifyEmailRequest, service: AuthService = Depends(get_auth_service)):
    return service.verify_email(data.token)


@router.post("/resend-verification")
async def resend_verification(
    data: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    _: None = Depends(password_reset_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    return service.resend_verification(data.email, background_tasks)


# ============================================================================
# SUPER ADMIN
# ============================================================================


@super_admin_router.post("/login", response_model=SuperAdminAuthResponse)
async def super_admin_login(
    data: SuperAdminLogin,
    _: None = Depends(login_rate_limit),
    service: AuthService = Depends(get_auth_service),
):
    admin, token = service.super_admin_login(data)
    return SuperAdminAuthResponse(superAdmin=super_admin_response(admin), token=token)


@super_admin_router.get("/profile", response_model=SuperAdminResponse)
async def super_admin_profile(admin: SuperAdmin = Depends(get_current_super_admin)):
    return super_admin_response(admin)


__all__ = ["router", "super_admin_router"]
