"""Auth service - Registration, login and account recovery"""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import BackgroundTasks, HTTPException
from sqlalchemy.orm import Session

from ...config import PASSWORD_RESET_EXPIRATION_MINUTES
from ...email_service import send_password_reset_email, send_safely, send_verification_email, send_welcome_email
from ...models import SuperAdmin, User
from ...security_utils import (
    create_super_admin_token,
    create_user_token,
    generate_secure_token,
    hash_password,
    verify_password,
)
from ...shared.time import utcnow
from .repository import AuthRepository
from .schemas import (
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    SuperAdminLogin,
)

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = ("customer", "vendor")
FORGOT_PASSWORD_MESSAGE = "If the email exists, a password reset link has been sent"


def _queue(background_tasks: Optional[BackgroundTasks], send_func, *args):
    if background_tasks is not None:
        background_tasks.add_task(send_safely, send_func, *args)


class AuthService:
    """Service layer for account business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AuthRepository()

    def register(self, data: RegisterRequest, background_tasks: Optional[BackgroundTasks] = None) -> tuple[User, str]:
        role = data.role or "customer"
        if role == "admin":
            raise HTTPException(status_code=400, detail="Admin role cannot be assigned through registration")
        if role not in SELF_SERVICE_ROLES:
            raise HTTPException(
                status_code=400, detail='Invalid role. Only "customer" and "vendor" roles are allowed'
            )

        if self.repo.get_by_email(self.db, data.email):
            logger.warning(f"⚠️ Registration refused, email already in use: {data.email}")
            raise HTTPException(status_code=409, detail="User with this email already exists")

        verification_token = generate_secure_token()
        user = self.repo.create(
            self.db,
            email=data.email,
            password_hash=hash_password(data.password),
            name=data.name.strip(),
            phone=data.phone,
            role=role,
            email_verification_token=verification_token,
        )
        logger.info(f"✅ Registered {role} account {user.id} ({user.email})")

        _queue(background_tasks, send_welcome_email, user.email, user.name)
        _queue(background_tasks, send_verification_email, user.email, user.name, verification_token)
        return user, create_user_token(user)

    def login(self, data: LoginRequest) -> tuple[User, str]:
        user = self.repo.get_active_by_email(self.db, data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning(f"⚠️ Failed login for {data.email}")
            raise HTTPException(status_code=401, detail="Invalid credentials")

        user.last_login_at = utcnow()
        user = self.repo.save(self.db, user)
        logger.info(f"✅ User {user.id} logged in")
        return user, create_user_token(user)

    def change_password(self, user: User, data: ChangePasswordRequest) -> dict:
        if not verify_password(data.currentPassword, user.password_hash):
            raise HTTPException(status_code=401, detail="Current password is incorrect")
        user.password_hash = hash_password(data.newPassword)
        self.repo.save(self.db, user)
        logger.info(f"🔐 Password changed for user {user.id}")
        return {"message": "Password has been changed successfully"}

    def forgot_password(self, email: str, background_tasks: Optional[BackgroundTasks] = None) -> dict:
        """Same answer whether or not the account exists"""
        user = self.repo.get_active_by_email(self.db, email)
        if user:
            token = generate_secure_token()
            user.password_reset_token = token
            user.password_reset_expires = utcnow() + timedelta(minutes=PASSWORD_RESET_EXPIRATION_MINUTES)
            self.repo.save(self.db, user)
            _queue(background_tasks, send_password_reset_email, user.email, token)
            logger.info(f"🔑 Password reset requested for user {user.id}")
        return {"message": FORGOT_PASSWORD_MESSAGE}

    def reset_password(self, data: ResetPasswordRequest) -> dict:
        user = self.repo.get_by_reset_token(self.db, data.token)
        if not user or not user.password_reset_expires or user.password_reset_expires < utcnow():
            raise HTTPException(status_code=400, detail="Invalid or expired reset token")

        user.password_hash = hash_password(data.password)
        user.password_reset_token = None
        user.password_reset_expires = None
        self.repo.save(self.db, user)
        logger.info(f"🔐 Password reset completed for user {user.id}")
        return {"message": "Password has been reset successfully"}

    def verify_email(self, token: str) -> dict:
        user = self.repo.get_by_verification_token(self.db, token)
        if not user:
            raise HTTPException(status_code=400, detail="Invalid verification token")
        user.is_email_verified = True
        user.email_verification_token = None
        self.repo.save(self.db, user)
        return {"message": "Email has been verified successfully"}

    def resend_verification(self, email: str, background_tasks: Optional[BackgroundTasks] = None) -> dict:
        user = self.repo.get_by_email(self.db, email.strip().lower())
        if not user:
            raise HTTPException(status_code=400, detail="User not found")
        if user.is_email_verified:
            raise HTTPException(status_code=400, detail="Email is already verified")

        token = generate_secure_token()
        user.email_verification_token = token
        self.repo.save(self.db, user)
        _queue(background_tasks, send_verification_email, user.email, user.name, token)
        return {"message": "Verification email has been sent"}

    # ========================================================================
    # SUPER ADMIN
    # ========================================================================

    def super_admin_login(self, data: SuperAdminLogin) -> tuple[SuperAdmin, str]:
        admin = self.repo.get_super_admin_by_email(self.db, data.email)
        if not admin or not admin.is_active or not verify_password(data.password, admin.password_hash):
            logger.warning(f"⚠️ Failed super admin login for {data.email}")
            raise HTTPException(status_code=401, detail="Invalid credentials")

        admin.last_login_at = utcnow()
        admin = self.repo.save_super_admin(self.db, admin)
        logger.info(f"✅ Super admin {admin.id} logged in")
        return admin, create_super_admin_token(admin)
