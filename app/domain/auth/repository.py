"""Auth repository - Account lookups and persistence"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import SuperAdmin, User


class AuthRepository:
    """Repository for account database operations"""

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def get_active_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email, User.is_active.is_(True)).first()

    @staticmethod
    def get_by_reset_token(db: Session, token: str) -> Optional[User]:
        return db.query(User).filter(User.password_reset_token == token).first()

    @staticmethod
    def get_by_verification_token(db: Session, token: str) -> Optional[User]:
        return db.query(User).filter(User.email_verification_token == token).first()

    @staticmethod
    def create(db: Session, **user_data) -> User:
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def save(db: Session, user: User) -> User:
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def get_super_admin_by_email(db: Session, email: str) -> Optional[SuperAdmin]:
        return db.query(SuperAdmin).filter(SuperAdmin.email == email).first()

    @staticmethod
    def save_super_admin(db: Session, admin: SuperAdmin) -> SuperAdmin:
        db.commit()
        db.refresh(admin)
        return admin
