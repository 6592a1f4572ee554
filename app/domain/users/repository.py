"""User repository - Database operations for profiles and favourites"""

from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...models import Favorite, User, Vendor


class UserRepository:
    """Repository for user and favourite database operations"""

    @staticmethod
    def save(db: Session, user: User) -> User:
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def get_vendor(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def find_favorite(db: Session, user_id: int, vendor_id: int) -> Optional[Favorite]:
        """The user's favourite row for a vendor, active or not"""
        return db.query(Favorite).filter(Favorite.user_id == user_id, Favorite.vendor_id == vendor_id).first()

    @staticmethod
    def get_favorite(db: Session, user_id: int, favorite_id: int) -> Optional[Favorite]:
        return (
            db.query(Favorite)
            .filter(Favorite.id == favorite_id, Favorite.user_id == user_id, Favorite.is_active.is_(True))
            .first()
        )

    @staticmethod
    def get_favorite_by_vendor(db: Session, user_id: int, vendor_id: int) -> Optional[Favorite]:
        return (
            db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.vendor_id == vendor_id, Favorite.is_active.is_(True))
            .first()
        )

    @staticmethod
    def list_favorites(db: Session, user_id: int, category: Optional[str] = None) -> list[Favorite]:
        q = db.query(Favorite).filter(Favorite.user_id == user_id, Favorite.is_active.is_(True))
        if category is not None:
            q = q.filter(Favorite.category == category)
        return q.order_by(desc(Favorite.created_at), desc(Favorite.id)).all()

    @staticmethod
    def count_favorites(db: Session, user_id: int) -> int:
        return db.query(Favorite).filter(Favorite.user_id == user_id, Favorite.is_active.is_(True)).count()

    @staticmethod
    def save_favorite(db: Session, favorite: Favorite) -> Favorite:
        db.add(favorite)
        db.commit()
        db.refresh(favorite)
        return favorite
