"""Planning repository - Database operations for wedding planning workbooks"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import BudgetItem, ChecklistItem, Guest, Planning, TimelineItem

# section name -> row model for the section's items
ITEM_MODELS = {
    "budget": BudgetItem,
    "guests": Guest,
    "timeline": TimelineItem,
    "checklist": ChecklistItem,
}


class PlanningRepository:
    """Repository for planning database operations"""

    @staticmethod
    def get_for_user(db: Session, user_id: int) -> Optional[Planning]:
        return db.query(Planning).filter(Planning.user_id == user_id, Planning.is_active.is_(True)).first()

    @staticmethod
    def get_any_for_user(db: Session, user_id: int) -> Optional[Planning]:
        """The user's planning row whether or not it was deleted"""
        return db.query(Planning).filter(Planning.user_id == user_id).first()

    @staticmethod
    def create(db: Session, **planning_data) -> Planning:
        planning = Planning(**planning_data)
        db.add(planning)
        db.commit()
        db.refresh(planning)
        return planning

    @staticmethod
    def save(db: Session, planning: Planning) -> Planning:
        db.commit()
        db.refresh(planning)
        return planning

    @staticmethod
    def new_item(section: str, **item_data):
        return ITEM_MODELS[section](**item_data)
