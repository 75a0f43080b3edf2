from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.constants import RoleEnum
from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate


class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):
    def get_active(self, db: Session, id: str) -> Optional[User]:
        return db.query(User).filter(User.id == id, User.is_deleted == False).first()

    def get_by_email(self, db: Session, *, email: str) -> User | None:
        return db.query(User).filter(User.email == email.lower(), User.is_deleted == False).first()

    def get_notifiable_ids(self, db: Session) -> List[str]:
        """Users that receive catalog announcements: confirmed and not deleted."""
        rows = db.query(User.id).filter(User.is_deleted == False, User.is_confirmed == True).all()
        return [row.id for row in rows]

    def get_admin_ids(self, db: Session) -> List[str]:
        rows = db.query(User.id).filter(User.role == RoleEnum.ADMIN.value, User.is_deleted == False).all()
        return [row.id for row in rows]

    def set_progress(self, db: Session, *, db_obj: User, progress: dict) -> User:
        # JSON columns only persist on reassignment.
        db_obj.progress = progress
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


user = CRUDUser(User)
