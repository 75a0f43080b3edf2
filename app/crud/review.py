from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewUpdate


class CRUDReview(CRUDBase[Review, ReviewCreate, ReviewUpdate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Review).options(selectinload(Review.user), selectinload(Review.course))

    def get(self, db: Session, id: str) -> Optional[Review]:
        return self._query_with_relationships(db).filter(Review.id == id).first()

    def get_by_user_and_course(self, db: Session, *, user_id: str, course_id: str) -> Optional[Review]:
        return db.query(Review).filter(Review.user_id == user_id, Review.course_id == course_id).first()

    def get_for_course(self, db: Session, *, course_id: str, skip: int = 0, limit: int = 10) -> List[Review]:
        return (
            self._query_with_relationships(db)
            .filter(Review.course_id == course_id)
            .order_by(Review.created_at.desc(), Review.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_for_user(self, db: Session, *, user_id: str, skip: int = 0, limit: int = 10) -> List[Review]:
        return (
            self._query_with_relationships(db)
            .filter(Review.user_id == user_id)
            .order_by(Review.created_at.desc(), Review.id)
            .offset(skip)
            .limit(limit)
            .all()
        )


review = CRUDReview(Review)
