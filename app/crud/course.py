from typing import List, Optional

from sqlalchemy import or_, update
from sqlalchemy.orm import Session, selectinload

from app.core.constants import COURSE_ID_COUNTER
from app.crud.base import CRUDBase
from app.crud.counter import counter as crud_counter
from app.models.course import Course
from app.models.user import User
from app.schemas.course import CourseCreate, CourseUpdate


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Course).options(selectinload(Course.reviews))

    def get_by_course_id(self, db: Session, *, course_id: int) -> Optional[Course]:
        return self._query_with_relationships(db).filter(Course.course_id == course_id).first()

    def create(self, db: Session, *, obj_in, commit: bool = True) -> Course:
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        obj_in_data["course_id"] = crud_counter.next_value(db, name=COURSE_ID_COUNTER)
        return super().create(db, obj_in=obj_in_data, commit=commit)

    def search(self, db: Session, *, search: Optional[str], skip: int = 0, limit: int = 10) -> List[Course]:
        query = self._query_with_relationships(db)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(Course.name.ilike(pattern), Course.description.ilike(pattern)))
        return query.order_by(Course.created_at, Course.id).offset(skip).limit(limit).all()

    def increment_views(self, db: Session, *, course_id: int) -> Optional[Course]:
        result = db.execute(
            update(Course).where(Course.course_id == course_id).values(views=Course.views + 1)
        )
        if result.rowcount == 0:
            return None
        db.flush()
        course = self.get_by_course_id(db, course_id=course_id)
        db.refresh(course)
        return course

    def enroll_user(self, db: Session, *, course: Course, user: User) -> bool:
        if course in user.courses:
            return False
        user.courses.append(course)
        course.enrolled = Course.enrolled + 1
        db.add(course)
        return True


course = CRUDCourse(Course)
