import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.constants import SubjectCollectionEnum
from app.core.exceptions import NotFoundError
from app.crud.catalog import instructor as crud_instructor
from app.crud.course import course as crud_course
from app.models.course import Course as CourseModel
from app.models.user import User
from app.schemas.course import Course as CourseSchema
from app.services.catalog import CatalogService, changed_from

logger = logging.getLogger(__name__)


class CourseService(CatalogService[CourseModel]):
    """Courses are addressed by their sequential ``course_id`` on public routes."""

    entity_name = "Course"
    plural_name = "Courses"
    cache_name = "course"
    subject_collection = SubjectCollectionEnum.COURSE.value
    significant_fields = {
        "name": changed_from("Title"),
        "description": lambda old, new: f'New Information: "{new}"',
    }
    dependent_caches = ["module"]

    def get_object(self, db: Session, entity_id: Any) -> CourseModel:
        try:
            course_id = int(entity_id)
        except (TypeError, ValueError):
            raise NotFoundError("Course not found")
        course = crud_course.get_by_course_id(db, course_id=course_id)
        if not course:
            raise NotFoundError("Course not found")
        return course

    def validate_references(self, db: Session, data: Dict[str, Any]) -> None:
        instructor_id = data.get("instructor_id")
        if instructor_id and not crud_instructor.get(db, id=instructor_id):
            raise NotFoundError("Instructor not found")

    def creation_message(self, db: Session, db_obj: CourseModel) -> str:
        by = db_obj.instructor.name if db_obj.instructor else db_obj.instructor_id
        return f'A new course "{db_obj.name}" by {by} has been added to our collection.'

    def search(self, db: Session, *, search: Optional[str], skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        courses = crud_course.search(db, search=search, skip=skip, limit=limit)
        if not courses:
            raise NotFoundError("No courses found")
        return [self.serialize(c) for c in courses]

    async def record_view(self, db: Session, *, course_id: int, user: User) -> Dict[str, Any]:
        """Count a view and enroll ``user`` if they are not enrolled yet."""
        course = crud_course.increment_views(db, course_id=course_id)
        if not course:
            raise NotFoundError("Course not found")

        if crud_course.enroll_user(db, course=course, user=user):
            logger.info(f"User {user.id} enrolled in course {course.course_id}")
        db.commit()
        db.refresh(course)

        data = self.serialize(course)
        await self.reconcile_cached_lists(data["id"], replacement=data)
        return data


course_service = CourseService(crud_course, CourseSchema)
