import copy
import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.catalog import module as crud_module, topic as crud_topic
from app.crud.course import course as crud_course
from app.crud.user import user as crud_user
from app.models.user import User
from app.schemas.user import Progress, TopicProgressCreate

logger = logging.getLogger(__name__)


def _find(entries, key: str, value: str):
    return next((entry for entry in entries if entry.get(key) == value), None)


class UserService:

    def get_active_user(self, db: Session, user_id: str) -> User:
        user = crud_user.get_active(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_progress(self, user: User) -> Progress:
        return Progress.model_validate(user.progress or {"courses": []})

    def mark_topic_passed(self, db: Session, *, user: User, progress_in: TopicProgressCreate) -> Progress:
        """Record ``topic_id`` as passed. Marking the same topic twice is a no-op."""
        course = crud_course.get(db, id=progress_in.course_id)
        if not course:
            raise NotFoundError("Course not found")
        module = crud_module.get(db, id=progress_in.module_id)
        if not module:
            raise NotFoundError("Module not found")
        topic = crud_topic.get(db, id=progress_in.topic_id)
        if not topic:
            raise NotFoundError("Topic not found")
        if module.course_id != course.id:
            raise ValidationError("Module does not belong to this course")
        if topic.module_id != module.id:
            raise ValidationError("Topic does not belong to this module")

        progress: Dict[str, Any] = copy.deepcopy(user.progress or {"courses": []})
        progress.setdefault("courses", [])

        course_entry = _find(progress["courses"], "course_id", course.id)
        if course_entry is None:
            course_entry = {"course_id": course.id, "name": course.name, "modules": []}
            progress["courses"].append(course_entry)

        module_entry = _find(course_entry["modules"], "module_id", module.id)
        if module_entry is None:
            module_entry = {"module_id": module.id, "name": module.title, "topics": []}
            course_entry["modules"].append(module_entry)

        if _find(module_entry["topics"], "topic_id", topic.id) is None:
            module_entry["topics"].append({"topic_id": topic.id, "name": topic.title})
            user = crud_user.set_progress(db, db_obj=user, progress=progress)
            logger.info(f"User {user.id} passed topic {topic.id}")

        return self.get_progress(user)

    def confirm_user(self, db: Session, *, user_id: str) -> User:
        user = self.get_active_user(db, user_id)
        return crud_user.update(db, db_obj=user, obj_in={"is_confirmed": True})

    def soft_delete_user(self, db: Session, *, user_id: str) -> User:
        user = self.get_active_user(db, user_id)
        user = crud_user.update(db, db_obj=user, obj_in={"is_deleted": True})
        logger.info(f"User {user_id} soft-deleted")
        return user


user_service = UserService()
