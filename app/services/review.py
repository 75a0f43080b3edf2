import logging
import math
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.constants import NotificationTypeEnum, SubjectCollectionEnum
from app.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from app.crud.course import course as crud_course
from app.crud.review import review as crud_review
from app.crud.user import user as crud_user
from app.models.review import Review as ReviewModel
from app.models.user import User
from app.realtime.server_context import RealtimeContext
from app.schemas.response import Page
from app.schemas.review import Review as ReviewSchema, ReviewCreate, ReviewUpdate
from app.services.course import course_service
from app.services.notification import notification_service

logger = logging.getLogger(__name__)


class ReviewService:

    def _serialize(self, review: ReviewModel) -> Dict[str, Any]:
        return ReviewSchema.model_validate(review).model_dump(mode="json")

    def _get_owned(self, db: Session, review_id: str, user: User) -> ReviewModel:
        review = crud_review.get(db, id=review_id)
        if not review:
            raise NotFoundError("Review not found")
        if review.user_id != user.id:
            raise AuthorizationError("You can only modify your own reviews")
        return review

    async def _refresh_course_lists(self, db: Session, course_id: str) -> None:
        # Cached course pages carry the rating aggregates.
        course = crud_course.get(db, id=course_id)
        if course:
            db.refresh(course)
            data = course_service.serialize(course)
            await course_service.reconcile_cached_lists(data["id"], replacement=data)

    async def create_review(
        self, db: Session, *, user: User, review_in: ReviewCreate, realtime: Optional[RealtimeContext] = None
    ) -> Dict[str, Any]:
        course = crud_course.get(db, id=review_in.course_id)
        if not course:
            raise NotFoundError("Course not found")
        if crud_review.get_by_user_and_course(db, user_id=user.id, course_id=course.id):
            raise ValidationError("You have already reviewed this course")

        review_data = review_in.model_dump()
        review_data["user_id"] = user.id
        new_review = crud_review.create(db, obj_in=review_data)
        data = self._serialize(crud_review.get(db, id=new_review.id))
        logger.info(f"User {user.id} reviewed course {course.course_id}")

        await self._refresh_course_lists(db, course.id)

        await notification_service.fan_out(
            db,
            recipients=crud_user.get_admin_ids,
            type=NotificationTypeEnum.REVIEW.value,
            title="New Review",
            body=f'{user.username} rated the course "{course.name}" {review_in.rating}/5.',
            subject_id=data["id"],
            subject_collection=SubjectCollectionEnum.REVIEW.value,
            realtime=realtime,
        )
        return data

    def get_course_reviews(self, db: Session, *, course_id: Any, page: int = 1, limit: int = 10) -> Page[Dict[str, Any]]:
        course = course_service.get_object(db, course_id)
        total = crud_review.count(db, filters={"course_id": course.id})
        reviews = crud_review.get_for_course(db, course_id=course.id, skip=(page - 1) * limit, limit=limit)
        return Page[Dict[str, Any]](
            items=[self._serialize(r) for r in reviews],
            current_page=page,
            total_pages=math.ceil(total / limit) if total else 0,
            total=total,
        )

    def get_my_reviews(self, db: Session, *, user: User, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        return [self._serialize(r) for r in crud_review.get_for_user(db, user_id=user.id, skip=skip, limit=limit)]

    async def update_review(self, db: Session, *, review_id: str, user: User, review_in: ReviewUpdate) -> Dict[str, Any]:
        review = self._get_owned(db, review_id, user)
        crud_review.update(db, db_obj=review, obj_in=review_in)
        await self._refresh_course_lists(db, review.course_id)
        return self._serialize(crud_review.get(db, id=review_id))

    async def delete_review(self, db: Session, *, review_id: str, user: User) -> None:
        review = self._get_owned(db, review_id, user)
        course_id = review.course_id
        crud_review.delete(db, id=review.id)
        logger.info(f"Review {review_id} deleted by user {user.id}")
        await self._refresh_course_lists(db, course_id)


review_service = ReviewService()
