from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.models.user import User
from app.realtime.server_context import RealtimeContext
from app.schemas.response import APIResponse, Page
from app.schemas.review import Review, ReviewCreate, ReviewUpdate
from app.services.review import review_service
from app.utils import deps

router = APIRouter()


@router.post("/", response_model=APIResponse[Review], status_code=status.HTTP_201_CREATED)
async def create_review(
    *,
    db: Session = Depends(deps.get_db),
    review_in: ReviewCreate,
    current_user: User = Depends(deps.get_current_user),
    realtime: Optional[RealtimeContext] = Depends(deps.get_realtime),
):
    review = await review_service.create_review(db, user=current_user, review_in=review_in, realtime=realtime)
    return APIResponse(message="Review created successfully", data=review)


@router.get("/course/{course_id}", response_model=APIResponse[Page[Review]])
def get_course_reviews(
    course_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    reviews = review_service.get_course_reviews(db, course_id=course_id, page=page, limit=limit)
    return APIResponse(message="Reviews retrieved successfully", data=reviews)


@router.get("/me", response_model=APIResponse[List[Review]])
def get_my_reviews(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
):
    reviews = review_service.get_my_reviews(db, user=current_user, skip=skip, limit=limit)
    return APIResponse(message="Your reviews retrieved successfully", data=reviews)


@router.patch("/{review_id}", response_model=APIResponse[Review])
async def update_review(
    review_id: str,
    review_in: ReviewUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    review = await review_service.update_review(db, review_id=review_id, user=current_user, review_in=review_in)
    return APIResponse(message="Review updated successfully", data=review)


@router.delete("/{review_id}", response_model=APIResponse[None])
async def delete_review(
    review_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    await review_service.delete_review(db, review_id=review_id, user=current_user)
    return APIResponse(message="Review deleted successfully")
