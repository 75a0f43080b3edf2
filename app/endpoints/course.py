from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.endpoints.base import create_entity_router
from app.models.user import User
from app.schemas.course import Course, CourseCreate, CourseUpdate
from app.schemas.response import APIResponse
from app.services.course import course_service
from app.utils import deps

router = APIRouter()


@router.get("/search", response_model=APIResponse[List[Course]])
def search_courses(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    search: Optional[str] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
):
    """Case-insensitive match on course name or description."""
    courses = course_service.search(db, search=search, skip=skip, limit=limit)
    return APIResponse(message="Courses retrieved successfully", data=courses)


@router.patch("/view/{course_id}", response_model=APIResponse[Course])
async def view_course(
    course_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """Count a view and enroll the caller in the course."""
    course = await course_service.record_view(db, course_id=course_id, user=current_user)
    return APIResponse(message="Course viewed successfully", data=course)


router.include_router(
    create_entity_router(
        course_service,
        create_path="/addCourse",
        list_path="/allCourse",
        create_schema=CourseCreate,
        update_schema=CourseUpdate,
        read_schema=Course,
        image_field="image",
    )
)
