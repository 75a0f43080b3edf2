from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.notification import Notification
from app.schemas.response import APIResponse
from app.services.notification import notification_service
from app.utils import deps

router = APIRouter()

@router.get("/", response_model=APIResponse[List[Notification]])
def get_my_notifications(
    db: Session = Depends(deps.get_db),
    user: User = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
):
    """Retrieve notifications for the current user."""
    data = notification_service.get_user_notifications(db, user_id=user.id, skip=skip, limit=limit)
    return APIResponse(message="Notifications fetched successfully", data=data)

@router.get("/unread_count", response_model=APIResponse[int])
def get_unread_notifications_count(
    db: Session = Depends(deps.get_db),
    user: User = Depends(deps.get_current_user)
):
    """Get the count of unread notifications for the current user."""
    count = notification_service.get_unread_count(db, user_id=user.id)
    return APIResponse(message="Unread notifications count fetched successfully", data=count)

@router.post("/{notification_id}/read", response_model=APIResponse[Notification])
def mark_notification_as_read(
    notification_id: str,
    db: Session = Depends(deps.get_db),
    user: User = Depends(deps.get_current_user)
):
    notification = notification_service.mark_notification_as_read(db, notification_id=notification_id, user_id=user.id)
    return APIResponse(message="Notification marked as read", data=notification)

@router.post("/mark_all_read", response_model=APIResponse[int])
def mark_all_notifications_as_read(
    db: Session = Depends(deps.get_db),
    user: User = Depends(deps.get_current_user)
):
    """Mark all unread notifications for the current user as read."""
    updated = notification_service.mark_all_notifications_as_read(db, user_id=user.id)
    return APIResponse(message="All notifications marked as read", data=updated)
