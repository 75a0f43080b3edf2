from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.constants import RoleEnum
from app.models.user import User as UserModel
from app.schemas.response import APIResponse
from app.schemas.user import Progress, TopicProgressCreate, User
from app.services.user import user_service
from app.utils import deps

router = APIRouter()


@router.get("/progress", response_model=APIResponse[Progress])
def get_my_progress(current_user: UserModel = Depends(deps.get_current_user)):
    return APIResponse(message="Progress retrieved successfully", data=user_service.get_progress(current_user))


@router.post("/progress/topics", response_model=APIResponse[Progress])
def mark_topic_passed(
    *,
    db: Session = Depends(deps.get_db),
    progress_in: TopicProgressCreate,
    current_user: UserModel = Depends(deps.get_current_user),
):
    progress = user_service.mark_topic_passed(db, user=current_user, progress_in=progress_in)
    return APIResponse(message="Topic marked as passed", data=progress)


@router.patch("/{user_id}/confirm", response_model=APIResponse[User])
def confirm_user(
    user_id: str,
    db: Session = Depends(deps.get_db),
    current_user: UserModel = Depends(deps.require_role(RoleEnum.ADMIN)),
):
    user = user_service.confirm_user(db, user_id=user_id)
    return APIResponse(message="User confirmed successfully", data=User.model_validate(user))


@router.delete("/{user_id}", response_model=APIResponse[None])
def delete_user(
    user_id: str,
    db: Session = Depends(deps.get_db),
    current_user: UserModel = Depends(deps.require_role(RoleEnum.ADMIN)),
):
    user_service.soft_delete_user(db, user_id=user_id)
    return APIResponse(message="User deleted successfully")
