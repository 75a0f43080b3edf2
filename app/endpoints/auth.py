from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.models.user import User as UserModel
from app.schemas.response import APIResponse
from app.schemas.token import LoginRequest, LoginResponse
from app.schemas.user import User, UserCreate
from app.services.auth import auth_service
from app.utils import deps

router = APIRouter()


@router.post("/signup", response_model=APIResponse[User], status_code=status.HTTP_201_CREATED)
def signup(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCreate,
):
    """Create an account. It stays unconfirmed until an admin confirms it."""
    user = auth_service.signup(db, user_in=user_in)
    return APIResponse(message="User created successfully", data=User.model_validate(user))


@router.post("/login", response_model=APIResponse[LoginResponse])
def login(
    *,
    db: Session = Depends(deps.get_db),
    login_data: LoginRequest,
):
    login_response = auth_service.login(db, email=login_data.email, password=login_data.password)
    return APIResponse(message="Login successful", data=login_response)


@router.get("/me", response_model=APIResponse[User])
def read_current_user(current_user: UserModel = Depends(deps.get_current_user)):
    return APIResponse(message="User retrieved successfully", data=User.model_validate(current_user))
