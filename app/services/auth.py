import logging

from sqlalchemy.orm import Session

from app.core.exceptions import AuthenticationError, ValidationError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.crud.user import user as crud_user
from app.models.user import User
from app.schemas.token import LoginResponse, Token
from app.schemas.user import User as UserSchema, UserCreate

logger = logging.getLogger(__name__)


class AuthService:
    def signup(self, db: Session, *, user_in: UserCreate) -> User:
        """New accounts start as unconfirmed users; an admin confirms them."""
        if crud_user.get_by_email(db, email=user_in.email):
            raise ValidationError("Email already registered", details={"email": user_in.email})

        user_data = user_in.model_dump(exclude={"password"})
        user_data["email"] = user_data["email"].lower()
        user_data["hashed_password"] = get_password_hash(user_in.password)
        user = crud_user.create(db, obj_in=user_data)
        logger.info(f"User {user.id} signed up")
        return user

    def login(self, db: Session, *, email: str, password: str) -> LoginResponse:
        user = crud_user.get_by_email(db, email=email)
        if not user or not verify_password(password, user.hashed_password):
            raise AuthenticationError("Incorrect email or password")

        access_token = create_access_token(data={"user_id": user.id, "role": user.role})
        return LoginResponse(
            token=Token(access_token=access_token, token_type="bearer"),
            user=UserSchema.model_validate(user),
        )


auth_service = AuthService()
