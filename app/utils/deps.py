from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.constants import RoleEnum
from app.core.database import get_db
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import decode_access_token
from app.crud.user import user as user_crud
from app.models.user import User
from app.realtime.server_context import RealtimeContext
from app.schemas.token import TokenPayload

http_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
) -> User:
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
        token_data = TokenPayload(**payload)
    except JWTError:
        raise AuthenticationError("Could not validate credentials")
    except ValidationError:
        raise AuthenticationError("Invalid token payload")

    user = user_crud.get_active(db, token_data.user_id)
    if not user:
        raise AuthenticationError("User not found")
    return user


def require_role(*roles: RoleEnum):
    """Dependency that lets through only users holding one of ``roles``."""
    allowed = {r.value for r in roles}

    def _verify_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise AuthorizationError("You do not have permission to perform this action.")
        return current_user

    return _verify_role


def get_realtime(request: Request) -> Optional[RealtimeContext]:
    return getattr(request.app.state, "realtime", None)
