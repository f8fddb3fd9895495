from typing import Annotated

from fastapi import Depends, Path, Request
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import MAX_DB_INT

SESSION_USER_KEY = "userId"

# Path ids outside the storable range answer 400 instead of reaching the driver.
IdPath = Annotated[int, Path(ge=1, le=MAX_DB_INT)]


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> User | None:
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    user = db.get(User, int(user_id))
    if not user:
        # stale cookie for a user that no longer exists
        request.session.pop(SESSION_USER_KEY, None)
    return user


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if not user:
        raise AuthenticationError("Unauthorized")
    return user


def login_session(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = user.id


def logout_session(request: Request) -> None:
    request.session.clear()
