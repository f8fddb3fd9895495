import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, login_session, logout_session
from app.api.serializers import user_out
from app.core.config import is_production
from app.core.errors import AuthenticationError
from app.db.session import get_db
from app.schemas.auth import ForgotPasswordRequest, LoginRequest, RegisterRequest, ResetPasswordRequest
from app.services import users

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

RESET_SENT_MESSAGE = "If an account exists with that email, you will receive password reset instructions."


@router.post("/register", status_code=201)
def register(data: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    user = users.register_user(db, data)
    login_session(request, user)
    return user_out(user)


@router.post("/login")
def login(data: LoginRequest, request: Request, db: Session = Depends(get_db)):
    user = users.authenticate(db, data.username, data.password)
    if not user:
        raise AuthenticationError("Invalid credentials")
    login_session(request, user)
    logger.info("User %s logged in", user.id)
    return user_out(user)


@router.post("/logout")
def logout(request: Request):
    logout_session(request)
    return {"message": "Successfully logged out"}


@router.get("/me")
def me(user=Depends(get_current_user)):
    return user_out(user)


@router.post("/forgot-password")
def forgot_password(data: ForgotPasswordRequest, request: Request, db: Session = Depends(get_db)):
    token = users.start_password_reset(db, data.email)
    # Same answer whether or not the email is known.
    if token and not is_production():
        return {
            "message": "Reset token generated (development only)",
            "resetLink": f"{str(request.base_url).rstrip('/')}/reset-password?token={token}",
        }
    return {"message": RESET_SENT_MESSAGE}


@router.post("/reset-password")
def reset_password(data: ResetPasswordRequest, db: Session = Depends(get_db)):
    users.reset_password(db, data.token, data.password)
    return {"message": "Password has been reset successfully"}
