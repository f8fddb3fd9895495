from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, model_validator


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirmPassword: str
    fullName: str = Field(..., min_length=1, max_length=150)
    phone: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    role: Literal["tenant", "landlord", "agent"] = "tenant"
    language: str = "en"

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirmPassword:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    username: str
    password: str


class ForgotPasswordRequest(BaseModel):
    email: str


class ResetPasswordRequest(BaseModel):
    token: str
    password: str = Field(..., min_length=6)
