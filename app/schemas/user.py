from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ProfileUpdateRequest(BaseModel):
    fullName: Optional[str] = Field(None, min_length=1, max_length=150)
    phone: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    language: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = Field(None, min_length=6)
    confirmNewPassword: Optional[str] = None

    @model_validator(mode="after")
    def password_fields(self):
        given = [self.currentPassword, self.newPassword, self.confirmNewPassword]
        if any(given) and not all(given):
            raise ValueError("All password fields are required when changing password")
        if self.newPassword and self.newPassword != self.confirmNewPassword:
            raise ValueError("New passwords do not match")
        return self

    @property
    def changes_password(self) -> bool:
        return bool(self.currentPassword and self.newPassword)
