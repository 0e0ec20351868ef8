from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.user import UserStatus


class UserCreate(BaseModel):
    google_id: str  # Google sub
    email: str  # stored exactly as the provider sent it
    name: str
    status: UserStatus = UserStatus.none


class PublicUser(BaseModel):
    """User fields that are safe to return to the browser."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    email: str
    status: UserStatus
    password_set: bool = Field(False, alias="passwordSet")
    codechef_username: Optional[str] = Field(None, alias="codechefUsername")
    verification_hex: Optional[str] = Field(None, alias="verificationHex")
    submission_id: Optional[str] = Field(None, alias="submissionId")


class GoogleLoginRequest(BaseModel):
    # Any JSON value; the handler decides between missing and unverifiable
    token: Any = None


class GoogleLoginResponse(BaseModel):
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


class SessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    is_admin: bool = Field(alias="isAdmin")
    exp: int
