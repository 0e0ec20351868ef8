import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy import Enum as SAEnum

from database.database import Base


class UserStatus(str, Enum):
    none = "none"
    pending = "pending"
    verified = "verified"
    rejected = "rejected"


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_new_user_id, index=True)
    google_id = Column(String, unique=True, nullable=False, index=True)  # Google sub
    email = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    status = Column(
        SAEnum(UserStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=UserStatus.none,
    )

    # Owned by account features outside sign-in; passed through untouched
    password_set = Column(Boolean, nullable=False, default=False)
    codechef_username = Column(String, nullable=True)
    verification_hex = Column(String, nullable=True)
    submission_id = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
