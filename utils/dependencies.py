from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from business.session import SessionIssuer
from database.dao.user import UserDAO
from database.database import get_db
from integrations.google_identity import GoogleTokenVerifier
from models.cookies import SESSION_COOKIE_OPTIONS
from utils.constants import (
    ADMIN_COOKIE_NAME,
    GOOGLE_CLIENT_ID,
    GOOGLE_VERIFY_TIMEOUT,
    JWT_ACCESS_SECRET,
    JWT_ALGORITHM,
    USER_COOKIE_NAME,
)

# Built once per process from constants; tests swap them through
# app.dependency_overrides.


@lru_cache
def get_google_verifier() -> GoogleTokenVerifier:
    return GoogleTokenVerifier(GOOGLE_CLIENT_ID, timeout=GOOGLE_VERIFY_TIMEOUT)


@lru_cache
def get_session_issuer() -> SessionIssuer:
    return SessionIssuer(
        secret=JWT_ACCESS_SECRET,
        user_cookie_name=USER_COOKIE_NAME,
        admin_cookie_name=ADMIN_COOKIE_NAME,
        cookie_options=SESSION_COOKIE_OPTIONS,
        algorithm=JWT_ALGORITHM,
    )


def get_user_dao(db: AsyncSession = Depends(get_db)) -> UserDAO:
    return UserDAO(db)
