import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Response
from jwt.exceptions import InvalidTokenError

from models.cookies import CookieOptions
from utils.errors import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass
class SessionClaims:
    user_id: str
    is_admin: bool
    exp: int


class SessionIssuer:
    """
    Signs user session tokens and moves them in and out of cookies.

    The token is the whole session: nothing is stored server-side, so a
    token stays valid until it expires.
    """

    def __init__(
        self,
        secret: str,
        user_cookie_name: str,
        admin_cookie_name: str,
        cookie_options: CookieOptions,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("Session signing secret must not be empty")
        if user_cookie_name == admin_cookie_name:
            raise ValueError("User and admin session cookies must have different names")
        self.secret = secret
        self.user_cookie_name = user_cookie_name
        self.admin_cookie_name = admin_cookie_name
        self.cookie_options = cookie_options
        self.algorithm = algorithm

    def issue(self, user_id: str) -> str:
        issued_at = datetime.now(timezone.utc)
        payload = {
            "userId": str(user_id),
            "isAdmin": False,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.cookie_options.max_age),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> SessionClaims:
        try:
            decoded = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId"]},
            )
        except InvalidTokenError as e:
            logger.info(f"Rejected session token: {e}")
            raise AuthenticationError("Invalid session") from e

        return SessionClaims(
            user_id=str(decoded["userId"]),
            is_admin=bool(decoded.get("isAdmin", False)),
            exp=int(decoded["exp"]),
        )

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.user_cookie_name,
            value=token,
            max_age=self.cookie_options.max_age,
            path=self.cookie_options.path,
            httponly=self.cookie_options.httponly,
            secure=self.cookie_options.secure,
            samesite=self.cookie_options.samesite,
        )

    def clear(self, response: Response) -> None:
        """Expire both session cookies using the attributes they were set with."""
        for cookie_name in (self.user_cookie_name, self.admin_cookie_name):
            response.delete_cookie(
                key=cookie_name,
                path=self.cookie_options.path,
                httponly=self.cookie_options.httponly,
                secure=self.cookie_options.secure,
                samesite=self.cookie_options.samesite,
            )
