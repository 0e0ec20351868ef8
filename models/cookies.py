from dataclasses import dataclass
from typing import Literal

from utils.constants import SESSION_MAX_AGE


@dataclass(frozen=True)
class CookieOptions:
    max_age: int
    path: str
    httponly: bool
    secure: bool
    samesite: Literal["lax", "strict", "none"]


# Shared by the user and admin session cookies. Logout clears with these exact
# attributes, otherwise browsers keep the cookie.
SESSION_COOKIE_OPTIONS = CookieOptions(
    max_age=SESSION_MAX_AGE,
    path="/",
    httponly=True,
    secure=True,
    samesite="none",
)
