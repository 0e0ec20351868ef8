from fastapi import Depends, Request

from business.session import SessionClaims, SessionIssuer
from utils.dependencies import get_session_issuer
from utils.errors import AuthenticationError


def get_current_session(
    request: Request,
    issuer: SessionIssuer = Depends(get_session_issuer),
) -> SessionClaims:
    """Dependency that requires a valid user session cookie"""
    token = request.cookies.get(issuer.user_cookie_name)

    if not token:
        raise AuthenticationError("Not authenticated")

    try:
        return issuer.decode(token)
    except AuthenticationError:
        raise AuthenticationError("Not authenticated")
