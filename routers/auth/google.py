import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Response

from business.session import SessionIssuer
from business.user import find_or_create_user
from database.dao.user import UserDAO
from integrations.google_identity import GoogleTokenVerifier
from schemas.user import GoogleLoginRequest, GoogleLoginResponse, PublicUser
from utils.dependencies import get_google_verifier, get_session_issuer, get_user_dao
from utils.errors import AuthenticationError, AuthServiceError, ValidationError, VerificationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/google")


@router.post("", response_model=GoogleLoginResponse)
async def google_login(
    response: Response,
    payload: Optional[GoogleLoginRequest] = Body(default=None),
    verifier: GoogleTokenVerifier = Depends(get_google_verifier),
    issuer: SessionIssuer = Depends(get_session_issuer),
    dao: UserDAO = Depends(get_user_dao),
):
    """
    Sign in with a Google ID token.

    Verifies the token, finds or creates the matching user and sets the
    session cookie. The session token only travels in the cookie; the body
    carries the public user fields.
    """
    token = payload.token if payload else None
    if not token:
        raise ValidationError("Token is required")

    try:
        if not isinstance(token, str):
            logger.warning(f"Google token verification error: token is a {type(token).__name__}")
            raise VerificationError()

        identity = await verifier.verify(token)

        user = await find_or_create_user(
            dao,
            google_id=identity.sub,
            email=identity.email,
            name=identity.name,
        )

        issuer.attach(response, issuer.issue(user.id))
        logger.info(f"Issued user session for {user.id}")

        return GoogleLoginResponse(user=PublicUser.model_validate(user))

    except AuthServiceError:
        raise
    except Exception as error:
        # Every failure reads as a bad token to the client
        logger.exception(f"Google auth error: {error}")
        raise AuthenticationError() from error
