import logging

from fastapi import APIRouter, Depends, Response

from business.session import SessionIssuer
from schemas.user import MessageResponse
from utils.dependencies import get_session_issuer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/logout")


@router.post("", response_model=MessageResponse)
async def logout(response: Response, issuer: SessionIssuer = Depends(get_session_issuer)):
    """
    Logout endpoint

    Clears the user and admin session cookies. No session is required, so
    logging out twice still succeeds.
    """
    issuer.clear(response)
    logger.info("Cleared session cookies")
    return MessageResponse(message="Logged out successfully")
