from fastapi import APIRouter, Depends

from business.session import SessionClaims
from schemas.user import SessionResponse
from utils.middlewares.auth_user import get_current_session

router = APIRouter(prefix="/session")


@router.get("", response_model=SessionResponse)
async def get_session(session: SessionClaims = Depends(get_current_session)):
    """Return the claims of the caller's user session cookie."""
    return SessionResponse(user_id=session.user_id, is_admin=session.is_admin, exp=session.exp)
