from fastapi import APIRouter

from routers.auth import google, logout, session

router = APIRouter(prefix="/auth")
router.include_router(google.router, tags=["Google Sign-In"])
router.include_router(session.router, tags=["Session Management"])
router.include_router(logout.router, tags=["Logout"])
