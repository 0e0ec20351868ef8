# main.py - Google sign-in session API
import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from database.database import db_manager
from routers import router
from utils.constants import (
    ADMIN_FRONTEND_URL,
    CORS_RESTRICT_ORIGINS,
    GOOGLE_CLIENT_ID,
    JWT_ACCESS_SECRET,
    JWT_ADMIN_ACCESS_SECRET,
    PORT,
    USER_FRONTEND_URL,
)
from utils.errors import AuthServiceError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()  # This outputs to console
    ],
)

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [origin for origin in (USER_FRONTEND_URL, ADMIN_FRONTEND_URL) if origin]


def check_auth_configuration():
    """Fail fast on configuration that would make sessions unsafe."""
    if JWT_ACCESS_SECRET == JWT_ADMIN_ACCESS_SECRET:
        logger.error("JWT_ACCESS_SECRET and JWT_ADMIN_ACCESS_SECRET must differ")
        raise RuntimeError("User and admin sessions must not share a signing secret")
    if not GOOGLE_CLIENT_ID:
        logger.warning("GOOGLE_CLIENT_ID is not set - every Google sign-in will be rejected")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup
    logger.info("Starting application...")
    check_auth_configuration()

    try:
        await db_manager.create_tables()
        logger.info("Connected to database")
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        raise

    yield  # Application runs here

    # Shutdown
    logger.info("Shutting down application...")
    try:
        # Add timeout to prevent hanging on close
        await asyncio.wait_for(db_manager.close(), timeout=5.0)
        logger.info("Database connections closed successfully")
    except asyncio.TimeoutError:
        logger.warning("Database close timed out - forcing shutdown")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")

    logger.info("Application shutdown completed")


# Create FastAPI app with lifespan events
app = FastAPI(
    title="Google Sign-In API",
    description="Google ID token sign-in with cookie sessions",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS. By default every origin is echoed back; the browser's
# SameSite/Secure cookie rules are what limit where sessions travel.
if CORS_RESTRICT_ORIGINS:
    cors_origins = {"allow_origins": ALLOWED_ORIGINS}
else:
    cors_origins = {"allow_origin_regex": ".*"}

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    **cors_origins,
)


@app.exception_handler(AuthServiceError)
async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


app.include_router(router, prefix="/api")


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "message": "Server is running"}


if __name__ == "__main__":
    # Behind one reverse proxy in production; trust its forwarded headers
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
