import os

from dotenv import load_dotenv

load_dotenv(".env.local")
load_dotenv()

# Google identity configuration
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_VERIFY_TIMEOUT = float(os.getenv("GOOGLE_VERIFY_TIMEOUT", "10"))  # seconds

# ENV variables
PORT = int(os.getenv("PORT", "5000"))
USER_FRONTEND_URL = os.getenv("USER_FRONTEND_URL")
ADMIN_FRONTEND_URL = os.getenv("ADMIN_FRONTEND_URL")
CORS_RESTRICT_ORIGINS = os.getenv("CORS_RESTRICT_ORIGINS", "false").lower() in (
    "true",
    "1",
    "yes",
)


# JWT configuration
JWT_ACCESS_SECRET = os.getenv("JWT_ACCESS_SECRET", "user_access_secret")
JWT_ADMIN_ACCESS_SECRET = os.getenv("JWT_ADMIN_ACCESS_SECRET", "admin_access_secret")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")


# Cookie configuration
USER_COOKIE_NAME = os.getenv("USER_COOKIE_NAME", "userAccessToken")
ADMIN_COOKIE_NAME = os.getenv("ADMIN_COOKIE_NAME", "adminAccessToken")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(7 * 24 * 60 * 60)))  # 7 days in seconds

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"
