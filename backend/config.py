# Settings from environment variables (.env locally, Railway Variables in deploy).

import os
from dotenv import load_dotenv

load_dotenv()


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    s = _env(key)
    if not s:
        return default
    return s.lower() in ("1", "true", "yes")


def _env_int(key: str, default: int) -> int:
    s = _env(key)
    if not s:
        return default
    try:
        return int(s)
    except ValueError:
        return default


def _env_list(key: str, default: list = None) -> list:
    s = _env(key)
    if not s:
        return default or []
    result = [x.strip() for x in s.split(",") if x.strip()]
    return result if result else (default or [])


# ============================================================================
# Server
# ============================================================================
APP_ENV = _env("APP_ENV", "development")
IS_PRODUCTION = APP_ENV.lower() == "production"
HOST = _env("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3001)
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = _env_list("CORS_ORIGINS", ["http://localhost:3000", "http://localhost:3001"])

# ============================================================================
# Sessions
# ============================================================================
SESSION_SECRET = _env("SESSION_SECRET", _env("COOKIE_SECRET", "dev-secret"))
SESSION_COOKIE = "session"
SESSION_MAX_AGE = _env_int("SESSION_MAX_AGE", 60 * 60 * 24 * 7)

# Requests without a session act as this user while demo mode is on
DEMO_MODE = _env_bool("DEMO_MODE", True)
DEMO_USER_EMAIL = _env("DEMO_USER_EMAIL", "demo@investify.com").lower()

# ============================================================================
# Uploads
# ============================================================================
UPLOAD_DIR = _env("UPLOAD_DIR", "uploads")
MAX_UPLOAD_BYTES = _env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)
ALLOWED_UPLOAD_TYPES = {
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

# ============================================================================
# Scoring
# ============================================================================
# Serve /score/breakdown with the first dashboard's flat 8.33 points per document
SCORE_BREAKDOWN_LEGACY = _env_bool("SCORE_BREAKDOWN_LEGACY", False)
