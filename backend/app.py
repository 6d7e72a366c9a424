"""
FastAPI application -- Investify onboarding API server.

Run locally:
    uvicorn backend.app:app --reload --port 3001

On Railway railway_start.py creates the schema and launches uvicorn.
"""

from __future__ import annotations

import datetime as dt
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from backend import config
from backend.database import init_db
from backend.errors import register_error_handlers
from backend.routes import (
    auth,
    company,
    files,
    financials,
    kyc,
    messages,
    notifications,
    score,
)
from backend.storage import upload_dir

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialise database schema
    await init_db()
    logger.info("Database ready, uploads in %s", upload_dir())

    yield


app = FastAPI(
    title="Investify API",
    version="1.0.0",
    description="Investment onboarding -- company profile, KYC, financials, data room, investability score",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    same_site="lax",
    https_only=config.IS_PRODUCTION,
)

register_error_handlers(app)

for module in (auth, company, kyc, financials, files, score, notifications, messages):
    app.include_router(module.router, prefix="/api")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(),
    }
