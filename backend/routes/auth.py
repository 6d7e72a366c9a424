"""Auth endpoints -- email-only demo login kept in a signed session cookie."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import SESSION_USER_KEY, get_or_create_user, get_session_user
from backend.errors import AppError
from backend.schemas import ApiResponse, LoginRequest, LoginResult, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginResult])
async def login(
    req: LoginRequest,
    request: Request,
    session: AsyncSession = Depends(get_session),
):
    user = await get_or_create_user(session, req.email)
    request.session[SESSION_USER_KEY] = user.id
    logger.info("User %s logged in", user.id)
    return ApiResponse(
        message="Logged in",
        data=LoginResult(user_id=user.id, email=user.email),
    )


@router.get("/me", response_model=ApiResponse[UserOut])
async def me(request: Request, session: AsyncSession = Depends(get_session)):
    """Current user from the session cookie (demo fallback does not apply here)."""
    user = await get_session_user(request, session)
    if user is None:
        raise AppError(401, "Not authenticated")
    return ApiResponse(data=UserOut.model_validate(user))


@router.post("/logout", response_model=ApiResponse)
async def logout(request: Request):
    request.session.clear()
    return ApiResponse(message="Logged out")
