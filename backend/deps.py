"""Per-request identity.

The requesting user comes from the signed session cookie set at login. While
DEMO_MODE is on, anonymous requests act as the demo user so the onboarding
wizard works without logging in. Routes pass ``user.id`` on explicitly.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend import config
from backend.database import get_session
from backend.errors import AppError
from backend.models import User

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


async def get_or_create_user(session: AsyncSession, email: str) -> User:
    email = email.strip().lower()
    user = (
        await session.execute(select(User).where(User.email == email))
    ).scalar_one_or_none()
    if user is not None:
        return user

    user = User(email=email)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        # a concurrent request inserted the same email first
        await session.rollback()
        return (
            await session.execute(select(User).where(User.email == email))
        ).scalar_one()

    logger.info("Created user %s (id=%s)", email, user.id)
    return user


async def get_session_user(request: Request, session: AsyncSession) -> Optional[User]:
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    user = await session.get(User, int(user_id))
    if user is None:
        # cookie outlived its user (e.g. database was reset)
        request.session.pop(SESSION_USER_KEY, None)
    return user


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> User:
    user = await get_session_user(request, session)
    if user is not None:
        return user
    if config.DEMO_MODE:
        return await get_or_create_user(session, config.DEMO_USER_EMAIL)
    raise AppError(401, "Not authenticated")
