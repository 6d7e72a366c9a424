"""Notifications endpoints -- list, mark read, unread count."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import get_current_user
from backend.errors import AppError, parse_id
from backend.models import Notification, User
from backend.schemas import ApiResponse, NotificationOut, UnreadCount
from backend.services import utcnow

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=ApiResponse[list[NotificationOut]])
async def list_notifications(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    rows = (
        await session.execute(
            select(Notification)
            .where(Notification.user_id == user.id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
    ).scalars().all()
    return ApiResponse(data=[NotificationOut.model_validate(n) for n in rows])


@router.patch("/read-all", response_model=ApiResponse)
async def mark_all_read(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    await session.execute(
        update(Notification)
        .where(Notification.user_id == user.id, Notification.read_at.is_(None))
        .values(read_at=utcnow())
    )
    await session.commit()
    return ApiResponse(message="All notifications marked as read")


@router.patch("/{notification_id}/read", response_model=ApiResponse)
async def mark_read(
    notification_id: str,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    nid = parse_id(notification_id, "notification")
    notification = (
        await session.execute(
            select(Notification).where(Notification.id == nid, Notification.user_id == user.id)
        )
    ).scalar_one_or_none()
    if notification is None:
        raise AppError(404, "Notification not found")

    notification.read_at = utcnow()
    await session.commit()
    return ApiResponse(message="Notification marked as read")


@router.get("/unread-count", response_model=ApiResponse[UnreadCount])
async def unread_count(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    count = (
        await session.execute(
            select(func.count(Notification.id))
            .where(Notification.user_id == user.id, Notification.read_at.is_(None))
        )
    ).scalar() or 0
    return ApiResponse(data=UnreadCount(count=count))
