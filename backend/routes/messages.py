"""Chat endpoints -- the company's message thread."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import get_current_user
from backend.errors import AppError
from backend.models import Message, User
from backend.schemas import ApiResponse, MessageCreate, MessageOut
from backend.services import require_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=ApiResponse[list[MessageOut]])
async def list_messages(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Oldest first, as a chat reads."""
    company = await require_company(session, user.id)
    rows = (
        await session.execute(
            select(Message)
            .where(Message.company_id == company.id)
            .order_by(Message.created_at, Message.id)
        )
    ).scalars().all()
    return ApiResponse(data=[MessageOut.model_validate(m) for m in rows])


@router.post("", response_model=ApiResponse[MessageOut])
async def send_message(
    req: MessageCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    if not req.sender or not req.text:
        raise AppError(400, "Sender and text are required")

    company = await require_company(session, user.id)
    message = Message(company_id=company.id, sender=req.sender, text=req.text)
    session.add(message)
    await session.commit()
    await session.refresh(message)
    logger.debug("Message %s from %s in company %s", message.id, req.sender, company.id)

    return ApiResponse(message="Message sent successfully", data=MessageOut.model_validate(message))
