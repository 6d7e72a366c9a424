"""Financials endpoints -- simulated account linking and status."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import get_current_user
from backend.models import User
from backend.schemas import ApiResponse, FinancialsLinkRequest, FinancialsStatus
from backend.services import NOTIFY_FINANCIALS_LINKED, add_notification, require_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/financials", tags=["financials"])


@router.post("/link", response_model=ApiResponse[FinancialsStatus])
async def link_financials(
    req: FinancialsLinkRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """The token is only checked for presence; linking always succeeds."""
    company = await require_company(session, user.id)

    company.financials_linked = True
    add_notification(session, user.id, NOTIFY_FINANCIALS_LINKED, "Financials linked successfully")
    await session.commit()
    logger.info("Financials linked for company %s", company.id)

    return ApiResponse(
        message="Financials linked successfully",
        data=FinancialsStatus(financials_linked=True),
    )


@router.get("/status", response_model=ApiResponse[FinancialsStatus])
async def financials_status(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    company = await require_company(session, user.id)
    return ApiResponse(data=FinancialsStatus(financials_linked=bool(company.financials_linked)))
