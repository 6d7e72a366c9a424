"""KYC endpoints -- simulated verification (always succeeds) and status."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import get_current_user
from backend.models import User
from backend.schemas import ApiResponse, KycStatus
from backend.services import NOTIFY_KYC_COMPLETED, add_notification, require_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kyc", tags=["kyc"])


@router.post("/verify", response_model=ApiResponse[KycStatus])
async def verify_kyc(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    company = await require_company(session, user.id)

    company.kyc_verified = True
    add_notification(
        session, user.id, NOTIFY_KYC_COMPLETED, "KYC verification completed successfully"
    )
    await session.commit()
    logger.info("KYC verified for company %s", company.id)

    return ApiResponse(message="KYC verification completed", data=KycStatus(verified=True))


@router.get("/status", response_model=ApiResponse[KycStatus])
async def kyc_status(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    company = await require_company(session, user.id)
    return ApiResponse(data=KycStatus(verified=bool(company.kyc_verified)))
