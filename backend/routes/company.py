"""Company endpoint -- create / update / fetch the current user's company."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import get_session
from backend.deps import get_current_user
from backend.errors import AppError
from backend.models import Company, User
from backend.schemas import ApiResponse, CompanyCreate, CompanyDetail, CompanyOut
from backend.services import find_company, require_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/company", tags=["company"])


def _parse_company(payload: Optional[dict]) -> CompanyCreate:
    if not payload:
        raise AppError(400, "Request body cannot be empty")
    try:
        return CompanyCreate.model_validate(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise AppError(400, f"Invalid company data: {problems}")


@router.post("", response_model=ApiResponse[CompanyOut])
async def save_company(
    payload: Optional[dict] = Body(None),
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Create the user's company, or update it if one already exists."""
    body = _parse_company(payload)

    company = await find_company(session, user.id)
    created = company is None
    if created:
        company = Company(user_id=user.id)
        session.add(company)

    company.name = body.name
    company.sector = body.sector
    company.target_raise = body.target_raise
    company.revenue = body.revenue

    await session.commit()
    await session.refresh(company)
    logger.info("Company %s %s for user %s", company.id, "created" if created else "updated", user.id)

    return ApiResponse(
        message="Company created successfully" if created else "Company updated successfully",
        data=CompanyOut.model_validate(company),
    )


@router.get("", response_model=ApiResponse[CompanyDetail])
async def get_company(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    company = await require_company(session, user.id, with_related=True)
    return ApiResponse(data=CompanyDetail.model_validate(company))
