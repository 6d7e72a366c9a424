"""Score endpoints -- investability score and its per-category breakdown."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend import config
from backend.database import get_session
from backend.deps import get_current_user
from backend.models import User
from backend.schemas import ApiResponse, BreakdownData, ScoreData
from backend.services import load_snapshot
from scoring import compute_breakdown, compute_score

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/score", tags=["score"])


@router.get("", response_model=ApiResponse[ScoreData], response_model_exclude_none=True)
async def get_score(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    snapshot = await load_snapshot(session, user.id)
    result = compute_score(snapshot)
    logger.debug("Score for user %s: %s %s", user.id, result.score, result.reasons)
    return ApiResponse(data=ScoreData(score=result.score, reasons=result.reasons))


@router.get(
    "/breakdown",
    response_model=ApiResponse[BreakdownData],
    response_model_exclude_none=True,
)
async def get_score_breakdown(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Points per category. Unless SCORE_BREAKDOWN_LEGACY is set the points
    add up to exactly the score returned by GET /score.
    """
    snapshot = await load_snapshot(session, user.id)
    breakdown = compute_breakdown(snapshot, legacy=config.SCORE_BREAKDOWN_LEGACY)
    return ApiResponse(data=BreakdownData.model_validate(breakdown))
