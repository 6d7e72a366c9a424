"""Data access shared by the routes: company lookup, notifications, score snapshots."""

from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.errors import AppError
from backend.models import Company, Document, Notification
from scoring import CompanySnapshot

logger = logging.getLogger(__name__)

NOTIFY_KYC_COMPLETED = "kyc_completed"
NOTIFY_FINANCIALS_LINKED = "financials_linked"
NOTIFY_FILE_UPLOADED = "file_uploaded"


def utcnow() -> dt.datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


async def find_company(
    session: AsyncSession,
    user_id: int,
    with_related: bool = False,
):
    stmt = select(Company).where(Company.user_id == user_id).order_by(Company.id).limit(1)
    if with_related:
        stmt = stmt.options(selectinload(Company.documents), selectinload(Company.messages))
    return (await session.execute(stmt)).scalar_one_or_none()


async def require_company(
    session: AsyncSession,
    user_id: int,
    with_related: bool = False,
) -> Company:
    """The user's company, or a 404 AppError."""
    company = await find_company(session, user_id, with_related=with_related)
    if company is None:
        raise AppError(404, "Company not found")
    return company


async def count_documents(session: AsyncSession, company_id: int) -> int:
    count = (
        await session.execute(
            select(func.count(Document.id)).where(Document.company_id == company_id)
        )
    ).scalar()
    return count or 0


async def load_snapshot(session: AsyncSession, user_id: int) -> CompanySnapshot:
    """Everything the scorer needs about the user's company."""
    company = await require_company(session, user_id)
    return CompanySnapshot(
        kyc_verified=bool(company.kyc_verified),
        financials_linked=bool(company.financials_linked),
        document_count=await count_documents(session, company.id),
        revenue=company.revenue or 0,
    )


def add_notification(session: AsyncSession, user_id: int, type_: str, message: str) -> Notification:
    """Queue a notification on the session; the caller commits."""
    notification = Notification(user_id=user_id, type=type_, message=message)
    session.add(notification)
    return notification
