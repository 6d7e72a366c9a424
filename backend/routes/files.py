"""Files endpoints -- upload, list and delete the company's documents."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend import storage
from backend.database import get_session
from backend.deps import get_current_user
from backend.errors import AppError, parse_id
from backend.models import Document, User
from backend.schemas import ApiResponse, FileInfo
from backend.services import NOTIFY_FILE_UPLOADED, add_notification, require_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["files"])


def _file_info(doc: Document) -> FileInfo:
    return FileInfo(id=doc.id, name=doc.name, size=doc.size, uploaded_at=doc.created_at)


@router.post("", response_model=ApiResponse[FileInfo])
async def upload_file(
    file: Optional[UploadFile] = File(None),
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    company = await require_company(session, user.id)

    if file is None:
        raise AppError(400, "No file uploaded")

    content = await storage.read_upload(file)
    stored = storage.save_upload(file.filename, content)

    doc = Document(
        company_id=company.id,
        name=file.filename,
        mime_type=file.content_type,
        size=stored.size,
        path=str(stored.path),
    )
    try:
        session.add(doc)
        add_notification(
            session, user.id, NOTIFY_FILE_UPLOADED, f'File "{file.filename}" uploaded successfully'
        )
        await session.commit()
    except Exception:
        # no row will point at the stored file
        storage.remove_file(str(stored.path))
        raise
    await session.refresh(doc)

    return ApiResponse(message="File uploaded successfully", data=_file_info(doc))


@router.get("", response_model=ApiResponse[list[FileInfo]])
async def list_files(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Newest upload first."""
    company = await require_company(session, user.id)
    docs = (
        await session.execute(
            select(Document)
            .where(Document.company_id == company.id)
            .order_by(Document.created_at.desc(), Document.id.desc())
        )
    ).scalars().all()
    return ApiResponse(data=[_file_info(d) for d in docs])


@router.delete("/{file_id}", response_model=ApiResponse)
async def delete_file(
    file_id: str,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    document_id = parse_id(file_id, "file")
    company = await require_company(session, user.id)

    doc = (
        await session.execute(
            select(Document).where(Document.id == document_id, Document.company_id == company.id)
        )
    ).scalar_one_or_none()
    if doc is None:
        raise AppError(404, "File not found")

    await session.delete(doc)
    await session.commit()
    storage.remove_file(doc.path)
    logger.info("Deleted document %s of company %s", doc.id, company.id)

    return ApiResponse(message="File deleted successfully")
