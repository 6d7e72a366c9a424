"""
Local storage for uploaded documents.

Files are written to UPLOAD_DIR under a random ``<uuid><ext>`` name; the
original filename only lives in the documents table.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from backend import config
from backend.errors import AppError

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    path: Path
    size: int


def upload_dir() -> Path:
    path = Path(config.UPLOAD_DIR).resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def validate_upload(content_type: str, size: int) -> None:
    if content_type not in config.ALLOWED_UPLOAD_TYPES:
        raise AppError(400, "Invalid file type. Only PDF, XLSX, and PPTX files are allowed")
    if size > config.MAX_UPLOAD_BYTES:
        max_mb = config.MAX_UPLOAD_BYTES // (1024 * 1024)
        raise AppError(400, f"File size too large. Maximum size is {max_mb}MB")


async def read_upload(upload) -> bytes:
    """
    Read an uploaded file, never more than MAX_UPLOAD_BYTES + 1 bytes.

    A declared size over the limit is rejected before anything is read.
    """
    limit = config.MAX_UPLOAD_BYTES
    declared = getattr(upload, "size", None)
    if declared is not None and declared > limit:
        validate_upload(upload.content_type, declared)
    content = await upload.read(limit + 1)
    validate_upload(upload.content_type, len(content))
    return content


def save_upload(filename: str, content: bytes) -> StoredFile:
    suffix = Path(filename or "").suffix
    target = upload_dir() / f"{uuid.uuid4()}{suffix}"
    target.write_bytes(content)
    logger.info("Stored upload %r as %s (%d bytes)", filename, target.name, len(content))
    return StoredFile(path=target, size=len(content))


def remove_file(path: str) -> bool:
    """Delete a stored file; a file that is already gone is not an error."""
    try:
        Path(path).unlink()
        return True
    except FileNotFoundError:
        logger.warning("Stored file already missing: %s", path)
        return False
