"""
Shared fixtures: the app runs against a throwaway SQLite file and upload dir.

Environment is set before anything from ``backend`` is imported, since
backend.config and backend.database read it at import time.
"""

import asyncio
import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="investify-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["DEMO_MODE"] = "true"
os.environ["SCORE_BREAKDOWN_LEGACY"] = "false"

import pytest
from fastapi.testclient import TestClient

from backend.app import app
from backend.database import Base, engine

PDF = "application/pdf"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

COMPANY = {
    "name": "Acme Robotics",
    "sector": "Hardware",
    "targetRaise": 2_000_000,
    "revenue": 500_000,
}


async def _reset_schema():
    from backend import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client():
    asyncio.run(_reset_schema())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def company(client):
    resp = client.post("/api/company", json=COMPANY)
    assert resp.status_code == 200
    return resp.json()["data"]


@pytest.fixture
def upload(client):
    """Post a document through the files endpoint."""
    def _upload(name="deck.pdf", content=b"%PDF-1.4 demo", mime=PDF):
        return client.post("/api/files", files={"file": (name, content, mime)})
    return _upload
