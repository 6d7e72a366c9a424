"""
Tests for document upload, listing and deletion.
"""

import asyncio
import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend import config, storage
from backend.errors import AppError


class TestUpload:
    def test_upload_requires_company(self, upload):
        resp = upload()
        assert resp.status_code == 404

    def test_upload_pdf(self, client, company, upload):
        resp = upload(name="pitch.pdf", content=b"x" * 1024)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "File uploaded successfully"
        assert body["data"]["name"] == "pitch.pdf"
        assert body["data"]["size"] == 1024
        assert body["data"]["uploadedAt"]

        notifications = client.get("/api/notifications").json()["data"]
        assert notifications[0]["type"] == "file_uploaded"
        assert notifications[0]["message"] == 'File "pitch.pdf" uploaded successfully'

    def test_stored_under_random_name(self, client, company, upload):
        upload(name="model.xlsx", mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
        stored = os.listdir(os.environ["UPLOAD_DIR"])
        assert any(name.endswith(".xlsx") and name != "model.xlsx" for name in stored)

    def test_rejects_unknown_type(self, company, upload):
        resp = upload(name="notes.txt", content=b"hi", mime="text/plain")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid file type. Only PDF, XLSX, and PPTX files are allowed"

    def test_rejects_oversized_file(self, company, upload):
        resp = upload(content=b"0" * (5 * 1024 * 1024 + 1))
        assert resp.status_code == 400
        assert resp.json()["message"] == "File size too large. Maximum size is 5MB"

    def test_missing_file(self, client, company):
        resp = client.post("/api/files", data={"other": "field"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "No file uploaded"


class TestListAndDelete:
    def test_list_newest_first(self, client, company, upload):
        for name in ("a.pdf", "b.pdf", "c.pdf"):
            upload(name=name)
        files = client.get("/api/files").json()["data"]
        assert [f["name"] for f in files] == ["c.pdf", "b.pdf", "a.pdf"]
        assert set(files[0]) == {"id", "name", "size", "uploadedAt"}

    def test_delete(self, client, company, upload):
        file_id = upload().json()["data"]["id"]
        before = set(os.listdir(os.environ["UPLOAD_DIR"]))

        resp = client.delete(f"/api/files/{file_id}")
        assert resp.status_code == 200
        assert resp.json()["message"] == "File deleted successfully"
        assert client.get("/api/files").json()["data"] == []
        assert len(set(os.listdir(os.environ["UPLOAD_DIR"]))) == len(before) - 1

    def test_delete_invalid_id(self, client, company):
        resp = client.delete("/api/files/abc")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid file ID"

    def test_delete_unknown_id(self, client, company):
        resp = client.delete("/api/files/999")
        assert resp.status_code == 404
        assert resp.json()["message"] == "File not found"

    def test_delete_tolerates_missing_disk_file(self, client, company, upload):
        file_id = upload().json()["data"]["id"]
        for name in os.listdir(os.environ["UPLOAD_DIR"]):
            os.remove(os.path.join(os.environ["UPLOAD_DIR"], name))
        assert client.delete(f"/api/files/{file_id}").status_code == 200


class _RecordingUpload:
    """Stands in for an UploadFile and remembers how much was asked for."""

    def __init__(self, content, size=None, content_type="application/pdf"):
        self.content = content
        self.size = size
        self.content_type = content_type
        self.reads = []

    async def read(self, size=-1):
        self.reads.append(size)
        return self.content if size < 0 else self.content[:size]


class TestReadLimit:
    def test_reads_at_most_one_byte_past_limit(self):
        limit = config.MAX_UPLOAD_BYTES
        upload = _RecordingUpload(b"0" * (limit * 3))
        with pytest.raises(AppError) as exc:
            asyncio.run(storage.read_upload(upload))
        assert exc.value.status_code == 400
        assert upload.reads == [limit + 1]

    def test_declared_size_rejected_before_reading(self):
        upload = _RecordingUpload(b"", size=config.MAX_UPLOAD_BYTES + 1)
        with pytest.raises(AppError) as exc:
            asyncio.run(storage.read_upload(upload))
        assert exc.value.message == "File size too large. Maximum size is 5MB"
        assert upload.reads == []

    def test_file_at_limit_is_accepted(self):
        content = b"1" * config.MAX_UPLOAD_BYTES
        upload = _RecordingUpload(content, size=len(content))
        assert asyncio.run(storage.read_upload(upload)) == content


class TestStorageConsistency:
    def _failing_commit(self, monkeypatch):
        async def fail(self):
            raise RuntimeError("database unavailable")
        monkeypatch.setattr(AsyncSession, "commit", fail)

    def test_failed_upload_leaves_no_file(self, client, company, upload, monkeypatch):
        before = set(os.listdir(os.environ["UPLOAD_DIR"]))
        self._failing_commit(monkeypatch)
        with pytest.raises(RuntimeError):
            upload()
        assert set(os.listdir(os.environ["UPLOAD_DIR"])) == before

    def test_failed_delete_keeps_file(self, client, company, upload, monkeypatch):
        file_id = upload().json()["data"]["id"]
        before = set(os.listdir(os.environ["UPLOAD_DIR"]))
        self._failing_commit(monkeypatch)
        with pytest.raises(RuntimeError):
            client.delete(f"/api/files/{file_id}")
        assert set(os.listdir(os.environ["UPLOAD_DIR"])) == before
