"""Shared fixtures for uploader tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from gyazo_upload.uploaders.gyazo import GyazoUploader

ACCESS_TOKEN = "test-token"

UPLOAD_PAYLOAD = {
    "created_at": "2024-05-01T12:00:00+0000",
    "image_id": "8980c52421e452ac3355ca3e5cfe7a0c",
    "permalink_url": "https://gyazo.com/8980c52421e452ac3355ca3e5cfe7a0c",
    "thumb_url": "https://i.gyazo.com/thumb/180/_ebb000813817aad8ab8fa5b8a0cc9a4d.png",
    "type": "png",
    "url": "https://i.gyazo.com/8980c52421e452ac3355ca3e5cfe7a0c.png",
}


def make_response(status_code: int = 200, body: object = None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(UPLOAD_PAYLOAD if body is None else body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """A small PNG-looking file on disk."""
    path = tmp_path / "screenshot.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-data")
    return path


@pytest.fixture
def session() -> MagicMock:
    """Session stand-in answering every POST with a successful upload."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.post.return_value = make_response()
    return mock_session


@pytest.fixture
def uploader(session: MagicMock) -> GyazoUploader:
    return GyazoUploader(ACCESS_TOKEN, session=session)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove Gyazo variables from the environment, restoring them afterwards."""
    for name in ("GYAZO_ACCESS_TOKEN", "GYAZO_TIMEOUT"):
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
