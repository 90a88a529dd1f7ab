"""Exceptions raised by the Gyazo uploader."""

from __future__ import annotations

from pathlib import Path


class GyazoError(Exception):
    """Base class for every error raised by this package."""
    pass


class FileReadError(GyazoError):
    """Exception raised when the image file cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


class TransportError(GyazoError):
    """Exception raised when the request never got a response (connection, TLS, timeout)."""
    pass


class HttpStatusError(GyazoError):
    """Exception raised when Gyazo answers with a non-success status code."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        message = f"Gyazo returned HTTP {status_code}"
        if body:
            message = f"{message} - Response: {body}"
        super().__init__(message)


class DecodeError(GyazoError):
    """Exception raised when the response body does not match the upload schema."""
    pass
