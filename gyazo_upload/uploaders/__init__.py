"""Uploader implementations."""

from .gyazo import UPLOAD_URL, GyazoUploader

__all__ = ["UPLOAD_URL", "GyazoUploader"]
