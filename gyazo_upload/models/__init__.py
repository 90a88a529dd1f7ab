"""Data models for the Gyazo uploader."""

from .options import AccessPolicy, UploadOptions
from .upload import UploadResult

__all__ = ["AccessPolicy", "UploadOptions", "UploadResult"]
