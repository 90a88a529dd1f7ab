"""Client for the Gyazo image upload API."""

from .exceptions import (
    DecodeError,
    FileReadError,
    GyazoError,
    HttpStatusError,
    TransportError,
)
from .models import AccessPolicy, UploadOptions, UploadResult
from .uploaders import UPLOAD_URL, GyazoUploader

__version__ = "0.1.0"

__all__ = [
    "UPLOAD_URL",
    "AccessPolicy",
    "DecodeError",
    "FileReadError",
    "GyazoError",
    "GyazoUploader",
    "HttpStatusError",
    "TransportError",
    "UploadOptions",
    "UploadResult",
]
