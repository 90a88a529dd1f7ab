"""Gyazo upload API implementation."""

from __future__ import annotations

import mimetypes
from pathlib import Path
import requests
from requests.exceptions import RequestException
from requests_toolbelt.multipart.encoder import MultipartEncoder
from rich.console import Console
from rich.markup import escape

from gyazo_upload.config import DEFAULT_TIMEOUT, check_timeout, load_settings
from gyazo_upload.exceptions import (
    DecodeError,
    FileReadError,
    HttpStatusError,
    TransportError,
)
from gyazo_upload.models.options import UploadOptions
from gyazo_upload.models.upload import UploadResult

UPLOAD_URL = "https://upload.gyazo.com/api/upload"


class GyazoUploader:
    """Uploads single images to Gyazo."""

    def __init__(
        self,
        access_token: str,
        session: requests.Session | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        console: Console | None = None,
    ) -> None:
        """Initialize the uploader.

        Args:
            access_token: Gyazo API access token
            session: HTTP session to send requests through. If None, a new one
                is created and owned by this uploader.
            timeout: Default request timeout in seconds, None for no timeout
            console: Rich console for status output. If None, nothing is printed.

        Raises:
            ValueError: If the token is empty or the timeout is not above zero
        """
        if not access_token:
            raise ValueError("A Gyazo access token is required")

        self.access_token: str = access_token
        self.upload_url: str = UPLOAD_URL
        self.timeout: float | None = check_timeout(timeout)
        self.console: Console | None = console
        self._owns_session: bool = session is None
        self.session: requests.Session = session or requests.Session()

    @classmethod
    def from_env(
        cls,
        env_file: Path | None = None,
        session: requests.Session | None = None,
        console: Console | None = None,
    ) -> GyazoUploader:
        """Create an uploader from GYAZO_ACCESS_TOKEN / GYAZO_TIMEOUT.

        Raises:
            ValueError: If the access token is not configured
        """
        settings = load_settings(env_file)
        if not settings.access_token:
            raise ValueError(
                "GYAZO_ACCESS_TOKEN not found in environment variables. "
                + "Please add it to your .env file."
            )
        return cls(
            settings.access_token,
            session=session,
            timeout=settings.timeout,
            console=console,
        )

    def close(self) -> None:
        """Close the HTTP session if this uploader created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> GyazoUploader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _log(self, message: str) -> None:
        if self.console is not None:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def build_form_fields(
        self,
        file_path: Path | str,
        content: bytes,
        options: UploadOptions | None = None,
    ) -> list[tuple[str, object]]:
        """Assemble the multipart fields for an upload.

        Args:
            file_path: Path of the image; its string form is sent as the filename
            content: Raw image bytes
            options: Optional upload metadata

        Returns:
            Field list suitable for MultipartEncoder
        """
        filename = str(file_path)
        mime_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"

        form_fields: list[tuple[str, object]] = [
            ("access_token", self.access_token),
            ("imagedata", (filename, content, mime_type)),
        ]
        if options is not None:
            form_fields.extend(options.to_form_fields())
        return form_fields

    def _make_request(
        self,
        data: MultipartEncoder,
        timeout: float | None,
    ) -> requests.Response:
        """Send the encoded form to the upload endpoint.

        Raises:
            TransportError: If no response was received
            HttpStatusError: If the status code is not 2xx
        """
        headers = {"Content-Type": data.content_type}

        try:
            response = self.session.post(
                self.upload_url,
                data=data,
                headers=headers,
                timeout=timeout,
            )
        except RequestException as e:
            raise TransportError(f"Upload request to {self.upload_url} failed: {e}") from e

        self._log(f"Gyazo responded with HTTP {response.status_code}")
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, response.text)
        return response

    def upload(
        self,
        file_path: Path | str,
        options: UploadOptions | None = None,
        timeout: float | None = None,
    ) -> UploadResult:
        """Upload one image to Gyazo.

        Args:
            file_path: Path to the image file
            options: Optional upload metadata
            timeout: Timeout in seconds for this call, overriding the uploader default

        Returns:
            UploadResult describing the uploaded image

        Raises:
            FileReadError: If the file cannot be read (no request is sent)
            TransportError: If the request fails before a response arrives
            HttpStatusError: If Gyazo answers with a non-2xx status
            DecodeError: If the response body is not a valid upload descriptor
            ValueError: If the timeout is not above zero
        """
        request_timeout = self.timeout if timeout is None else check_timeout(timeout)

        try:
            content = Path(file_path).read_bytes()
        except OSError as e:
            raise FileReadError(file_path, e.strerror or str(e)) from e

        self._log(f"Uploading {file_path} ({len(content)} bytes) to Gyazo")

        data = MultipartEncoder(fields=self.build_form_fields(file_path, content, options))
        response = self._make_request(data, request_timeout)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Upload response is not valid JSON: {e}") from e

        return UploadResult.from_json(payload)
