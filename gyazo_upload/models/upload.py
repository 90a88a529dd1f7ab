"""Upload result data model."""

from __future__ import annotations

from dataclasses import dataclass, fields

from gyazo_upload.exceptions import DecodeError


@dataclass(frozen=True)
class UploadResult:
    """Descriptor of an image Gyazo accepted."""

    created_at: str
    image_id: str
    permalink_url: str
    thumb_url: str
    type: str
    url: str

    @classmethod
    def from_json(cls, payload: object) -> UploadResult:
        """Build a result from a decoded JSON response body.

        Args:
            payload: Decoded JSON value

        Returns:
            UploadResult with every field copied as-is

        Raises:
            DecodeError: If the payload is not an object, or a required field
                is missing or not a string
        """
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        values: dict[str, str] = {}
        for field in fields(cls):
            if field.name not in payload:
                raise DecodeError(f"Missing field '{field.name}' in upload response")
            value = payload[field.name]
            if not isinstance(value, str):
                raise DecodeError(
                    f"Field '{field.name}' should be a string, got {type(value).__name__}"
                )
            values[field.name] = value

        return cls(**values)
