"""Upload options data model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class AccessPolicy(str, Enum):
    """Visibility of an uploaded image."""

    ANYONE = "anyone"
    ONLY_ME = "only_me"


def render_form_value(value: object) -> str:
    """Render an option value as the text Gyazo expects in a form field."""
    if isinstance(value, AccessPolicy):
        return value.value
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # plain decimal notation, never an exponent
        return format(Decimal(repr(value)), "f")
    return str(value)


@dataclass
class UploadOptions:
    """Optional metadata sent along with an upload.

    Every field defaults to ``None``; unset fields are left out of the
    request so the server applies its own defaults.
    """

    # anyone (server default) or only_me
    access_policy: AccessPolicy | None = None
    metadata_is_public: bool | None = None
    # URL of the page captured in the image
    referer_url: str | None = None
    # application used to capture the image
    app: str | None = None
    title: str | None = None
    desc: str | None = None
    # Unix time, seconds
    created_at: float | None = None
    # must be owned by or shared with the uploader
    collection_id: str | None = None

    FIELD_ORDER = (
        "access_policy",
        "metadata_is_public",
        "referer_url",
        "app",
        "title",
        "desc",
        "created_at",
        "collection_id",
    )

    def __post_init__(self) -> None:
        if self.created_at is not None and not math.isfinite(self.created_at):
            raise ValueError(f"created_at must be a finite Unix time, got {self.created_at}")

    def to_form_fields(self) -> list[tuple[str, str]]:
        """Get the text form fields for every populated option.

        Returns:
            List of (field name, text value) pairs in a fixed order
        """
        form_fields: list[tuple[str, str]] = []
        for name in self.FIELD_ORDER:
            value = getattr(self, name)
            if value is not None:
                form_fields.append((name, render_form_value(value)))
        return form_fields
