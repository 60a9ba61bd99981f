"""Common response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class ErrorBody(BaseModel):
    """JSON body of an API error response.

    Each field is read on its own: a mistyped ``error_id`` is dropped
    without losing ``error_text`` or ``error_info``.
    """

    error_id: str | None = None
    error_text: str | None = None
    error_info: Any = None

    @field_validator("error_id", "error_text", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None
