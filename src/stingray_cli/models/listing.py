"""Listing responses returned for a bare collection endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResourceLink(BaseModel):
    """One entry of a collection listing."""

    name: str
    href: str | None = None


class ResourceList(BaseModel):
    """``{"children": [{"name": ..., "href": ...}, ...]}``"""

    children: list[ResourceLink] = Field(default_factory=list)

    def names(self) -> list[str]:
        return [child.name for child in self.children]
