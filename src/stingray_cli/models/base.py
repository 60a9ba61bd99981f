"""Resource contract shared by every object the client can manage.

A resource has a per-instance ``name`` and three class-level constants:
the collection ``endpoint``, the ``namespace`` it lives in and the
``content_type`` sent on writes.  Concrete kinds pick their namespace by
composing :class:`ConfigNamespace` or :class:`StatsNamespace` with
:class:`JSONResource`.
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, PrivateAttr

from stingray_cli.serialization import json_marshal

JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T", bound="JSONResource")


class Namespace(enum.Enum):
    """API sub-tree a resource belongs to."""

    CONFIGURATION = "config"
    STATISTICS = "statistics"


@runtime_checkable
class Resourcer(Protocol):
    """Capabilities the client needs from a resource."""

    endpoint: ClassVar[str]
    namespace: ClassVar[Namespace]
    content_type: ClassVar[str]

    @property
    def name(self) -> str: ...

    def set_name(self, name: str) -> None: ...

    def encode(self) -> bytes: ...

    def decode(self, data: bytes) -> None: ...


class ConfigNamespace:
    """Places a resource under the configuration namespace."""

    namespace: ClassVar[Namespace] = Namespace.CONFIGURATION


class StatsNamespace:
    """Places a resource under the statistics namespace."""

    namespace: ClassVar[Namespace] = Namespace.STATISTICS


class JSONResource(BaseModel):
    """A resource whose body is a JSON document.

    Subclasses set ``endpoint`` and mix in a namespace.  Field aliases carry
    the wire names; unset optional fields are left out of the encoded body.
    """

    model_config = ConfigDict(populate_by_name=True)

    content_type: ClassVar[str] = JSON_CONTENT_TYPE
    endpoint: ClassVar[str] = ""

    _name: str = PrivateAttr(default="")

    @classmethod
    def new(cls: type[T], name: str, **data: Any) -> T:
        """Create a resource called *name*, with optional field values."""
        resource = cls(**data)
        resource.set_name(name)
        return resource

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def encode(self) -> bytes:
        return json_marshal(self.to_dict())

    def decode(self, data: bytes) -> None:
        """Populate this instance in place from a JSON body.

        Raises :class:`pydantic.ValidationError` when *data* is not JSON or
        does not match the model; the instance is left untouched then.
        """
        parsed = self.model_validate_json(data)
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(parsed, field_name))

    def __str__(self) -> str:
        return self.encode().decode("utf-8")


class JSONConfigResource(ConfigNamespace, JSONResource):
    """JSON resource in the configuration namespace."""


class JSONStatsResource(StatsNamespace, JSONResource):
    """JSON resource in the statistics namespace (read-only on the appliance)."""

