"""Requests as plain values, executed elsewhere."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request(Generic[T]):
    """An API call whose response body decodes into ``T``.

    ``response_type`` is the runtime form of ``T`` (``Release``,
    ``list[Release]``); it takes no part in equality.
    """

    method: Method
    path: str
    response_type: Any = field(compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"
