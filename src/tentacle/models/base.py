"""Base model and identifiers for GitHub API resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Generic, Self, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, GetCoreSchemaHandler, ValidationError
from pydantic_core import core_schema

from ..exceptions import DecodingError

T = TypeVar("T")

WIRE_CONTEXT = {"wire": True}


class ID(Generic[T]):
    """The identifier of a resource of kind ``T``.

    ``T`` only exists for the type checker: ``ID[Release]`` and ``ID[Asset]``
    cannot be compared with each other even if their raw values match.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: int | str) -> None:
        self._raw = raw

    @property
    def raw(self) -> int | str:
        return self._raw

    def __eq__(self, other: ID[T]) -> bool:  # type: ignore[override]
        if not isinstance(other, ID):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"ID({self._raw!r})"

    def __str__(self) -> str:
        return str(self._raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        raw_schema = core_schema.union_schema(
            [core_schema.int_schema(strict=True), core_schema.str_schema(strict=True)]
        )
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_after_validator_function(cls, raw_schema),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.raw),
        )


class GitHubModel(BaseModel):
    """Immutable resource decoded from a GitHub API response.

    Subclasses list every field in ``wire_keys`` (field name -> JSON key).
    ``decode`` only reads those keys; fields in ``nullable_fields`` may be
    missing or null, every other key is required.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wire_keys: ClassVar[dict[str, str]] = {}
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def decode(cls, payload: Any) -> Self:
        """Decode a wire-format JSON object, failing as a whole on any error."""
        if not isinstance(payload, Mapping):
            raise DecodingError(
                cls.__name__, f"expected a JSON object, got {type(payload).__name__}"
            )

        data: dict[str, Any] = {}
        missing = []
        for field, key in cls.wire_keys.items():
            if key in payload:
                data[field] = payload[key]
            elif field in cls.nullable_fields:
                data[field] = None
            else:
                missing.append(key)
        if missing:
            raise DecodingError(cls.__name__, f"missing key(s): {', '.join(missing)}")

        try:
            return cls.model_validate(data, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise DecodingError(cls.__name__, cls._describe(e)) from e
        except DecodingError as e:
            raise DecodingError(cls.__name__, str(e)) from e

    @classmethod
    def _describe(cls, error: ValidationError) -> str:
        """Render validation errors using wire keys rather than field names."""
        parts = []
        for detail in error.errors():
            loc = [str(p) for p in detail["loc"]]
            if loc and loc[0] in cls.wire_keys:
                loc[0] = cls.wire_keys[loc[0]]
            parts.append(f"{'.'.join(loc)}: {detail['msg']}")
        return "; ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def decode_resource(response_type: Any, payload: Any) -> Any:
    """Decode *payload* into ``Model`` or ``list[Model]``."""
    if get_origin(response_type) is list:
        (item_type,) = get_args(response_type)
        if not isinstance(payload, list):
            raise DecodingError(
                f"list[{item_type.__name__}]",
                f"expected a JSON array, got {type(payload).__name__}",
            )
        return [item_type.decode(item) for item in payload]
    return response_type.decode(payload)
