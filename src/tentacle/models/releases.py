"""Release and release asset models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator,
    HttpUrl,
    StrictBool,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .base import GitHubModel, ID


def _check_url(value: str) -> str:
    try:
        HttpUrl(value)
    except ValidationError as e:
        msg = f"invalid URL: {value!r}"
        raise ValueError(msg) from e
    return value


# Validated as an http(s) URL but kept exactly as sent, so "https://x" and
# "https://x/" stay distinct.
URL = Annotated[StrictStr, AfterValidator(_check_url)]


class Asset(GitHubModel):
    """A file attached to a release.

    ``url`` is the direct browser download link; ``api_url`` downloads the
    same file through the API (GitHub calls that one ``url``).
    """

    wire_keys: ClassVar[dict[str, str]] = {
        "id": "id",
        "name": "name",
        "content_type": "content_type",
        "url": "browser_download_url",
        "api_url": "url",
    }

    id: ID[Asset]
    name: StrictStr
    content_type: StrictStr
    url: URL
    api_url: URL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.id == other.id and self.url == other.url

    def __hash__(self) -> int:
        return hash((self.id, self.url))

    def __str__(self) -> str:
        return str(self.url)


class Release(GitHubModel):
    """A published (or draft) release of a repository."""

    wire_keys: ClassVar[dict[str, str]] = {
        "id": "id",
        "is_draft": "draft",
        "is_prerelease": "prerelease",
        "tag": "tag_name",
        "name": "name",
        "url": "html_url",
        "assets": "assets",
        "published_at": "published_at",
    }
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    id: ID[Release]
    tag: StrictStr
    url: URL
    name: StrictStr | None = None
    is_draft: StrictBool = False
    is_prerelease: StrictBool = False
    assets: tuple[Asset, ...]
    published_at: datetime

    @field_validator("published_at", mode="before")
    @classmethod
    def parse_published_at(cls, value: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get("wire")):
            return value
        if not isinstance(value, str) or "T" not in value:
            msg = f"expected an ISO-8601 timestamp, got {value!r}"
            raise ValueError(msg)
        return datetime.fromisoformat(value)

    @field_validator("assets", mode="before")
    @classmethod
    def decode_assets(cls, value: Any, info: ValidationInfo) -> Any:
        if info.context and info.context.get("wire") and isinstance(value, list):
            return [Asset.decode(item) for item in value]
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Release):
            return NotImplemented
        return (
            self.id == other.id
            and self.tag == other.tag
            and self.url == other.url
            and self.name == other.name
            and self.is_draft == other.is_draft
            and self.is_prerelease == other.is_prerelease
            and self.assets == other.assets
        )

    def __hash__(self) -> int:
        return hash(
            (self.id, self.tag, self.url, self.name, self.is_draft, self.is_prerelease, self.assets)
        )

    def __str__(self) -> str:
        return str(self.url)
