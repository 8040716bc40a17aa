"""Shared test fixtures for tentacle."""

from __future__ import annotations

from typing import Any

import pytest
import respx

API_URL = "https://api.github.com"


def asset_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 7,
        "name": "widget.tar.gz",
        "content_type": "application/gzip",
        "browser_download_url": "https://github.com/acme/widget/releases/download/v1.0/widget.tar.gz",
        "url": "https://api.github.com/repos/acme/widget/releases/assets/7",
    }
    payload.update(overrides)
    return payload


def release_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 1,
        "draft": False,
        "prerelease": False,
        "tag_name": "v1.0",
        "name": "First",
        "html_url": "https://github.com/acme/widget/releases/tag/v1.0",
        "assets": [],
        "published_at": "2020-01-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=API_URL) as router:
        yield router
