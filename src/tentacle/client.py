"""GitHub API client using httpx."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx

from .config import GitHubConfig
from .exceptions import GitHubApiError, GitHubAuthError, GitHubNotFoundError
from .models import Asset, decode_resource
from .request import Request

T = TypeVar("T")

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async executor for :class:`~tentacle.request.Request` values."""

    def __init__(self, config: GitHubConfig | None = None) -> None:
        self.config = config or GitHubConfig.from_env()
        self.config.validate()
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "tentacle",
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        self._client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers=headers,
            timeout=self.config.timeout,
            verify=self.config.ssl_verify,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.status_code in (401, 403):
            raise GitHubAuthError(resp.status_code, resp.text)
        if resp.status_code == 404:
            raise GitHubNotFoundError(resp.text)
        if not resp.is_success:
            raise GitHubApiError(resp.status_code, resp.reason_phrase or "", resp.text)

    async def _send(self, method: str, path: str) -> Any:
        """Make an API request and return the parsed JSON body."""
        logger.debug("%s %s", method, path)
        resp = await self._client.request(method, path)
        self._raise_for_status(resp)

        if resp.status_code == 204 or not resp.content:
            return None

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response, check URL and authentication"
            raise GitHubApiError(resp.status_code, msg, resp.text[:500])

        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise GitHubApiError(
                resp.status_code,
                f"JSON parse error: {e}",
                resp.text[:500],
            ) from e

    async def execute(self, request: Request[T]) -> T:
        """Send *request* and decode the response into its result type."""
        payload = await self._send(request.method.value, request.path)
        return decode_resource(request.response_type, payload)

    async def download(self, asset: Asset) -> bytes:
        """Download *asset* through the API, following the storage redirect."""
        logger.debug("Downloading %s from %s", asset.name, asset.api_url)
        resp = await self._client.get(
            str(asset.api_url),
            headers={"Accept": "application/octet-stream"},
            follow_redirects=True,
        )
        self._raise_for_status(resp)
        return resp.content
