"""GitHub client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

GITHUB_URL = "https://github.com"
GITHUB_API_URL = "https://api.github.com"


@dataclass
class GitHubConfig:
    """Configuration for talking to github.com or a GitHub Enterprise server."""

    url: str = GITHUB_URL
    token: str = ""
    timeout: int = 30
    ssl_verify: bool = True

    @classmethod
    def from_env(cls) -> GitHubConfig:
        url = os.getenv("GITHUB_URL", GITHUB_URL).rstrip("/")
        token = os.getenv("GITHUB_TOKEN") or os.getenv("GH_TOKEN", "")
        timeout = int(os.getenv("GITHUB_TIMEOUT", "30"))
        ssl_verify = os.getenv("GITHUB_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )

        return cls(url=url, token=token, timeout=timeout, ssl_verify=ssl_verify)

    @property
    def is_enterprise(self) -> bool:
        return self.url.rstrip("/") != GITHUB_URL

    @property
    def api_url(self) -> str:
        if not self.is_enterprise:
            return GITHUB_API_URL
        return f"{self.url.rstrip('/')}/api/v3"

    def validate(self) -> None:
        if not self.url:
            msg = "GITHUB_URL must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = f"GITHUB_TIMEOUT must be positive, got {self.timeout}"
            raise ValueError(msg)
