"""GitHub API exceptions."""

from __future__ import annotations


class GitHubError(Exception):
    """Base exception for GitHub operations."""


class GitHubApiError(GitHubError):
    """Raised when the GitHub API returns a non-success response."""

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"GitHub API Error {status_code} {status_text}: {body}")


class GitHubAuthError(GitHubApiError):
    """Raised on 401/403 authentication failures."""

    def __init__(self, status_code: int, body: str = "") -> None:
        status_text = "Unauthorized" if status_code == 401 else "Forbidden"
        super().__init__(status_code, status_text, body)


class GitHubNotFoundError(GitHubApiError):
    """Raised on 404 responses: the requested resource does not exist.

    GitHub answers 404 both for a missing release and for a missing tag,
    so the two cases cannot be told apart here.
    """

    def __init__(self, body: str = "") -> None:
        super().__init__(404, "Not Found", body)


class DecodingError(GitHubError):
    """Raised when a JSON payload cannot be decoded into a resource."""

    def __init__(self, entity: str, detail: str) -> None:
        self.entity = entity
        self.detail = detail
        super().__init__(f"Failed to decode {entity}: {detail}")
