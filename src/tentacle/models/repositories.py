"""Repository identity and the release requests built from it."""

from __future__ import annotations

from dataclasses import dataclass

from ..request import Method, Request
from .releases import Release


@dataclass(frozen=True)
class Repository:
    """A repository on GitHub, identified by owner and name.

    Neither part is validated or escaped when building request paths.
    """

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def latest_release(self) -> Request[Release]:
        """The latest release of the repository.

        Executing this for a repository without releases raises
        ``GitHubNotFoundError``.

        https://docs.github.com/rest/releases/releases#get-the-latest-release
        """
        return Request(Method.GET, f"/repos/{self.owner}/{self.name}/releases/latest", Release)

    def release(self, tag: str) -> Request[Release]:
        """The release for *tag*.

        A tag without a release and a tag that does not exist both raise
        ``GitHubNotFoundError``; there is no way to tell them apart.

        https://docs.github.com/rest/releases/releases#get-a-release-by-tag-name
        """
        return Request(
            Method.GET, f"/repos/{self.owner}/{self.name}/releases/tags/{tag}", Release
        )

    @property
    def releases(self) -> Request[list[Release]]:
        """All releases, in the order GitHub returns them.

        https://docs.github.com/rest/releases/releases#list-releases
        """
        return Request(Method.GET, f"/repos/{self.owner}/{self.name}/releases", list[Release])
