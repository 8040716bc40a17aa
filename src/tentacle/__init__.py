"""Typed requests and resources for the GitHub releases API."""

import asyncio
import json
import logging
import os
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TypeVar

import click
from dotenv import load_dotenv

from .client import GitHubClient
from .color import Color, HexColor, RGBColor
from .config import GitHubConfig
from .exceptions import (
    DecodingError,
    GitHubApiError,
    GitHubAuthError,
    GitHubError,
    GitHubNotFoundError,
)
from .models import ID, Asset, Release, Repository
from .request import Method, Request

__all__ = [
    "ID",
    "Asset",
    "Color",
    "DecodingError",
    "GitHubApiError",
    "GitHubAuthError",
    "GitHubClient",
    "GitHubConfig",
    "GitHubError",
    "GitHubNotFoundError",
    "HexColor",
    "Method",
    "RGBColor",
    "Release",
    "Repository",
    "Request",
    "main",
]

T = TypeVar("T")


def _ok(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _run(coro_fn: Callable[[GitHubClient], Awaitable[T]]) -> T:
    """Run *coro_fn(client)* with a client built from the environment."""

    async def runner() -> T:
        async with GitHubClient(GitHubConfig.from_env()) as client:
            return await coro_fn(client)

    try:
        return asyncio.run(runner())
    except GitHubError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--github-url", envvar="GITHUB_URL", help="GitHub or GitHub Enterprise URL")
@click.option("--github-token", envvar="GITHUB_TOKEN", help="GitHub personal access token")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests")
def main(github_url: str | None, github_token: str | None, verbose: bool) -> None:
    """Query GitHub releases."""
    load_dotenv()

    if github_url:
        os.environ["GITHUB_URL"] = github_url
    if github_token:
        os.environ["GITHUB_TOKEN"] = github_token

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("owner")
@click.argument("name")
def latest(owner: str, name: str) -> None:
    """Show the latest release."""
    request = Repository(owner, name).latest_release
    _ok(_run(lambda client: client.execute(request)).to_dict())


@main.command()
@click.argument("owner")
@click.argument("name")
@click.argument("tag")
def release(owner: str, name: str, tag: str) -> None:
    """Show the release for TAG."""
    request = Repository(owner, name).release(tag)
    _ok(_run(lambda client: client.execute(request)).to_dict())


@main.command()
@click.argument("owner")
@click.argument("name")
def releases(owner: str, name: str) -> None:
    """List all releases."""
    request = Repository(owner, name).releases
    _ok([r.to_dict() for r in _run(lambda client: client.execute(request))])


@main.command()
@click.argument("owner")
@click.argument("name")
@click.argument("tag")
@click.argument("asset_name")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Destination file (defaults to the asset name)",
)
def download(owner: str, name: str, tag: str, asset_name: str, output: Path | None) -> None:
    """Download ASSET_NAME from the release for TAG."""
    request = Repository(owner, name).release(tag)

    async def fetch(client: GitHubClient) -> bytes:
        found = await client.execute(request)
        for asset in found.assets:
            if asset.name == asset_name:
                return await client.download(asset)
        msg = f"Release {found.tag} has no asset named {asset_name!r}"
        raise click.ClickException(msg)

    data = _run(fetch)
    target = output or Path(asset_name)
    target.write_bytes(data)
    click.echo(f"Wrote {len(data)} bytes to {target}")


if __name__ == "__main__":
    main()
