"""GitHub resource models."""

from .base import ID, GitHubModel, decode_resource
from .releases import Asset, Release
from .repositories import Repository

__all__ = ["ID", "Asset", "GitHubModel", "Release", "Repository", "decode_resource"]
