"""Tests for exceptions."""

from tentacle.exceptions import (
    DecodingError,
    GitHubApiError,
    GitHubAuthError,
    GitHubError,
    GitHubNotFoundError,
)


def test_api_error():
    e = GitHubApiError(500, "Internal Server Error", "something broke")
    assert e.status_code == 500
    assert "500" in str(e)
    assert "something broke" in str(e)


def test_auth_error_401():
    e = GitHubAuthError(401)
    assert e.status_code == 401
    assert "Unauthorized" in str(e)


def test_auth_error_403():
    e = GitHubAuthError(403)
    assert e.status_code == 403
    assert "Forbidden" in str(e)


def test_not_found_error():
    e = GitHubNotFoundError('{"message": "Not Found"}')
    assert e.status_code == 404
    assert isinstance(e, GitHubApiError)


def test_decoding_error():
    e = DecodingError("Release", "missing key(s): tag_name")
    assert e.entity == "Release"
    assert e.detail == "missing key(s): tag_name"
    assert str(e) == "Failed to decode Release: missing key(s): tag_name"
    assert isinstance(e, GitHubError)
    assert not isinstance(e, ValueError)
