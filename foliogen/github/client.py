"""Thin GitHub REST client built on urllib."""

from __future__ import annotations

import base64
import binascii
import json
import os
from typing import Any, Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

_AUTO_TOKEN = object()


class GitHubAPIError(RuntimeError):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class GitHubClient:
    """Performs read-only GitHub API calls, optionally authenticated."""

    DEFAULT_BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"
    ENV_TOKEN_KEYS = ("FOLIOGEN_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN")

    def __init__(
        self,
        *,
        base_url: str | None = None,
        token: str | None | object = _AUTO_TOKEN,
        request_timeout: float = 30.0,
    ) -> None:
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.token = self._resolve_token(token)
        self.request_timeout = request_timeout

    def get_json(self, path: str) -> Any:
        """GET an API path and decode the JSON body."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        request = Request(url, headers=self._headers(), method="GET")
        try:
            with urlopen(request, timeout=self.request_timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = _extract_message(detail) or exc.reason
            raise GitHubAPIError(
                f"GitHub API request to {path} failed with status {exc.code}: {message}",
                status=exc.code,
            ) from exc
        except URLError as exc:
            raise GitHubAPIError(f"GitHub API request to {path} failed: {exc.reason}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise GitHubAPIError(f"GitHub API returned invalid JSON for {path}") from exc

    def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        return self.get_json(f"repos/{_segment(owner)}/{_segment(repo)}")

    def get_readme(self, owner: str, repo: str) -> str:
        payload = self.get_json(f"repos/{_segment(owner)}/{_segment(repo)}/readme")
        return decode_content(payload)

    def get_file(self, owner: str, repo: str, path: str) -> str:
        payload = self.get_json(
            f"repos/{_segment(owner)}/{_segment(repo)}/contents/{quote(path)}"
        )
        return decode_content(payload)

    def get_languages(self, owner: str, repo: str) -> dict[str, int]:
        payload = self.get_json(f"repos/{_segment(owner)}/{_segment(repo)}/languages")
        if not isinstance(payload, dict):
            return {}
        try:
            return {str(name): int(count) for name, count in payload.items()}
        except (TypeError, ValueError) as exc:
            raise GitHubAPIError(f"GitHub returned malformed language counts: {exc}") from exc

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
            "User-Agent": "foliogen",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _resolve_token(self, token: str | None | object) -> Optional[str]:
        if token is _AUTO_TOKEN:
            return self._first_env_value(self.ENV_TOKEN_KEYS)
        return token  # type: ignore[return-value]

    @staticmethod
    def _first_env_value(keys: Sequence[str]) -> str | None:
        for key in keys:
            value = os.getenv(key)
            if value:
                return value
        return None


def decode_content(payload: Any) -> str:
    """Decode the base64 ``content`` field of a contents/readme response."""
    if not isinstance(payload, dict):
        raise GitHubAPIError("GitHub contents response was not an object")
    content = payload.get("content")
    if not isinstance(content, str):
        raise GitHubAPIError("GitHub contents response has no content field")
    encoding = payload.get("encoding", "base64")
    if encoding != "base64":
        return content
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise GitHubAPIError(f"GitHub contents response is not valid base64: {exc}") from exc
    return raw.decode("utf-8", errors="replace")


def _segment(value: str) -> str:
    return quote(value, safe="")


def _extract_message(detail: str) -> str:
    if not detail:
        return ""
    try:
        payload = json.loads(detail)
    except json.JSONDecodeError:
        return detail.strip()
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return detail.strip()


__all__ = ["GitHubAPIError", "GitHubClient", "decode_content"]
