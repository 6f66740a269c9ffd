"""In-memory stand-in for the GitHub REST API, patched over ``urlopen``."""

from __future__ import annotations

import base64
import io
import json
from typing import Any, Dict, List, Tuple
from urllib.error import HTTPError, URLError


class FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False


def contents_payload(text: str) -> Dict[str, Any]:
    """Build a contents API response with base64 content split across lines."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    chunked = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
    return {"content": chunked, "encoding": "base64"}


class FakeGitHub:
    """Routes API paths to canned payloads; unknown paths answer 404."""

    BASE_URL = "https://api.github.com/"

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, Any]] = {}
        self.requests: List[Dict[str, Any]] = []
        self.unreachable = False

    def add(self, path: str, payload: Any, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def add_repository(
        self,
        owner: str,
        repo: str,
        *,
        description: str = "A sample repository",
        topics: List[str] | None = None,
        languages: Dict[str, int] | None = None,
        readme: str | None = None,
        package_json: Dict[str, Any] | str | None = None,
        requirements: str | None = None,
    ) -> None:
        prefix = f"repos/{owner}/{repo}"
        self.add(
            prefix,
            {
                "name": repo,
                "description": description,
                "html_url": f"https://github.com/{owner}/{repo}",
                "homepage": None,
                "topics": topics or [],
                "created_at": "2026-01-02T03:04:05Z",
                "updated_at": "2026-02-03T04:05:06Z",
                "stargazers_count": 12,
                "forks_count": 3,
            },
        )
        if languages is not None:
            self.add(f"{prefix}/languages", languages)
        if readme is not None:
            self.add(f"{prefix}/readme", contents_payload(readme))
        if package_json is not None:
            text = package_json if isinstance(package_json, str) else json.dumps(package_json)
            self.add(f"{prefix}/contents/package.json", contents_payload(text))
        if requirements is not None:
            self.add(f"{prefix}/contents/requirements.txt", contents_payload(requirements))

    def urlopen(self, request, timeout=None):  # type: ignore[no-untyped-def]
        url = request.full_url
        self.requests.append(
            {
                "url": url,
                "headers": {k.lower(): v for k, v in request.header_items()},
                "timeout": timeout,
            }
        )
        if self.unreachable:
            raise URLError("connection refused")
        path = url[len(self.BASE_URL):] if url.startswith(self.BASE_URL) else url
        status, payload = self.routes.get(path, (404, {"message": "Not Found"}))
        body = json.dumps(payload).encode("utf-8")
        if status >= 400:
            raise HTTPError(url, status, "error", None, io.BytesIO(body))  # type: ignore[arg-type]
        return FakeResponse(body)

    def paths(self) -> List[str]:
        return [entry["url"][len(self.BASE_URL):] for entry in self.requests]


__all__ = ["FakeGitHub", "FakeResponse", "contents_payload"]
