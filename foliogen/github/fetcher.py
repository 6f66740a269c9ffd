"""Assembles repository metadata from individual GitHub lookups."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Optional, TypeVar

from ..logging import get_logger
from ..models import RepoRef, RepositoryData
from .client import GitHubAPIError, GitHubClient

_T = TypeVar("_T")


class RepositoryFetchError(RuntimeError):
    """Raised when the primary repository lookup fails."""


class RepositoryNotFoundError(RepositoryFetchError):
    """Raised when the repository does not exist or is not visible."""


class RepositoryFetcher:
    """Fetches metadata, README and manifests for one repository.

    Only the metadata call is fatal. README, manifests and the language
    breakdown are best-effort: a 404 means the resource is absent, any other
    failure is logged and the value is treated as absent as well.
    """

    def __init__(self, client: GitHubClient | None = None) -> None:
        self.client = client or GitHubClient()
        self.logger = get_logger("fetcher")

    def fetch(self, ref: RepoRef) -> RepositoryData:
        self.logger.info("Fetching repository %s", ref.full_name)
        info = self._fetch_metadata(ref)

        readme = self._optional(
            ref, "README", lambda: self.client.get_readme(ref.owner, ref.repo)
        )
        package_json = self._optional(
            ref, "package.json", lambda: self._load_package_json(ref)
        )
        requirements = self._optional(
            ref,
            "requirements.txt",
            lambda: self.client.get_file(ref.owner, ref.repo, "requirements.txt"),
        )
        languages = self._optional(
            ref, "languages", lambda: self.client.get_languages(ref.owner, ref.repo)
        )

        topics = info.get("topics") or []
        return RepositoryData(
            name=str(info.get("name") or ref.repo),
            description=str(info.get("description") or ""),
            url=str(info.get("html_url") or f"https://github.com/{ref.full_name}"),
            homepage=info.get("homepage") or None,
            topics=[str(topic) for topic in topics],
            languages=languages or {},
            readme=readme,
            package_json=package_json,
            requirements=requirements,
            created_at=info.get("created_at"),
            updated_at=info.get("updated_at"),
            stars=int(info.get("stargazers_count") or 0),
            forks=int(info.get("forks_count") or 0),
        )

    def _fetch_metadata(self, ref: RepoRef) -> Dict[str, Any]:
        try:
            info = self.client.get_repository(ref.owner, ref.repo)
        except GitHubAPIError as exc:
            if exc.status == 404:
                raise RepositoryNotFoundError(
                    f"Repository {ref.full_name} not found (is it private? set GITHUB_TOKEN)"
                ) from exc
            raise RepositoryFetchError(
                f"Repository {ref.full_name} is unreachable: {exc}"
            ) from exc
        if not isinstance(info, dict):
            raise RepositoryFetchError(
                f"Unexpected metadata payload for repository {ref.full_name}"
            )
        return info

    def _load_package_json(self, ref: RepoRef) -> Optional[Dict[str, Any]]:
        text = self.client.get_file(ref.owner, ref.repo, "package.json")
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            self.logger.warning("Ignoring unparsable package.json in %s", ref.full_name)
            return None
        return data if isinstance(data, dict) else None

    def _optional(self, ref: RepoRef, label: str, call: Callable[[], _T]) -> Optional[_T]:
        try:
            return call()
        except GitHubAPIError as exc:
            if exc.status == 404:
                self.logger.debug("No %s found for %s", label, ref.full_name)
            else:
                self.logger.warning("Skipping %s for %s: %s", label, ref.full_name, exc)
            return None


__all__ = ["RepositoryFetchError", "RepositoryFetcher", "RepositoryNotFoundError"]
