"""GitHub access: URL parsing, REST client and repository fetching."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubClient
from .fetcher import RepositoryFetchError, RepositoryFetcher, RepositoryNotFoundError
from .urls import InvalidRepositoryURL, parse_repo_url

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "InvalidRepositoryURL",
    "RepositoryFetchError",
    "RepositoryFetcher",
    "RepositoryNotFoundError",
    "parse_repo_url",
]
